"""Data types for the WebIDL AST and generation results"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional


class Generic(Enum):
    """Generic wrapper around an IDL type"""
    NONE = ""
    SEQUENCE = "sequence"
    PROMISE = "Promise"
    RECORD = "record"


@dataclass
class IDLType:
    """Type descriptor: a base name, a union, or a generic wrapper"""
    base_name: str = ""
    nullable: bool = False
    union: bool = False
    members: list["IDLType"] = field(default_factory=list)
    generic: Generic = Generic.NONE
    element_type: Optional["IDLType"] = None


@dataclass
class DefaultValue:
    """Default value descriptor (boolean, number, string, null, ...)"""
    type: str
    value: Any = None


@dataclass
class ExtendedAttribute:
    """Extended attribute such as [Exposed=Window]"""
    name: str
    rhs: Any = None


# ──────────────────────────────────────────────────────────────
# Members
# ──────────────────────────────────────────────────────────────

@dataclass
class Argument:
    """Operation argument"""
    name: str
    idl_type: Optional[IDLType] = None
    optional: bool = False
    default: Optional[DefaultValue] = None
    variadic: bool = False


@dataclass
class Attribute:
    """Interface attribute"""
    name: str
    idl_type: Optional[IDLType] = None
    readonly: bool = False
    special: str = ""


@dataclass
class Operation:
    """Interface operation; name is empty for unnamed special operations"""
    name: str = ""
    idl_type: Optional[IDLType] = None
    arguments: list[Argument] = field(default_factory=list)
    special: str = ""


@dataclass
class Constant:
    """Interface constant"""
    name: str
    idl_type: Optional[IDLType] = None
    value: Any = None


@dataclass
class Constructor:
    """Interface constructor"""
    arguments: list[Argument] = field(default_factory=list)


@dataclass
class Field:
    """Dictionary member"""
    name: str
    idl_type: Optional[IDLType] = None
    required: bool = False
    default: Optional[DefaultValue] = None


@dataclass
class OtherMember:
    """iterable, maplike, setlike and other declarations that are not generated"""
    kind: str


# ──────────────────────────────────────────────────────────────
# Definitions
# ──────────────────────────────────────────────────────────────

@dataclass
class Definition:
    """Base for all top-level definitions"""
    name: str
    partial: bool = False
    ext_attrs: list[ExtendedAttribute] = field(default_factory=list)

    kind: ClassVar[str] = ""


@dataclass
class Interface(Definition):
    members: list = field(default_factory=list)
    inheritance: Optional[str] = None

    kind: ClassVar[str] = "interface"


@dataclass
class Mixin(Definition):
    members: list = field(default_factory=list)

    kind: ClassVar[str] = "interface mixin"


@dataclass
class CallbackInterface(Definition):
    members: list = field(default_factory=list)

    kind: ClassVar[str] = "callback interface"


@dataclass
class Dictionary(Definition):
    members: list[Field] = field(default_factory=list)
    inheritance: Optional[str] = None

    kind: ClassVar[str] = "dictionary"


@dataclass
class Namespace(Definition):
    members: list = field(default_factory=list)

    kind: ClassVar[str] = "namespace"


@dataclass
class Enumeration(Definition):
    values: list[str] = field(default_factory=list)

    kind: ClassVar[str] = "enum"


@dataclass
class Callback(Definition):
    idl_type: Optional[IDLType] = None
    arguments: list[Argument] = field(default_factory=list)

    kind: ClassVar[str] = "callback"


@dataclass
class Typedef(Definition):
    idl_type: Optional[IDLType] = None

    kind: ClassVar[str] = "typedef"


@dataclass
class Includes(Definition):
    """`Target includes Mixin;` statement, named after its target"""
    mixin: str = ""

    kind: ClassVar[str] = "includes"


@dataclass
class OtherDefinition(Definition):
    """Definition of a kind this package does not model"""
    type: str = ""

    @property
    def kind(self) -> str:
        return self.type


# Kinds whose partial definitions are merged into a base
MERGEABLE_KINDS = (Interface, Dictionary, Namespace)


# ──────────────────────────────────────────────────────────────
# Results
# ──────────────────────────────────────────────────────────────

ORPHAN_PARTIAL = "orphan-partial"
UNRESOLVED_INCLUDES = "unresolved-includes"
GENERATION_FAILURE = "generation-failure"


@dataclass(frozen=True)
class Diagnostic:
    """Recoverable problem found while merging or generating"""
    kind: str
    definition_type: str
    name: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.definition_type} {self.name}: {self.message}"


@dataclass(frozen=True)
class MergeResult:
    """Merged definitions plus the name lookup built while merging"""
    definitions: tuple = ()
    lookup: Mapping[str, Definition] = field(default_factory=lambda: MappingProxyType({}))
    diagnostics: tuple = ()


@dataclass(frozen=True)
class DefinitionResult:
    """Outcome of generating one definition"""
    definition: Definition
    text: Optional[str] = None
    diagnostic: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


@dataclass
class GenerationResult:
    """Per-definition outcomes of one run, in merge order"""
    results: list[DefinitionResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def blocks(self) -> list[str]:
        return [r.text for r in self.results if r.ok]

    @property
    def failures(self) -> list[DefinitionResult]:
        return [r for r in self.results if not r.ok]
