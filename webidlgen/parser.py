"""Reader for the JSON AST produced by the webidl2 parser"""

import json
from typing import Any, Optional, Union

from .types import (
    IDLType, Generic, DefaultValue, ExtendedAttribute,
    Argument, Attribute, Operation, Constant, Constructor, Field, OtherMember,
    Definition, Interface, Mixin, CallbackInterface, Dictionary, Namespace,
    Enumeration, Callback, Typedef, Includes, OtherDefinition,
)


class ASTError(ValueError):
    """Raised when the input is not a webidl2 definition list"""


# Generic names as spelled by webidl2
GENERICS = {
    "sequence": Generic.SEQUENCE,
    "FrozenArray": Generic.SEQUENCE,
    "ObservableArray": Generic.SEQUENCE,
    "Promise": Generic.PROMISE,
    "record": Generic.RECORD,
}


class ASTParser:
    """Converts webidl2 JSON nodes into definition records"""

    def __init__(self, nodes: Any):
        if not isinstance(nodes, list):
            raise ASTError(f"expected a list of definitions, got {type(nodes).__name__}")
        self.nodes = nodes

    @classmethod
    def from_json(cls, content: str) -> "ASTParser":
        try:
            nodes = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ASTError(f"invalid JSON: {exc}") from exc
        return cls(nodes)

    def parse(self) -> list[Definition]:
        definitions = []
        for index, node in enumerate(self.nodes):
            if not isinstance(node, dict):
                raise ASTError(f"definition #{index} is not an object")
            definitions.append(self._parse_definition(node))
        return definitions

    def _parse_definition(self, node: dict) -> Definition:
        kind = node.get("type", "")
        name = node.get("name") or node.get("target") or ""
        common = dict(
            name=name,
            partial=bool(node.get("partial")),
            ext_attrs=self._parse_ext_attrs(node.get("extAttrs")),
        )

        if kind == "interface":
            return Interface(
                members=self._parse_members(node),
                inheritance=node.get("inheritance"),
                **common,
            )
        if kind == "interface mixin":
            return Mixin(members=self._parse_members(node), **common)
        if kind == "callback interface":
            return CallbackInterface(members=self._parse_members(node), **common)
        if kind == "dictionary":
            return Dictionary(
                members=self._parse_members(node),
                inheritance=node.get("inheritance"),
                **common,
            )
        if kind == "namespace":
            return Namespace(members=self._parse_members(node), **common)
        if kind == "enum":
            values = [v.get("value", "") if isinstance(v, dict) else v
                      for v in node.get("values") or []]
            return Enumeration(values=values, **common)
        if kind == "callback":
            return Callback(
                idl_type=self.parse_type(node.get("idlType")),
                arguments=self._parse_arguments(node.get("arguments")),
                **common,
            )
        if kind == "typedef":
            return Typedef(idl_type=self.parse_type(node.get("idlType")), **common)
        if kind == "includes":
            return Includes(mixin=node.get("includes", ""), **common)
        return OtherDefinition(type=kind, **common)

    def _parse_members(self, node: dict) -> list:
        return [self._parse_member(m) for m in node.get("members") or []]

    def _parse_member(self, node: dict):
        kind = node.get("type", "")
        if kind == "attribute":
            return Attribute(
                name=node.get("name", ""),
                idl_type=self.parse_type(node.get("idlType")),
                readonly=bool(node.get("readonly")),
                special=node.get("special") or "",
            )
        if kind == "operation":
            return Operation(
                name=node.get("name") or "",
                idl_type=self.parse_type(node.get("idlType")),
                arguments=self._parse_arguments(node.get("arguments")),
                special=node.get("special") or "",
            )
        if kind == "constructor":
            return Constructor(arguments=self._parse_arguments(node.get("arguments")))
        if kind == "const":
            value = node.get("value")
            return Constant(
                name=node.get("name", ""),
                idl_type=self.parse_type(node.get("idlType")),
                value=value.get("value") if isinstance(value, dict) else value,
            )
        if kind == "field":
            return Field(
                name=node.get("name", ""),
                idl_type=self.parse_type(node.get("idlType")),
                required=bool(node.get("required")),
                default=self._parse_default(node.get("default")),
            )
        return OtherMember(kind=kind)

    def _parse_arguments(self, nodes: Optional[list]) -> list[Argument]:
        return [
            Argument(
                name=arg.get("name", ""),
                idl_type=self.parse_type(arg.get("idlType")),
                optional=bool(arg.get("optional")),
                default=self._parse_default(arg.get("default")),
                variadic=bool(arg.get("variadic")),
            )
            for arg in nodes or []
        ]

    def _parse_default(self, node: Optional[dict]) -> Optional[DefaultValue]:
        if not node:
            return None
        return DefaultValue(type=node.get("type", ""), value=node.get("value"))

    def _parse_ext_attrs(self, nodes: Optional[list]) -> list[ExtendedAttribute]:
        attrs = []
        for attr in nodes or []:
            rhs = attr.get("rhs")
            if isinstance(rhs, dict):
                rhs = rhs.get("value")
            attrs.append(ExtendedAttribute(name=attr.get("name", ""), rhs=rhs))
        return attrs

    @classmethod
    def parse_type(cls, node: Union[dict, str, None]) -> Optional[IDLType]:
        """Read an idlType descriptor; a bare string is a base name"""
        if node is None:
            return None
        if isinstance(node, str):
            return IDLType(base_name=node)

        nullable = bool(node.get("nullable"))
        inner = node.get("idlType")

        if node.get("union"):
            members = [cls.parse_type(t) for t in inner or []]
            return IDLType(nullable=nullable, union=True, members=members)

        generic = GENERICS.get(node.get("generic") or "")
        if generic is not None:
            args = inner if isinstance(inner, list) else [inner]
            args = [a for a in args if a is not None]
            # record<K, V> keeps its value type
            element = args[-1] if args else None
            return IDLType(
                nullable=nullable,
                generic=generic,
                element_type=cls.parse_type(element),
            )

        if isinstance(inner, list):
            # Some producers wrap a plain type in a one-element list
            first = cls.parse_type(inner[0]) if inner else None
            base_name = first.base_name if first else ""
            return IDLType(base_name=base_name, nullable=nullable)

        if isinstance(inner, dict):
            wrapped = cls.parse_type(inner)
            wrapped.nullable = wrapped.nullable or nullable
            return wrapped

        return IDLType(base_name=inner or "", nullable=nullable)
