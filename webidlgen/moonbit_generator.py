"""MoonBit Generator - turns a list of WebIDL definitions into one MoonBit source file"""

import logging
from typing import Iterable, Optional

from .types import (
    Definition, Interface, Dictionary,
    Diagnostic, DefinitionResult, GenerationResult, GENERATION_FAILURE,
)
from .merger import merge_partials, resolve_includes, inheritance_chain
from .interface_generator import InterfaceGenerator
from .dictionary_generator import DictionaryGenerator
from .common_generator import CommonGenerator

logger = logging.getLogger(__name__)


class MoonBitGenerator:
    """Merges partial definitions once, then generates each definition independently.

    A definition that fails to generate is reported in the result and skipped;
    the rest of the batch is still generated.
    """

    def __init__(self, definitions: Iterable[Definition], prefix: str = "webapi"):
        self.merged = resolve_includes(merge_partials(definitions))
        self.prefix = prefix
        self.interfaces = InterfaceGenerator(self.merged.lookup, prefix)
        self.dictionaries = DictionaryGenerator(self.merged.lookup, prefix)
        self.common = CommonGenerator()

    @property
    def definitions(self) -> tuple:
        return self.merged.definitions

    def generate(self, names: Optional[Iterable[str]] = None) -> GenerationResult:
        """Generate every interface and dictionary, optionally only those in `names`.

        Interfaces selected by `names` also pull in their ancestors, whose
        traits the selected traits extend.
        """
        wanted = self._with_ancestors(names) if names is not None else None
        result = GenerationResult(diagnostics=list(self.merged.diagnostics))

        for definition in self.merged.definitions:
            if wanted is not None and definition.name not in wanted:
                continue
            if not isinstance(definition, (Interface, Dictionary)):
                logger.debug("Skipping %s %s", definition.kind, definition.name)
                continue

            outcome = self.generate_definition(definition)
            result.results.append(outcome)
            if outcome.diagnostic:
                result.diagnostics.append(outcome.diagnostic)

        return result

    def _with_ancestors(self, names: Iterable[str]) -> set:
        wanted = set(names)
        for name in list(wanted):
            definition = self.merged.lookup.get(name)
            if isinstance(definition, Interface):
                ancestors = inheritance_chain(definition, self.merged.lookup)
                if ancestors:
                    logger.debug("Including ancestors of %s: %s", name, ", ".join(ancestors))
                wanted.update(ancestors)
        return wanted

    def generate_definition(self, definition: Definition) -> DefinitionResult:
        try:
            if isinstance(definition, Interface):
                text = self.interfaces.generate(definition)
            elif isinstance(definition, Dictionary):
                text = self.dictionaries.generate(definition)
            else:
                raise TypeError(f"cannot generate {definition.kind} definitions")
        except Exception as exc:
            logger.error("Error generating %s %s: %s", definition.kind, definition.name, exc)
            return DefinitionResult(definition, diagnostic=Diagnostic(
                kind=GENERATION_FAILURE,
                definition_type=definition.kind,
                name=definition.name,
                message=str(exc) or type(exc).__name__,
            ))
        return DefinitionResult(definition, text=text)

    def generate_file(self, names: Optional[Iterable[str]] = None) -> str:
        """Generate the complete bindings file"""
        return self.render(self.generate(names))

    def render(self, result: GenerationResult) -> str:
        lines = [self.common.generate_file_header()]
        lines.extend(result.blocks)
        return "\n".join(lines)

    def generate_prelude(self) -> str:
        return self.common.generate_prelude()
