"""Merging of partial definitions and interface mixins into their targets"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable

from .types import (
    Definition, Interface, Mixin, Includes, MERGEABLE_KINDS,
    Diagnostic, MergeResult, ORPHAN_PARTIAL, UNRESOLVED_INCLUDES,
)

logger = logging.getLogger(__name__)


def _copy(definition: Definition) -> Definition:
    """Shallow copy with its own member and extended attribute lists"""
    return replace(
        definition,
        members=list(definition.members),
        ext_attrs=list(definition.ext_attrs),
    )


def merge_partials(definitions: Iterable[Definition]) -> MergeResult:
    """Fold partial interfaces, dictionaries and namespaces into their bases.

    Bases keep the order in which they were first seen and come first in the
    result, followed by every other definition in its original order. A
    partial without a base is dropped and reported as a diagnostic. The input
    definitions are not modified.
    """
    bases: dict[str, Definition] = {}
    partials = []
    others = []

    for definition in definitions:
        if isinstance(definition, MERGEABLE_KINDS):
            if definition.partial:
                partials.append(definition)
            elif definition.name in bases:
                # First sighting wins
                logger.debug("Ignoring duplicate %s %s", definition.kind, definition.name)
            else:
                bases[definition.name] = _copy(definition)
        else:
            others.append(definition)

    diagnostics = []
    for partial in partials:
        base = bases.get(partial.name)
        if base is None:
            logger.warning("Partial %s %s has no base definition", partial.kind, partial.name)
            diagnostics.append(Diagnostic(
                kind=ORPHAN_PARTIAL,
                definition_type=partial.kind,
                name=partial.name,
                message="partial definition has no base definition",
            ))
            continue
        base.members.extend(partial.members)
        base.ext_attrs.extend(partial.ext_attrs)

    return MergeResult(
        definitions=tuple(bases.values()) + tuple(others),
        lookup=MappingProxyType(dict(bases)),
        diagnostics=tuple(diagnostics),
    )


def resolve_includes(merged: MergeResult) -> MergeResult:
    """Copy mixin members into every interface that includes the mixin"""
    statements = [d for d in merged.definitions if isinstance(d, Includes)]
    if not statements:
        return merged

    mixins: dict[str, list[Mixin]] = {}
    for definition in merged.definitions:
        if isinstance(definition, Mixin):
            mixins.setdefault(definition.name, []).append(definition)

    targets: dict[str, Interface] = {}
    diagnostics = list(merged.diagnostics)

    for statement in statements:
        target = targets.get(statement.name) or merged.lookup.get(statement.name)
        if not isinstance(target, Interface):
            problem = f"target interface {statement.name} is not defined"
        elif statement.mixin not in mixins:
            problem = f"mixin {statement.mixin} is not defined"
        else:
            problem = None

        if problem:
            logger.warning("Cannot resolve %s includes %s: %s",
                           statement.name, statement.mixin, problem)
            diagnostics.append(Diagnostic(
                kind=UNRESOLVED_INCLUDES,
                definition_type=statement.kind,
                name=statement.name,
                message=problem,
            ))
            continue

        if statement.name not in targets:
            targets[statement.name] = _copy(target)
        for mixin in mixins[statement.mixin]:
            targets[statement.name].members.extend(mixin.members)

    definitions = tuple(
        targets.get(d.name, d) if isinstance(d, Interface) else d
        for d in merged.definitions
    )
    lookup = dict(merged.lookup)
    lookup.update(targets)

    return MergeResult(
        definitions=definitions,
        lookup=MappingProxyType(lookup),
        diagnostics=tuple(diagnostics),
    )


def inheritance_chain(definition: Definition, lookup) -> list[str]:
    """Ancestor names, nearest first.

    Only ancestors of the same kind found in `lookup` are listed; the chain
    stops at the first unknown name or on a cycle.
    """
    chain = []
    seen = {definition.name}
    parent = getattr(definition, "inheritance", None)
    while parent and parent not in seen:
        ancestor = lookup.get(parent)
        if not isinstance(ancestor, type(definition)):
            break
        chain.append(parent)
        seen.add(parent)
        parent = getattr(ancestor, "inheritance", None)
    return chain
