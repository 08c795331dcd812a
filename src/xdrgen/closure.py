"""Dependency closure of the always-compiled root types.

Types reachable from `ROOT_MAIN_TYPES` form the default API surface of the
generated crate. Everything else is emitted behind the `all-types` feature.
"""

import logging
from collections.abc import Iterable, Mapping

from .errors import MissingTypeError
from .models import (
    AliasDefinition,
    StructDefinition,
    TypeDefinition,
    UnionDefinition,
)
from .references import referenced_names

ROOT_MAIN_TYPES: tuple[str, ...] = (
    "TransactionEnvelope",
    "TransactionResult",
    "TransactionMeta",
    "EnvelopeType",
    "TransactionSignaturePayload",
)


def determine_dependencies(definition: TypeDefinition) -> set[str]:
    """Return the names of the schema types a definition refers to directly."""
    dependencies: set[str] = set()

    if isinstance(definition, AliasDefinition):
        dependencies |= referenced_names(definition.target)
    elif isinstance(definition, StructDefinition):
        for reference in definition.members.values():
            dependencies |= referenced_names(reference)
    elif isinstance(definition, UnionDefinition):
        dependencies |= referenced_names(definition.discriminant)
        for reference in definition.arms.values():
            dependencies |= referenced_names(reference)

    return dependencies


def resolve(
    types: Mapping[str, TypeDefinition],
    roots: Iterable[str] = ROOT_MAIN_TYPES,
) -> frozenset[str]:
    """Compute the set of type names transitively required by `roots`.

    Args:
        types: Type map keyed by type name.
        roots: Entry-point type names.

    Returns:
        Every root plus every type reachable from a root.

    Raises:
        MissingTypeError: If a root or one of its dependencies is not in `types`.
    """
    log = logging.getLogger("xdrgen")

    remaining = list(roots)
    reachable: set[str] = set()

    while remaining:
        type_name = remaining.pop()
        if type_name not in types:
            raise MissingTypeError(type_name)
        reachable.add(type_name)

        for dependency in sorted(determine_dependencies(types[type_name])):
            if dependency not in reachable and dependency not in remaining:
                remaining.append(dependency)

    log.debug(f"Resolved {len(reachable)} always-compiled types")
    return frozenset(reachable)
