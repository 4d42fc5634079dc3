"""Semantic checks on a mapping tree, run once before any visit."""

from __future__ import annotations

import logging

from gridmap.model.fields import LITERAL_KINDS, SCALAR_KINDS, EnumFieldType, FieldKind
from gridmap.model.loader import MappingConfigError
from gridmap.model.switch import ProfileMapping

from ._tree import iter_leaves

logger = logging.getLogger(__name__)


def collect_problems(mapping: ProfileMapping) -> list[str]:
    """Every configuration problem in *mapping*, in document order.

    Duplicate external names are not problems; they are logged as
    warnings and the last binding wins.
    """
    if mapping.mapping is None:
        return []

    problems: list[str] = []
    seen: dict[str, str] = {}
    for leaf in iter_leaves(mapping.mapping):
        desc = leaf.descriptor
        kind = desc.kind

        if kind is FieldKind.MAPPED:
            if desc.name is None:
                problems.append(f"{leaf.label}: mapped field has no 'name'")
            elif desc.name in seen:
                logger.warning(
                    "Duplicate name '%s' at %s (also at %s); the last one wins",
                    desc.name, leaf.label, seen[desc.name],
                )
                seen[desc.name] = leaf.label
            else:
                seen[desc.name] = leaf.label

            if isinstance(desc, EnumFieldType):
                if not desc.mapping:
                    problems.append(f"{leaf.label}: mapped enum has no 'mapping' entries")
                else:
                    for i, entry in enumerate(desc.mapping):
                        if entry.name is None or entry.value is None:
                            problems.append(
                                f"{leaf.label}: mapping entry {i} needs both 'name' and 'value'"
                            )

        elif kind in LITERAL_KINDS and desc.value_kind in SCALAR_KINDS:
            if desc.literal is None:
                problems.append(f"{leaf.label}: {kind.value} field has no 'value'")

    return problems


def validate_mapping(mapping: ProfileMapping) -> None:
    """Raise ``MappingConfigError`` listing every problem in *mapping*."""
    problems = collect_problems(mapping)
    if problems:
        details = "\n  ".join(problems)
        raise MappingConfigError(
            f"Profile '{mapping.name}' has {len(problems)} configuration "
            f"error(s):\n  {details}"
        )
