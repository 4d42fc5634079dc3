"""Depth-first traversal of mapping trees."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from gridmap.model.common import MappingNode, WrapperMapping
from gridmap.model.fields import FieldType

from ._paths import FieldPath


class Leaf(NamedTuple):
    """One configured descriptor and the message field it addresses."""

    path: FieldPath
    label: str
    descriptor: FieldType


def iter_leaves(
    node: MappingNode,
    path: FieldPath = FieldPath(),
    label: str = "mapping",
) -> Iterator[Leaf]:
    """Yield every descriptor under *node* in document order.

    Children follow the document's key order, so of two leaves bound
    to one name the one written last is registered last.  Absent
    children are skipped.  A wrapper's ``value`` descriptor
    addresses the wrapper's own field; list items address their index.
    """
    fields = type(node).model_fields
    for name in node.configured_fields():
        info = fields[name]
        child = getattr(node, name)
        if child is None:
            continue
        child_label = f"{label}.{info.alias or name}"
        child_path = path.child(name)
        if isinstance(child, FieldType):
            yield Leaf(child_path, child_label, child)
        elif isinstance(child, WrapperMapping):
            yield Leaf(child_path, f"{child_label}.value", child.value)
        elif isinstance(child, MappingNode):
            yield from iter_leaves(child, child_path, child_label)
        elif isinstance(child, list):
            for i, item in enumerate(child):
                yield from iter_leaves(item, child_path.child(i), f"{child_label}[{i}]")
