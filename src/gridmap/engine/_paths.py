"""Field paths into nested message models.

A ``FieldPath`` is an ordered list of steps, attribute names (``str``)
and list positions (``int``), applied one after another from the
message root.  Reading short-circuits on the first absent step; writing
builds every missing substructure on the way down.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel

Step = Union[str, int]


def _unwrap_optional(annotation: Any) -> Any:
    """Strip ``None`` from ``X | None``; other annotations pass through."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return _unwrap_optional(args[0])
    return annotation


@lru_cache(maxsize=None)
def _resolve(root_cls: type[BaseModel], steps: tuple[Step, ...]) -> tuple[Any, ...]:
    """Static type reached after each step, starting at *root_cls*."""
    resolved = []
    current: Any = root_cls
    for step in steps:
        if isinstance(step, int):
            if get_origin(current) is not list:
                raise TypeError(f"Cannot index into {current!r} with [{step}]")
            current = _unwrap_optional(get_args(current)[0])
        else:
            fields = getattr(current, "model_fields", None)
            if fields is None or step not in fields:
                owner = getattr(current, "__name__", repr(current))
                raise AttributeError(f"{owner} has no field {step!r}")
            current = _unwrap_optional(fields[step].annotation)
        resolved.append(current)
    return tuple(resolved)


def _ensure_slot(items: list, index: int, item_cls: Any) -> Any:
    while len(items) <= index:
        items.append(item_cls())
    return items[index]


@dataclass(frozen=True)
class FieldPath:
    """Ordered access path from a message root to one field."""

    steps: tuple[Step, ...] = ()

    def child(self, step: Step) -> FieldPath:
        return FieldPath(self.steps + (step,))

    def get(self, message: Any) -> Any:
        """Value at the path, or ``None`` if any step is absent."""
        current = message
        for step in self.steps:
            if current is None:
                return None
            if isinstance(step, int):
                if step >= len(current):
                    return None
                current = current[step]
            else:
                current = getattr(current, step)
        return current

    def set(self, message: BaseModel, value: Any) -> None:
        """Write *value* at the path, creating absent parents.

        Missing submessages are built from the owning field's annotation;
        missing list positions are filled by appending default items.
        """
        if not self.steps:
            raise ValueError("Cannot set the message root")
        resolved = _resolve(type(message), self.steps)
        current: Any = message
        last = len(self.steps) - 1
        for i, step in enumerate(self.steps):
            if i == last:
                if isinstance(step, int):
                    _ensure_slot(current, step, resolved[i])
                    current[step] = value
                else:
                    setattr(current, step, value)
                return
            if isinstance(step, int):
                current = _ensure_slot(current, step, resolved[i])
                continue
            child = getattr(current, step)
            if child is None:
                setattr(current, step, resolved[i]())
                child = getattr(current, step)
            current = child

    def leaf_type(self, root_cls: type[BaseModel]) -> Any:
        """Annotation of the addressed field, with ``None`` stripped."""
        if not self.steps:
            return root_cls
        return _resolve(root_cls, self.steps)[-1]

    def __str__(self) -> str:
        parts: list[str] = []
        for step in self.steps:
            if isinstance(step, int):
                parts.append(f"[{step}]")
            else:
                parts.append(f".{step}" if parts else step)
        return "".join(parts)
