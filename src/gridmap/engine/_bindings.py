"""Setters, getters and the table that holds them.

Setters and getters are small callables parameterized by the
``FieldPath`` of the leaf they serve.  They close over configuration
only, never over a message, so one table is reused for every message
instance of the profile.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence, Union

from pydantic import BaseModel

from gridmap.model.commands import (
    BoolCommand,
    Command,
    ControlMappingOutput,
    IntCommand,
    RealCommand,
    StringCommand,
)
from gridmap.model.fields import INTEGER_KINDS, REAL_KINDS, EnumMapping, ValueKind
from gridmap.schema.enums import EnumDescriptor

from ._paths import FieldPath
from ._values import parse_bit_string

logger = logging.getLogger(__name__)

Setter = Callable[[BaseModel, Any], None]
Getter = Callable[[BaseModel], Union[Command, None]]


# ---------------------------------------------------------------------------
# Setters
# ---------------------------------------------------------------------------

_CONVERTERS: dict[ValueKind, Callable[[Any], Any]] = {
    ValueKind.STRING: str,
    ValueKind.BOOL: bool,
    ValueKind.INT32: int,
    ValueKind.INT64: int,
    ValueKind.FLOAT: float,
    ValueKind.DOUBLE: float,
}


class ValueSetter:
    """Writes an incoming value at a fixed path, converted to the leaf kind.

    Real values bound to integer leaves are truncated toward zero.  A
    value that has no integer (NaN, infinity) is logged and not written.
    """

    __slots__ = ("path", "value_kind")

    def __init__(self, path: FieldPath, value_kind: ValueKind) -> None:
        self.path = path
        self.value_kind = value_kind

    def __call__(self, message: BaseModel, value: Any) -> None:
        convert = _CONVERTERS.get(self.value_kind)
        if convert is not None:
            try:
                value = convert(value)
            except (TypeError, ValueError, OverflowError) as exc:
                logger.error(
                    "Unable to write %r to %s (%s): %s",
                    value, self.path, self.value_kind.value, exc,
                )
                return
        self.path.set(message, value)

    def __repr__(self) -> str:
        return f"ValueSetter({self.path}, {self.value_kind.value})"


def _entry_variant(descriptor: EnumDescriptor, entry: EnumMapping) -> Any:
    """Enum variant an entry stands for.

    An entry named after a variant (``DbPosKind_closed`` or ``closed``)
    stands for that variant.  Otherwise its code is taken as the
    variant's numeric code.
    """
    if entry.name is not None:
        variant = descriptor.from_name(entry.name)
        if variant is not None:
            return variant
    if entry.value is not None and float(entry.value).is_integer():
        return descriptor.from_code(int(entry.value))
    return None


def _parse_decimal(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


class EnumSetter:
    """Writes an enum leaf from a symbolic name or an encoded code.

    The input is first matched against the configured names.  Failing
    that it is decoded as a number (a bit-pattern string when serving,
    a decimal string otherwise) and matched against the configured codes.
    The matched entry must stand for a variant of the leaf's enum; any
    failure is logged and leaves the message untouched.
    """

    __slots__ = ("path", "descriptor", "entries", "is_server")

    def __init__(
        self,
        path: FieldPath,
        descriptor: EnumDescriptor,
        entries: Sequence[EnumMapping],
        *,
        is_server: bool = False,
    ) -> None:
        self.path = path
        self.descriptor = descriptor
        self.entries = tuple(entries)
        self.is_server = is_server

    def _match(self, value: str) -> EnumMapping | None:
        for entry in self.entries:
            if entry.name == value:
                return entry
        code = parse_bit_string(value) if self.is_server else _parse_decimal(value)
        if code is None:
            return None
        for entry in self.entries:
            if entry.value == code:
                return entry
        return None

    def __call__(self, message: BaseModel, value: str) -> None:
        enum_name = self.descriptor.enum_cls.__name__
        entry = self._match(value)
        if entry is None:
            logger.error("Unable to map %s to enum %s", value, enum_name)
            return
        member = _entry_variant(self.descriptor, entry)
        if member is None:
            logger.error(
                "Configured entry '%s' (%s) is not a valid %s",
                entry.name, entry.value, enum_name,
            )
            return
        self.path.set(message, member)

    def __repr__(self) -> str:
        return f"EnumSetter({self.path}, {self.descriptor.enum_cls.__name__})"


# ---------------------------------------------------------------------------
# Getters
# ---------------------------------------------------------------------------

class ValueGetter:
    """Reads a primitive leaf into a command for one named output."""

    __slots__ = ("path", "name", "value_kind", "priority")

    def __init__(
        self, path: FieldPath, name: str, value_kind: ValueKind, priority: int = 0,
    ) -> None:
        self.path = path
        self.name = name
        self.value_kind = value_kind
        self.priority = priority

    def __call__(self, message: BaseModel) -> Command | None:
        value = self.path.get(message)
        if value is None:
            return None
        output = ControlMappingOutput(name=self.name, priority=self.priority)
        kind = self.value_kind
        if kind is ValueKind.BOOL:
            output.bool_value = bool(value)
            return BoolCommand(value=bool(value), outputs=[output])
        if kind in INTEGER_KINDS:
            output.real_value = float(value)
            return IntCommand(value=int(value), outputs=[output])
        if kind in REAL_KINDS:
            output.real_value = float(value)
            return RealCommand(value=float(value), outputs=[output])
        if kind is ValueKind.STRING:
            output.string_value = str(value)
            return StringCommand(value=str(value), outputs=[output])
        return None

    def __repr__(self) -> str:
        return f"ValueGetter({self.path}, {self.name!r})"


class EnumGetter:
    """Reads an enum leaf and reports the configured entry for its variant.

    Wire code -> canonical variant -> first configured entry standing for
    that variant.  The command carries the wire code; its output carries
    the entry's configured code.  Both lookups log an error and yield
    ``None`` when they fail.
    """

    __slots__ = ("path", "name", "descriptor", "entries", "priority")

    def __init__(
        self,
        path: FieldPath,
        name: str,
        descriptor: EnumDescriptor,
        entries: Sequence[EnumMapping],
        priority: int = 0,
    ) -> None:
        self.path = path
        self.name = name
        self.descriptor = descriptor
        self.entries = tuple(entries)
        self.priority = priority

    def __call__(self, message: BaseModel) -> Command | None:
        raw = self.path.get(message)
        if raw is None:
            return None
        enum_name = self.descriptor.enum_cls.__name__
        code = int(raw)
        variant = self.descriptor.from_code(code)
        if variant is None:
            logger.error("Unable to map value '%s' from message to '%s'", code, enum_name)
            return None
        for entry in self.entries:
            if _entry_variant(self.descriptor, entry) is variant:
                output = ControlMappingOutput(
                    name=self.name, real_value=entry.value, priority=self.priority,
                )
                return RealCommand(value=float(code), outputs=[output])
        logger.error(
            "No entry configured for %s in '%s' (%s)", variant.name, self.name, enum_name,
        )
        return None

    def __repr__(self) -> str:
        return f"EnumGetter({self.path}, {self.name!r})"


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

class BindingTable:
    """External key -> setter maps, one per value family, plus getters.

    Enum setters share ``string_setters`` since enum input arrives as
    text.  Registering a key twice replaces the earlier setter.
    """

    def __init__(self) -> None:
        self.string_setters: dict[str, Setter] = {}
        self.real_setters: dict[str, Setter] = {}
        self.bool_setters: dict[str, Setter] = {}
        self.quality_setters: dict[str, Setter] = {}
        self.timestamp_setters: dict[str, Setter] = {}
        self.getters: list[Getter] = []

    def table_for(self, kind: ValueKind) -> dict[str, Setter]:
        if kind in (ValueKind.STRING, ValueKind.ENUM):
            return self.string_setters
        if kind is ValueKind.BOOL:
            return self.bool_setters
        if kind in INTEGER_KINDS or kind in REAL_KINDS:
            return self.real_setters
        if kind is ValueKind.QUALITY:
            return self.quality_setters
        return self.timestamp_setters

    def add_setter(self, kind: ValueKind, key: str, setter: Setter) -> None:
        logger.debug("Registered %s setter for %s: %r", kind.value, key, setter)
        self.table_for(kind)[key] = setter

    def add_getter(self, getter: Getter) -> None:
        logger.debug("Registered getter %r", getter)
        self.getters.append(getter)

    def __len__(self) -> int:
        return (
            len(self.string_setters) + len(self.real_setters)
            + len(self.bool_setters) + len(self.quality_setters)
            + len(self.timestamp_setters)
        )
