"""Profile visitor: binds a mapping tree to a message profile.

The visitor walks its mapping tree against a message once.  Literal
descriptors are written straight into the message; ``mapped``
descriptors become setters (external value -> message) and getters
(message -> ``Command``) keyed by the descriptor's ``name``.  The
resulting tables are then used against any number of new messages of
the same profile through the ``update_*`` / ``execute_commands`` methods.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from gridmap.model.commands import Command
from gridmap.model.fields import LITERAL_KINDS, SCALAR_KINDS, FieldKind, ValueKind
from gridmap.model.loader import load_mapping
from gridmap.model.switch import ProfileMapping
from gridmap.schema.commonmodule import Message, Quality, Timestamp
from gridmap.schema.enums import EnumDescriptor

from ._bindings import (
    BindingTable,
    EnumGetter,
    EnumSetter,
    Setter,
    ValueGetter,
    ValueSetter,
)
from ._paths import FieldPath
from ._priority import CommandPriorityMap
from ._tree import Leaf, iter_leaves
from ._validation import validate_mapping
from ._values import get_current_timestamp, new_uuid

logger = logging.getLogger(__name__)

_DEVICE_MRID = FieldPath(("mapping", "protected_switch", "conducting_equipment", "m_rid"))


class ProfileVisitor:
    """Base visitor for one message profile.

    Subclasses set ``profile_name``, ``mapping_type`` and
    ``message_type``; control profiles also set ``is_control``.

    Parameters
    ----------
    mapping
        Parsed mapping document for this profile.  It is validated
        immediately; problems raise ``MappingConfigError``.
    is_server
        Direction of use.  A server produces messages: it stamps
        literals, identifiers and times into control messages and
        decodes enum input given as bit patterns.
    """

    profile_name: ClassVar[str]
    module_name: ClassVar[str] = "switchmodule"
    mapping_type: ClassVar[type[ProfileMapping]]
    message_type: ClassVar[type[Message]]
    is_control: ClassVar[bool] = False

    def __init__(self, mapping: ProfileMapping, *, is_server: bool = False) -> None:
        if not isinstance(mapping, self.mapping_type):
            raise TypeError(
                f"{type(self).__name__} needs a {self.mapping_type.__name__}, "
                f"got {type(mapping).__name__}"
            )
        validate_mapping(mapping)
        self.config = mapping
        self.is_server = is_server
        self.command_priority = CommandPriorityMap(self.get_command_orders())
        self.bindings = BindingTable()

    @classmethod
    def from_yaml(cls, text: str, *, is_server: bool = False) -> ProfileVisitor:
        return cls(load_mapping(text, cls.mapping_type), is_server=is_server)

    def new_message(self) -> Message:
        return self.message_type()

    # ------------------------------------------------------------------
    # Visit
    # ------------------------------------------------------------------

    def visit(self, message: Message) -> None:
        """Bind every configured leaf and write the literal ones."""
        if not isinstance(message, self.message_type):
            raise TypeError(
                f"{type(self).__name__} visits {self.message_type.__name__}, "
                f"got {type(message).__name__}"
            )
        root = self.config.mapping
        if root is None:
            logger.warning("Profile '%s' has no mapping section; nothing bound", self.config.name)
            return
        for leaf in iter_leaves(root):
            self._visit_leaf(message, leaf)

    @property
    def writes_literals(self) -> bool:
        # A client never stamps identity into a control message it received
        return self.is_server or not self.is_control

    def _visit_leaf(self, message: Message, leaf: Leaf) -> None:
        desc = leaf.descriptor
        kind = desc.kind
        vk = desc.value_kind

        if kind is FieldKind.MAPPED:
            self._bind(leaf)
        elif kind in LITERAL_KINDS and vk in SCALAR_KINDS:
            if self.writes_literals:
                ValueSetter(leaf.path, vk)(message, desc.literal)
        elif kind is FieldKind.GENERATED_UUID and vk is ValueKind.STRING:
            if self.writes_literals:
                leaf.path.set(message, new_uuid())
        elif kind is FieldKind.MESSAGE and vk is ValueKind.TIMESTAMP:
            if self.writes_literals:
                leaf.path.set(message, get_current_timestamp())
        else:
            logger.debug(
                "Ignoring %s descriptor '%s' at %s", vk.value, desc.field_type, leaf.label,
            )

    def _bind(self, leaf: Leaf) -> None:
        desc = leaf.descriptor
        vk = desc.value_kind
        name = desc.name
        priority = self.command_priority.get_priority(name)

        if vk is ValueKind.ENUM:
            enum_cls = leaf.path.leaf_type(self.message_type)
            descriptor = EnumDescriptor.for_enum(enum_cls)
            self.bindings.add_setter(vk, name, EnumSetter(
                leaf.path, descriptor, desc.mapping, is_server=self.is_server,
            ))
            self.bindings.add_getter(EnumGetter(
                leaf.path, name, descriptor, desc.mapping, priority,
            ))
        elif vk in (ValueKind.QUALITY, ValueKind.TIMESTAMP):
            self.bindings.add_setter(vk, name, ValueSetter(leaf.path, vk))
        else:
            self.bindings.add_setter(vk, name, ValueSetter(leaf.path, vk))
            self.bindings.add_getter(ValueGetter(leaf.path, name, vk, priority))

    # ------------------------------------------------------------------
    # Update / read
    # ------------------------------------------------------------------

    def _update(self, table: dict[str, Setter], key: str, message: Message, value: Any) -> None:
        setter = table.get(key)
        if setter is None:
            logger.debug("No setter registered for %s", key)
            return
        logger.debug("Action executed for: %s=%r", key, value)
        setter(message, value)

    def update_boolean(self, key: str, message: Message, value: bool) -> None:
        self._update(self.bindings.bool_setters, key, message, value)

    def update_i32(self, key: str, message: Message, value: int) -> None:
        self._update(self.bindings.real_setters, key, message, value)

    def update_i64(self, key: str, message: Message, value: int) -> None:
        self._update(self.bindings.real_setters, key, message, value)

    def update_f32(self, key: str, message: Message, value: float) -> None:
        self._update(self.bindings.real_setters, key, message, value)

    def update_f64(self, key: str, message: Message, value: float) -> None:
        self._update(self.bindings.real_setters, key, message, value)

    def update_string(self, key: str, message: Message, value: str) -> None:
        self._update(self.bindings.string_setters, key, message, value)

    def update_quality(self, key: str, message: Message, value: Quality) -> None:
        self._update(self.bindings.quality_setters, key, message, value)

    def update_timestamp(self, key: str, message: Message, value: Timestamp) -> None:
        self._update(self.bindings.timestamp_setters, key, message, value)

    def execute_commands(self, message: Message) -> list[Command]:
        """Run every getter once, in registration order, then drop them."""
        commands = []
        for getter in self.bindings.getters:
            command = getter(message)
            if command is not None:
                commands.append(command)
        self.bindings.getters.clear()
        return commands

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def get_string_setters(self) -> list[str]:
        return list(self.bindings.string_setters)

    def get_real_setters(self) -> list[str]:
        return list(self.bindings.real_setters)

    def get_bool_setters(self) -> list[str]:
        return list(self.bindings.bool_setters)

    def get_quality_setters(self) -> list[str]:
        return list(self.bindings.quality_setters)

    def get_timestamp_setters(self) -> list[str]:
        return list(self.bindings.timestamp_setters)

    def get_cb_ref(self) -> str:
        return self.config.cb_ref or ""

    def get_tolerance_ms(self) -> int | None:
        return getattr(self.config, "tolerance_ms", None)

    def get_command_orders(self) -> list[str] | None:
        order = getattr(self.config, "command_order", None)
        return list(order) if order is not None else None

    def device_mrid(self) -> str | None:
        """Configured literal mRID of the protected switch, if any."""
        descriptor = _DEVICE_MRID.get(self.config)
        if descriptor is None:
            return None
        return descriptor.value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.config.name!r}, "
            f"is_server={self.is_server}, bindings={len(self.bindings)})"
        )
