"""gridmap engine: bind mapping documents to grid messages.

Entry point::

    from gridmap.engine import build_visitor

    bundle = build_visitor("SwitchStatusProfile", yaml_text)
    msg = bundle.message
    bundle.visitor.visit(msg)
    bundle.visitor.update_boolean("Plug.Relay", msg, True)
    commands = bundle.visitor.execute_commands(msg)
"""

from __future__ import annotations

from gridmap.model.loader import MappingConfigError

from ._bindings import BindingTable, EnumGetter, EnumSetter, ValueGetter, ValueSetter
from ._paths import FieldPath
from ._priority import LOWEST_PRIORITY, CommandPriorityMap, order_commands
from ._switch import (
    SUPPORTED_PROFILES,
    VISITOR_TYPES,
    SwitchDiscreteControlProfileVisitor,
    SwitchReadingProfileVisitor,
    SwitchStatusProfileVisitor,
    VisitorBundle,
    build_visitor,
)
from ._tree import Leaf, iter_leaves
from ._validation import collect_problems, validate_mapping
from ._values import (
    BitString,
    get_current_timestamp,
    new_uuid,
    parse_bit_string,
    parse_utc_time,
    timestamp_from_datetime,
    timestamp_from_float,
)
from ._visitor import ProfileVisitor

__all__ = [
    "BindingTable",
    "BitString",
    "CommandPriorityMap",
    "EnumGetter",
    "EnumSetter",
    "FieldPath",
    "LOWEST_PRIORITY",
    "Leaf",
    "MappingConfigError",
    "ProfileVisitor",
    "SUPPORTED_PROFILES",
    "SwitchDiscreteControlProfileVisitor",
    "SwitchReadingProfileVisitor",
    "SwitchStatusProfileVisitor",
    "VISITOR_TYPES",
    "ValueGetter",
    "ValueSetter",
    "VisitorBundle",
    "build_visitor",
    "collect_problems",
    "get_current_timestamp",
    "iter_leaves",
    "new_uuid",
    "order_commands",
    "parse_bit_string",
    "parse_utc_time",
    "timestamp_from_datetime",
    "timestamp_from_float",
    "validate_mapping",
]
