"""Mapping trees and message models must line up field for field."""

from enum import IntEnum
from typing import get_args, get_origin

import pytest

from gridmap.engine._paths import _unwrap_optional
from gridmap.model.common import MappingNode, WrapperMapping
from gridmap.model.fields import FieldType, ValueKind
from gridmap.model.switch import (
    SwitchDiscreteControlProfileMappingRoot,
    SwitchReadingProfileMappingRoot,
    SwitchStatusProfileMappingRoot,
)
from gridmap.schema.commonmodule import Quality, Timestamp
from gridmap.schema.switchmodule import (
    SwitchDiscreteControlProfile,
    SwitchReadingProfile,
    SwitchStatusProfile,
)

_LEAF_TYPES = {
    ValueKind.STRING: str,
    ValueKind.BOOL: bool,
    ValueKind.INT32: int,
    ValueKind.INT64: int,
    ValueKind.FLOAT: float,
    ValueKind.DOUBLE: float,
    ValueKind.QUALITY: Quality,
    ValueKind.TIMESTAMP: Timestamp,
}


def _mismatches(mapping_cls, message_cls, where):
    """Every place a mapping field has no matching message field."""
    found = []
    message_fields = message_cls.model_fields
    for name, info in mapping_cls.model_fields.items():
        label = f"{where}.{name}"
        if name not in message_fields:
            found.append(f"{label}: missing on {message_cls.__name__}")
            continue
        node_type = _unwrap_optional(info.annotation)
        target = _unwrap_optional(message_fields[name].annotation)

        if get_origin(node_type) is list:
            if get_origin(target) is not list:
                found.append(f"{label}: message field is not a list")
                continue
            node_type = _unwrap_optional(get_args(node_type)[0])
            target = _unwrap_optional(get_args(target)[0])

        if issubclass(node_type, WrapperMapping):
            node_type = _unwrap_optional(node_type.model_fields["value"].annotation)

        if issubclass(node_type, FieldType):
            kind = node_type.value_kind
            if kind is ValueKind.ENUM:
                ok = isinstance(target, type) and issubclass(target, IntEnum)
            else:
                ok = target is _LEAF_TYPES[kind]
            if not ok:
                found.append(f"{label}: {kind.value} leaf over {target!r}")
        elif issubclass(node_type, MappingNode):
            found.extend(_mismatches(node_type, target, label))
        else:
            found.append(f"{label}: unexpected node type {node_type!r}")
    return found


@pytest.mark.parametrize("mapping_cls,message_cls", [
    (SwitchStatusProfileMappingRoot, SwitchStatusProfile),
    (SwitchReadingProfileMappingRoot, SwitchReadingProfile),
    (SwitchDiscreteControlProfileMappingRoot, SwitchDiscreteControlProfile),
])
def test_mapping_mirrors_message(mapping_cls, message_cls):
    assert _mismatches(mapping_cls, message_cls, message_cls.__name__) == []


def test_messages_default_empty():
    # Every structural field starts absent so paths can short-circuit
    for message_cls in (SwitchStatusProfile, SwitchReadingProfile, SwitchDiscreteControlProfile):
        msg = message_cls()
        for name, value in msg:
            assert value in (None, []), f"{message_cls.__name__}.{name}"
