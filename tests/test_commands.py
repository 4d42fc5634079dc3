"""Tests for the command value model."""

import pytest
from pydantic import TypeAdapter, ValidationError

from gridmap.model.commands import (
    BoolCommand,
    Command,
    CommandTimestamp,
    ControlMappingOutput,
    IntCommand,
    RealCommand,
    StringCommand,
)

_adapter = TypeAdapter(Command)


class TestCommandUnion:
    def test_bool_by_kind(self):
        cmd = _adapter.validate_python({"kind": "bool", "value": True})
        assert isinstance(cmd, BoolCommand)

    def test_int_by_kind(self):
        cmd = _adapter.validate_python({"kind": "int", "value": 7})
        assert isinstance(cmd, IntCommand)
        assert cmd.value == 7

    def test_real_by_kind(self):
        cmd = _adapter.validate_python({"kind": "real", "value": 2})
        assert isinstance(cmd, RealCommand)
        assert cmd.value == pytest.approx(2.0)

    def test_string_by_kind(self):
        cmd = _adapter.validate_python({"kind": "string", "value": "on"})
        assert isinstance(cmd, StringCommand)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            _adapter.validate_python({"kind": "complex", "value": 1})


class TestCommandFields:
    def test_defaults(self):
        cmd = BoolCommand(value=False)
        assert cmd.outputs == []
        assert cmd.timestamp is None

    def test_output_defaults(self):
        out = ControlMappingOutput(name="Plug.Relay")
        assert out.string_value is None
        assert out.bool_value is None
        assert out.real_value is None
        assert out.scale is None
        assert out.priority == 0

    def test_timestamp(self):
        cmd = RealCommand(value=1.5, timestamp=CommandTimestamp(seconds=1618083246))
        assert cmd.timestamp.seconds == 1618083246

    def test_equality(self):
        a = BoolCommand(value=True, outputs=[ControlMappingOutput(name="x", bool_value=True)])
        b = BoolCommand(value=True, outputs=[ControlMappingOutput(name="x", bool_value=True)])
        assert a == b

    def test_timestamp_whole_seconds(self):
        with pytest.raises(ValidationError):
            CommandTimestamp(seconds=1618083246.5)

    def test_timestamp_not_before_epoch(self):
        with pytest.raises(ValidationError):
            CommandTimestamp(seconds=-1)
