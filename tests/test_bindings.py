"""Tests for setters, getters and the binding table."""

import logging

import pytest

from gridmap.engine import (
    BindingTable,
    EnumGetter,
    EnumSetter,
    FieldPath,
    ValueGetter,
    ValueSetter,
)
from gridmap.model.commands import BoolCommand, IntCommand, RealCommand, StringCommand
from gridmap.model.fields import EnumMapping, ValueKind
from gridmap.schema.commonmodule import PhaseDPS, StatusDPS
from gridmap.schema.enums import DbPosKind, EnumDescriptor
from gridmap.schema.switchmodule import (
    SwitchReadingProfile,
    SwitchStatus,
    SwitchStatusProfile,
    SwitchStatusXSWI,
)

MOD_BLK = FieldPath(("switch_status", "status_value", "mod_blk"))
POS = FieldPath(("switch_status", "switch_status_xswi", "pos", "phs3", "st_val"))
ENERGY = FieldPath(("switch_reading", 0, "reading_mmtr", "tot_wh", "act_val"))
POWER = FieldPath(("switch_reading", 0, "reading_mmxu", "w", "net", "c_val", "mag"))
NAME = FieldPath(("protected_switch", "conducting_equipment", "named_object", "name"))

DB_POS = EnumDescriptor.for_enum(DbPosKind)
VENDOR_TABLE = [
    EnumMapping(name="DbPosKind_open", value=0),
    EnumMapping(name="DbPosKind_closed", value=1),
]


def _with_pos(code):
    # model_construct lets an undefined wire code through
    return SwitchStatusProfile(switch_status=SwitchStatus(
        switch_status_xswi=SwitchStatusXSWI(
            pos=PhaseDPS(phs3=StatusDPS.model_construct(st_val=code)),
        ),
    ))


# ===========================================================================
# ValueSetter
# ===========================================================================

class TestValueSetter:
    def test_bool(self):
        msg = SwitchStatusProfile()
        ValueSetter(MOD_BLK, ValueKind.BOOL)(msg, True)
        assert msg.switch_status.status_value.mod_blk is True

    def test_real_truncated_into_int_leaf(self):
        msg = SwitchReadingProfile()
        ValueSetter(ENERGY, ValueKind.INT64)(msg, 12.9)
        assert msg.switch_reading[0].reading_mmtr.tot_wh.act_val == 12

    def test_int_into_double_leaf(self):
        msg = SwitchReadingProfile()
        ValueSetter(POWER, ValueKind.DOUBLE)(msg, 3)
        mag = msg.switch_reading[0].reading_mmxu.w.net.c_val.mag
        assert isinstance(mag, float)
        assert mag == pytest.approx(3.0)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_no_integer_for_value(self, caplog, value):
        msg = SwitchReadingProfile()
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            ValueSetter(ENERGY, ValueKind.INT64)(msg, value)
        assert msg == SwitchReadingProfile()
        assert "Unable to write" in caplog.text

    def test_string(self):
        msg = SwitchStatusProfile()
        ValueSetter(NAME, ValueKind.STRING)(msg, "Bench plug")
        assert msg.protected_switch.conducting_equipment.named_object.name == "Bench plug"


# ===========================================================================
# EnumSetter
# ===========================================================================

class TestEnumSetter:
    def test_by_name(self):
        msg = SwitchStatusProfile()
        EnumSetter(POS, DB_POS, VENDOR_TABLE)(msg, "DbPosKind_closed")
        assert POS.get(msg) is DbPosKind.DbPosKind_closed

    def test_decimal_code_as_client(self):
        msg = SwitchStatusProfile()
        EnumSetter(POS, DB_POS, VENDOR_TABLE)(msg, "1")
        assert POS.get(msg) is DbPosKind.DbPosKind_closed

    def test_bit_pattern_as_server(self):
        msg = SwitchStatusProfile()
        EnumSetter(POS, DB_POS, VENDOR_TABLE, is_server=True)(msg, "[01]")
        assert POS.get(msg) is DbPosKind.DbPosKind_closed

    def test_server_does_not_read_decimal(self):
        table = [EnumMapping(name="DbPosKind_open", value=10)]
        msg = SwitchStatusProfile()
        # "10" is binary two when serving: no entry has code 2
        EnumSetter(POS, DB_POS, table, is_server=True)(msg, "10")
        assert POS.get(msg) is None

    def test_vendor_names_use_code(self):
        table = [EnumMapping(name="On", value=2), EnumMapping(name="Off", value=3)]
        msg = SwitchStatusProfile()
        EnumSetter(POS, DB_POS, table)(msg, "Off")
        assert POS.get(msg) is DbPosKind.DbPosKind_open

    def test_unknown_input_logged(self, caplog):
        msg = SwitchStatusProfile()
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            EnumSetter(POS, DB_POS, VENDOR_TABLE)(msg, "ajar")
        assert msg == SwitchStatusProfile()
        assert "Unable to map ajar to enum DbPosKind" in caplog.text

    def test_invalid_configured_code_logged(self, caplog):
        table = [EnumMapping(name="Sideways", value=9)]
        msg = SwitchStatusProfile()
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            EnumSetter(POS, DB_POS, table)(msg, "Sideways")
        assert msg == SwitchStatusProfile()
        assert "not a valid DbPosKind" in caplog.text


# ===========================================================================
# Getters
# ===========================================================================

class TestValueGetter:
    def test_absent_parent(self):
        getter = ValueGetter(MOD_BLK, "Plug.Relay", ValueKind.BOOL)
        assert getter(SwitchStatusProfile()) is None

    def test_bool(self):
        msg = SwitchStatusProfile()
        MOD_BLK.set(msg, False)
        cmd = ValueGetter(MOD_BLK, "Plug.Relay", ValueKind.BOOL, priority=3)(msg)
        assert isinstance(cmd, BoolCommand)
        assert cmd.value is False
        assert cmd.outputs[0].bool_value is False
        assert cmd.outputs[0].priority == 3

    def test_int_mirrors_real_value(self):
        msg = SwitchReadingProfile()
        ENERGY.set(msg, 1200)
        cmd = ValueGetter(ENERGY, "Plug.Energy", ValueKind.INT64)(msg)
        assert isinstance(cmd, IntCommand)
        assert cmd.value == 1200
        assert cmd.outputs[0].real_value == pytest.approx(1200.0)

    def test_real(self):
        msg = SwitchReadingProfile()
        POWER.set(msg, 42.5)
        cmd = ValueGetter(POWER, "Plug.Power", ValueKind.DOUBLE)(msg)
        assert isinstance(cmd, RealCommand)
        assert cmd.outputs[0].real_value == pytest.approx(42.5)

    def test_string(self):
        msg = SwitchStatusProfile()
        NAME.set(msg, "Bench")
        cmd = ValueGetter(NAME, "Plug.Name", ValueKind.STRING)(msg)
        assert isinstance(cmd, StringCommand)
        assert cmd.outputs[0].string_value == "Bench"


class TestEnumGetter:
    def test_reports_configured_code(self):
        msg = _with_pos(DbPosKind.DbPosKind_closed)
        cmd = EnumGetter(POS, "Plug.Status", DB_POS, VENDOR_TABLE, priority=0)(msg)
        assert isinstance(cmd, RealCommand)
        assert cmd.value == pytest.approx(2.0)
        assert cmd.outputs[0].name == "Plug.Status"
        assert cmd.outputs[0].real_value == pytest.approx(1.0)

    def test_first_matching_entry(self):
        table = [
            EnumMapping(name="closed", value=7),
            EnumMapping(name="DbPosKind_closed", value=8),
        ]
        cmd = EnumGetter(POS, "k", DB_POS, table)(_with_pos(2))
        assert cmd.outputs[0].real_value == pytest.approx(7.0)

    def test_absent_parent(self):
        assert EnumGetter(POS, "k", DB_POS, VENDOR_TABLE)(SwitchStatusProfile()) is None

    def test_invalid_wire_code(self, caplog):
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            assert EnumGetter(POS, "k", DB_POS, VENDOR_TABLE)(_with_pos(99)) is None
        assert "Unable to map value '99'" in caplog.text

    def test_no_entry_for_variant(self, caplog):
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            cmd = EnumGetter(POS, "k", DB_POS, VENDOR_TABLE)(_with_pos(DbPosKind.DbPosKind_invalid))
        assert cmd is None
        assert "No entry configured for DbPosKind_invalid" in caplog.text


# ===========================================================================
# BindingTable
# ===========================================================================

class TestBindingTable:
    def test_tables_by_kind(self):
        t = BindingTable()
        assert t.table_for(ValueKind.ENUM) is t.string_setters
        assert t.table_for(ValueKind.STRING) is t.string_setters
        assert t.table_for(ValueKind.INT32) is t.real_setters
        assert t.table_for(ValueKind.DOUBLE) is t.real_setters
        assert t.table_for(ValueKind.BOOL) is t.bool_setters
        assert t.table_for(ValueKind.QUALITY) is t.quality_setters
        assert t.table_for(ValueKind.TIMESTAMP) is t.timestamp_setters

    def test_last_write_wins(self):
        t = BindingTable()
        first = ValueSetter(MOD_BLK, ValueKind.BOOL)
        second = ValueSetter(FieldPath(("switch_status", "status_value", "mod_blk")), ValueKind.BOOL)
        t.add_setter(ValueKind.BOOL, "k", first)
        t.add_setter(ValueKind.BOOL, "k", second)
        assert t.bool_setters["k"] is second
        assert len(t) == 1

    def test_getters_in_order(self):
        t = BindingTable()
        a = ValueGetter(MOD_BLK, "a", ValueKind.BOOL)
        b = ValueGetter(MOD_BLK, "b", ValueKind.BOOL)
        t.add_getter(a)
        t.add_getter(b)
        assert t.getters == [a, b]
