"""Tests for visiting reading profiles (list-valued readings)."""

import logging

import pytest
from conftest import example_text, reading_visitor

from gridmap.engine import SwitchReadingProfileVisitor
from gridmap.model.commands import IntCommand, RealCommand

TWO_METERS = """
switchreading:
  - readingMMXU:
      W:
        net:
          cVal:
            mag:
              double-field-type: mapped
              name: Meter.A
  - readingMMXU:
      W:
        net:
          cVal:
            mag:
              double-field-type: mapped
              name: Meter.B
"""


@pytest.fixture
def reading():
    visitor = SwitchReadingProfileVisitor.from_yaml(example_text("switch_reading.yaml"))
    msg = visitor.new_message()
    visitor.visit(msg)
    return visitor, msg


class TestReadingExample:
    def test_bound_keys(self, reading):
        visitor, _ = reading
        assert visitor.get_real_setters() == [
            "Plug.Power", "Plug.Voltage", "Plug.Current", "Plug.Energy",
        ]

    def test_literals_written(self, reading):
        _, msg = reading
        (entry,) = msg.switch_reading
        assert entry.reading_mmxu.hz.mag == pytest.approx(60.0)
        assert entry.reading_mmxu.hz.units is None
        terminal = entry.conducting_equipment_terminal_reading.terminal
        assert terminal.a_cdc_terminal.sequence_number == 1

    def test_power(self, reading):
        visitor, msg = reading
        visitor.update_f64("Plug.Power", msg, 230.5)
        assert msg.switch_reading[0].reading_mmxu.w.net.c_val.mag == pytest.approx(230.5)
        (command,) = visitor.execute_commands(msg)
        assert isinstance(command, RealCommand)
        assert command.outputs[0].name == "Plug.Power"
        assert command.outputs[0].real_value == pytest.approx(230.5)

    def test_f32_shares_real_table(self, reading):
        visitor, msg = reading
        visitor.update_f32("Plug.Current", msg, 1.5)
        assert msg.switch_reading[0].reading_mmxu.a.net.c_val.mag == pytest.approx(1.5)

    def test_energy_is_int(self, reading):
        visitor, msg = reading
        visitor.update_i64("Plug.Energy", msg, 1200)
        (command,) = visitor.execute_commands(msg)
        assert isinstance(command, IntCommand)
        assert command.value == 1200

    def test_real_into_counter_truncates(self, reading):
        visitor, msg = reading
        visitor.update_f64("Plug.Energy", msg, 12.9)
        assert msg.switch_reading[0].reading_mmtr.tot_wh.act_val == 12

    def test_i32_into_double(self, reading):
        visitor, msg = reading
        visitor.update_i32("Plug.Voltage", msg, 120)
        mag = msg.switch_reading[0].reading_mmxu.ph_v.net.c_val.mag
        assert isinstance(mag, float)


class TestReadingList:
    def test_entries_address_their_index(self):
        visitor = reading_visitor(TWO_METERS)
        msg = visitor.new_message()
        visitor.visit(msg)
        assert msg.switch_reading == []

        visitor.update_f64("Meter.B", msg, 7.0)
        assert len(msg.switch_reading) == 2
        assert msg.switch_reading[0].reading_mmxu is None
        assert msg.switch_reading[1].reading_mmxu.w.net.c_val.mag == pytest.approx(7.0)

    def test_commands_per_entry(self):
        visitor = reading_visitor(TWO_METERS)
        msg = visitor.new_message()
        visitor.visit(msg)
        visitor.update_f64("Meter.A", msg, 1.0)
        visitor.update_f64("Meter.B", msg, 2.0)
        values = [(c.outputs[0].name, c.value) for c in visitor.execute_commands(msg)]
        assert values == [("Meter.A", 1.0), ("Meter.B", 2.0)]


class TestUnrepresentableReadings:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_counter_left_unwritten(self, reading, caplog, value):
        visitor, msg = reading
        before = msg.model_copy(deep=True)
        with caplog.at_level(logging.ERROR, logger="gridmap"):
            visitor.update_f64("Plug.Energy", msg, value)
        assert msg == before
        assert "Unable to write" in caplog.text

    def test_later_updates_still_apply(self, reading):
        visitor, msg = reading
        visitor.update_f64("Plug.Energy", msg, float("nan"))
        visitor.update_f64("Plug.Energy", msg, 5.0)
        assert msg.switch_reading[0].reading_mmtr.tot_wh.act_val == 5


class TestDocumentOrder:
    SHARED_NAME = """
    switchreading:
      - readingMMXU:
          W:
            net:
              cVal:
                mag:
                  double-field-type: mapped
                  name: Meter.X
          A:
            net:
              cVal:
                mag:
                  double-field-type: mapped
                  name: Meter.X
    """

    def test_keys_follow_document(self):
        visitor = reading_visitor("""
            switchreading:
              - readingMMXU:
                  W:
                    net:
                      cVal:
                        mag:
                          double-field-type: mapped
                          name: Meter.Power
                readingMMTR:
                  TotWh:
                    actVal:
                      int64-field-type: mapped
                      name: Meter.Energy
        """)
        visitor.visit(visitor.new_message())
        assert visitor.get_real_setters() == ["Meter.Power", "Meter.Energy"]

    def test_last_written_leaf_wins(self):
        visitor = reading_visitor(self.SHARED_NAME)
        msg = visitor.new_message()
        visitor.visit(msg)
        visitor.update_f64("Meter.X", msg, 5.0)
        mmxu = msg.switch_reading[0].reading_mmxu
        assert mmxu.w is None
        assert mmxu.a.net.c_val.mag == pytest.approx(5.0)
