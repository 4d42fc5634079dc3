"""Smart plug bridge: telemetry in, switch commands out.

Loads every profile of a session document, feeds one telemetry sample
into the status and reading profiles, then reads the commands carried
by a control message the way a device adapter would.
"""

import logging
from pathlib import Path

from gridmap.engine import build_visitor, order_commands
from gridmap.model.loader import split_profiles

HERE = Path(__file__).parent

# -- One sample as reported by the plug ------------------------------------
SAMPLE = {
    "Plug.Status": "1",
    "Plug.Power": 42.5,
    "Plug.Voltage": 120.3,
    "Plug.Current": 0.35,
}


def publish_status():
    bundle = build_visitor(
        "SwitchStatusProfile", (HERE / "switch_status.yaml").read_text(),
    )
    msg, visitor = bundle.message, bundle.visitor
    visitor.visit(msg)
    visitor.update_string("Plug.Status", msg, SAMPLE["Plug.Status"])
    print(msg.model_dump_json(exclude_none=True, indent=2))


def publish_reading():
    bundle = build_visitor(
        "SwitchReadingProfile", (HERE / "switch_reading.yaml").read_text(),
    )
    msg, visitor = bundle.message, bundle.visitor
    visitor.visit(msg)
    for key in ("Plug.Power", "Plug.Voltage", "Plug.Current"):
        visitor.update_f64(key, msg, SAMPLE[key])
    print(msg.model_dump_json(exclude_none=True, indent=2))


def handle_control():
    # Server side builds the control message...
    server = build_visitor(
        "SwitchDiscreteControlProfile",
        (HERE / "switch_discrete_control.yaml").read_text(),
        is_server=True,
    )
    ctl = server.message
    server.visitor.visit(ctl)
    server.visitor.update_boolean("Plug.Command", ctl, True)
    server.visitor.update_boolean("Plug.Reset", ctl, False)

    # ...the adapter side drains it into device commands.
    client = build_visitor(
        "SwitchDiscreteControlProfile",
        (HERE / "switch_discrete_control.yaml").read_text(),
    )
    client.visitor.visit(ctl)
    for cmd in order_commands(client.visitor.execute_commands(ctl)):
        out = cmd.outputs[0]
        print(f"{out.priority:>5}  {out.name} = {cmd.value}")
    print("tolerance:", client.visitor.get_tolerance_ms(), "ms")


def list_session():
    for doc in split_profiles((HERE / "session.yaml").read_text()):
        bundle = build_visitor(doc.name, doc.content)
        print(doc.name, "->", bundle.visitor.device_mrid())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    publish_status()
    publish_reading()
    handle_control()
    list_session()
