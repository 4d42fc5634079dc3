"""Shared test helpers for the gridmap test suite."""

import textwrap
from pathlib import Path

import pytest

from gridmap.engine import (
    SwitchDiscreteControlProfileVisitor,
    SwitchReadingProfileVisitor,
    SwitchStatusProfileVisitor,
)

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def example_text(filename: str) -> str:
    """Contents of a document under ``examples/``."""
    return (EXAMPLES / filename).read_text()


def profile_doc(profile: str, mapping: str, header: str = "") -> str:
    """Build a mapping document from an indented ``mapping:`` body."""
    body = textwrap.indent(textwrap.dedent(mapping).strip("\n"), "  ")
    head = textwrap.dedent(header).strip("\n")
    parts = [f"name: {profile}"]
    if head:
        parts.append(head)
    parts.append("mapping:")
    parts.append(body)
    return "\n".join(parts) + "\n"


def status_visitor(mapping: str, **kwargs) -> SwitchStatusProfileVisitor:
    return SwitchStatusProfileVisitor.from_yaml(
        profile_doc("SwitchStatusProfile", mapping), **kwargs,
    )


def control_visitor(mapping: str, header: str = "", **kwargs) -> SwitchDiscreteControlProfileVisitor:
    return SwitchDiscreteControlProfileVisitor.from_yaml(
        profile_doc("SwitchDiscreteControlProfile", mapping, header), **kwargs,
    )


def reading_visitor(mapping: str, **kwargs) -> SwitchReadingProfileVisitor:
    return SwitchReadingProfileVisitor.from_yaml(
        profile_doc("SwitchReadingProfile", mapping), **kwargs,
    )


POS_ENUM = """
switchStatus:
  switchStatusXSWI:
    Pos:
      phs3:
        stVal:
          enum-field-type: mapped
          name: Plug.Status
          mapping:
            - name: DbPosKind_open
              value: 0
            - name: DbPosKind_closed
              value: 1
"""


@pytest.fixture
def gridmap_logs(caplog):
    """``caplog`` capturing every gridmap record down to DEBUG."""
    caplog.set_level("DEBUG", logger="gridmap")
    return caplog
