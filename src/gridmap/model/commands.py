"""Outbound command values read out of a message."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class CommandTimestamp(BaseModel):
    """Scheduled time of a command, in epoch seconds."""

    seconds: int = Field(ge=0)


class ControlMappingOutput(BaseModel):
    """One named output a command maps to.

    Exactly one of the typed slots mirrors the command's value; ``priority``
    is the rank of ``name`` in the profile's ``command-order``.
    """

    name: str
    string_value: str | None = None
    bool_value: bool | None = None
    real_value: float | None = None
    scale: float | None = None
    priority: int = 0


class StringCommand(BaseModel):
    kind: Literal["string"] = "string"
    value: str
    outputs: list[ControlMappingOutput] = []
    timestamp: CommandTimestamp | None = None


class BoolCommand(BaseModel):
    kind: Literal["bool"] = "bool"
    value: bool
    outputs: list[ControlMappingOutput] = []
    timestamp: CommandTimestamp | None = None


class RealCommand(BaseModel):
    kind: Literal["real"] = "real"
    value: float
    outputs: list[ControlMappingOutput] = []
    timestamp: CommandTimestamp | None = None


class IntCommand(BaseModel):
    kind: Literal["int"] = "int"
    value: int
    outputs: list[ControlMappingOutput] = []
    timestamp: CommandTimestamp | None = None


Command = Annotated[
    Union[StringCommand, BoolCommand, RealCommand, IntCommand],
    Field(discriminator="kind"),
]
