"""Loading of YAML mapping documents into mapping trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .switch import ProfileMapping

MappingT = TypeVar("MappingT", bound=ProfileMapping)


class MappingConfigError(Exception):
    """A mapping document is malformed or fails validation."""


def _parse_yaml(text: str, what: str) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MappingConfigError(f"{what} is not valid YAML: {exc}") from exc
    if not isinstance(loaded, dict):
        raise MappingConfigError(
            f"{what} must be a YAML mapping, got {type(loaded).__name__}"
        )
    return loaded


def load_mapping(text: str, mapping_cls: type[MappingT]) -> MappingT:
    """Parse a mapping document into a typed mapping tree.

    Parameters
    ----------
    text
        YAML text of one profile mapping document.
    mapping_cls
        The profile root to validate against, e.g.
        ``SwitchStatusProfileMapping``.

    Raises
    ------
    MappingConfigError
        If the text is not a YAML mapping, a required key is missing, a
        key is unknown, or a value has the wrong type.
    """
    data = _parse_yaml(text, "Mapping document")
    try:
        return mapping_cls.model_validate(data)
    except ValidationError as exc:
        raise MappingConfigError(
            f"Invalid {mapping_cls.__name__} document: {exc}"
        ) from exc


def load_mapping_file(path: str | Path, mapping_cls: type[MappingT]) -> MappingT:
    """Read and parse a mapping document from *path*."""
    path = Path(path)
    with path.open() as f:
        return load_mapping(f.read(), mapping_cls)


# ---------------------------------------------------------------------------
# Session documents
# ---------------------------------------------------------------------------

class ProfileDocument(BaseModel):
    """One profile's mapping document cut out of a session document."""

    name: str
    content: str


def split_profiles(text: str) -> list[ProfileDocument]:
    """Split a session document into per-profile mapping documents.

    A session document carries every profile of one device::

        profiles:
          - name: SwitchStatusProfile
            mapping: ...
          - name: SwitchDiscreteControlProfile
            command-order: [...]
            mapping: ...

    Each entry is re-serialized on its own so it can be handed to
    ``load_mapping`` (or ``build_visitor``) unchanged.
    """
    data = _parse_yaml(text, "Session document")
    profiles = data.get("profiles")
    if not isinstance(profiles, list):
        raise MappingConfigError("Session document needs a 'profiles' list")

    documents: list[ProfileDocument] = []
    for i, entry in enumerate(profiles):
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise MappingConfigError(f"Profile entry {i} has no 'name'")
        documents.append(ProfileDocument(
            name=entry["name"],
            content=yaml.safe_dump(entry, sort_keys=False),
        ))
    return documents
