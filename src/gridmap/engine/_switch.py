"""Switch module visitors and the profile-name builder."""

from __future__ import annotations

from dataclasses import dataclass

from gridmap.model.loader import MappingConfigError, load_mapping
from gridmap.model.switch import (
    SwitchDiscreteControlProfileMapping,
    SwitchReadingProfileMapping,
    SwitchStatusProfileMapping,
)
from gridmap.schema.commonmodule import Message
from gridmap.schema.switchmodule import (
    SwitchDiscreteControlProfile,
    SwitchReadingProfile,
    SwitchStatusProfile,
)

from ._visitor import ProfileVisitor


class SwitchStatusProfileVisitor(ProfileVisitor):
    profile_name = "SwitchStatusProfile"
    mapping_type = SwitchStatusProfileMapping
    message_type = SwitchStatusProfile


class SwitchReadingProfileVisitor(ProfileVisitor):
    profile_name = "SwitchReadingProfile"
    mapping_type = SwitchReadingProfileMapping
    message_type = SwitchReadingProfile


class SwitchDiscreteControlProfileVisitor(ProfileVisitor):
    profile_name = "SwitchDiscreteControlProfile"
    mapping_type = SwitchDiscreteControlProfileMapping
    message_type = SwitchDiscreteControlProfile
    is_control = True


VISITOR_TYPES: dict[str, type[ProfileVisitor]] = {
    cls.profile_name: cls
    for cls in (
        SwitchDiscreteControlProfileVisitor,
        SwitchReadingProfileVisitor,
        SwitchStatusProfileVisitor,
    )
}

SUPPORTED_PROFILES = tuple(VISITOR_TYPES)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

@dataclass
class VisitorBundle:
    """A visitor with the module name and a fresh message of its profile."""

    module: str
    message: Message
    visitor: ProfileVisitor


def build_visitor(
    profile_name: str, document: str, *, is_server: bool = False,
) -> VisitorBundle:
    """Parse *document* as the mapping for *profile_name*.

    Raises ``MappingConfigError`` for an unsupported profile name or a
    document that does not parse or validate.
    """
    visitor_cls = VISITOR_TYPES.get(profile_name)
    if visitor_cls is None:
        raise MappingConfigError(
            f"Unsupported profile {profile_name!r}; "
            f"expected one of {', '.join(SUPPORTED_PROFILES)}"
        )
    mapping = load_mapping(document, visitor_cls.mapping_type)
    visitor = visitor_cls(mapping, is_server=is_server)
    return VisitorBundle(
        module=visitor_cls.module_name,
        message=visitor.new_message(),
        visitor=visitor,
    )
