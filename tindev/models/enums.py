"""Enumerations shared by models, services and schemas."""
from enum import Enum


class Role(str, Enum):
    """The two kinds of account that can interact."""

    COMPANY = "Company"
    DEVELOPER = "Developer"

    @property
    def counterpart(self) -> "Role":
        return Role.DEVELOPER if self is Role.COMPANY else Role.COMPANY


class TargetKind(str, Enum):
    """What a like/dislike is aimed at."""

    DEVELOPER = "developer"
    JOB_RECRUITMENT = "job recruitment"

    @property
    def initiator(self) -> Role:
        """Role allowed to act on this kind of target."""
        return Role.COMPANY if self is TargetKind.DEVELOPER else Role.DEVELOPER
