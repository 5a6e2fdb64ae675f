"""SQLAlchemy models for the application."""
from tindev.models.base import Base
from tindev.models.company import Company
from tindev.models.developer import Developer
from tindev.models.enums import Role, TargetKind
from tindev.models.job_recruitment import JobRecruitment
from tindev.models.matching import Matching
from tindev.models.photo import Photo
from tindev.models.user import User

__all__ = [
    "Base",
    "Company",
    "Developer",
    "JobRecruitment",
    "Matching",
    "Photo",
    "Role",
    "TargetKind",
    "User",
]
