"""Repository classes for database operations."""
from tindev.repositories.base import BaseRepository
from tindev.repositories.matching import MatchingRepository, Scope
from tindev.repositories.photo import PhotoRepository
from tindev.repositories.profile import (
    CompanyRepository,
    DeveloperRepository,
    JobRecruitmentRepository,
)
from tindev.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "DeveloperRepository",
    "JobRecruitmentRepository",
    "MatchingRepository",
    "PhotoRepository",
    "Scope",
    "UserRepository",
]
