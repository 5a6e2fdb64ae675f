"""SQLAlchemy model for developer profiles."""
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin


class Developer(IdMixin, Base):
    """Developer profile, keyed by its owning user id."""

    __tablename__ = "developers"

    user_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255))
    full_name: Mapped[str] = mapped_column(String(255))
    birthday: Mapped[str] = mapped_column(String(10))
    phone: Mapped[str] = mapped_column(String(30))
    gender: Mapped[str] = mapped_column(String(20))
    city: Mapped[str] = mapped_column(String(255))
    photo_id: Mapped[str] = mapped_column(String(36), default="")
    facebook_url: Mapped[str] = mapped_column(String(500), default="")
    linkedin_url: Mapped[str] = mapped_column(String(500), default="")
    twitter_url: Mapped[str] = mapped_column(String(500), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    skills: Mapped[List[str]] = mapped_column(JSON, default=list)
    status: Mapped[str] = mapped_column(String(20), default="Active")

    # Job expectation
    job_type: Mapped[str] = mapped_column(String(255), index=True)
    year_experience: Mapped[int] = mapped_column(Integer)
    expected_salary: Mapped[int] = mapped_column(Integer)
    work_place: Mapped[str] = mapped_column(String(255))

    @property
    def job_expectation(self) -> Dict[str, Any]:
        """Job expectation as the nested object clients see."""
        return {
            "job_type": self.job_type,
            "year_experience": self.year_experience,
            "expected_salary": self.expected_salary,
            "work_place": self.work_place,
        }
