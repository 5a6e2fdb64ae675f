"""SQLAlchemy model for job postings."""
from typing import List

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin


class JobRecruitment(IdMixin, Base):
    """Job posting owned by a company user."""

    __tablename__ = "job_recruitments"

    user_id: Mapped[str] = mapped_column(String(36), index=True)
    title: Mapped[str] = mapped_column(String(255))
    work_place: Mapped[str] = mapped_column(String(255))
    expired_date: Mapped[str] = mapped_column(String(10))
    from_salary: Mapped[int] = mapped_column(Integer)
    to_salary: Mapped[int] = mapped_column(Integer)
    job_type: Mapped[str] = mapped_column(String(255), index=True)
    skills: Mapped[List[str]] = mapped_column(JSON, default=list)
    year_experience: Mapped[int] = mapped_column(Integer)
    description: Mapped[str] = mapped_column(Text, default="")
    created_date: Mapped[str] = mapped_column(String(10))
    status: Mapped[str] = mapped_column(String(20), default="Active")
