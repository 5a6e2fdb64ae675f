"""SQLAlchemy model for company profiles."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin


class Company(IdMixin, Base):
    """Company profile, keyed by its owning user id."""

    __tablename__ = "companies"

    user_id: Mapped[str] = mapped_column(String(36), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(30))
    city: Mapped[str] = mapped_column(String(255))
    tax_code: Mapped[str] = mapped_column(String(50))
    photo_id: Mapped[str] = mapped_column(String(36), default="")
    facebook_url: Mapped[str] = mapped_column(String(500), default="")
    linkedin_url: Mapped[str] = mapped_column(String(500), default="")
    twitter_url: Mapped[str] = mapped_column(String(500), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[str] = mapped_column(String(20), default="Active")
