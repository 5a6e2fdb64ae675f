"""SQLAlchemy model for authenticated accounts."""
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin, utcnow


class User(IdMixin, Base):
    """Account owning a Developer or Company profile.

    Only the fields needed to verify caller tokens are mapped; account
    management lives in the authentication service.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True)
    role: Mapped[str] = mapped_column(String(20))
    secret_key: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(20), default="Active")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
