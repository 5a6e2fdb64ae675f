"""SQLAlchemy model for like/dislike interactions between a company and a developer."""
from typing import Optional

from sqlalchemy import Boolean, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin, TimestampMixin
from tindev.models.enums import Role


class Matching(IdMixin, TimestampMixin, Base):
    """One interaction thread between a company and a developer.

    The thread is scoped to a job recruitment, or to the profiles themselves
    when ``job_recruitment_id`` is null. Each side's decision is tri-state:
    null (undecided), true (liked) or false (disliked).
    """

    __tablename__ = "matchings"

    company_user_id: Mapped[str] = mapped_column(String(36), index=True)
    developer_user_id: Mapped[str] = mapped_column(String(36), index=True)
    job_recruitment_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    is_company_like: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_developer_like: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    __table_args__ = (
        # At most one row per scope; null job ids need their own partial index
        Index(
            "uq_matchings_profile_scope",
            "company_user_id",
            "developer_user_id",
            unique=True,
            postgresql_where=text("job_recruitment_id IS NULL"),
            sqlite_where=text("job_recruitment_id IS NULL"),
        ),
        Index(
            "uq_matchings_job_scope",
            "company_user_id",
            "developer_user_id",
            "job_recruitment_id",
            unique=True,
            postgresql_where=text("job_recruitment_id IS NOT NULL"),
            sqlite_where=text("job_recruitment_id IS NOT NULL"),
        ),
    )

    def decision_of(self, role: Role) -> Optional[bool]:
        """Return the given side's decision."""
        if role is Role.COMPANY:
            return self.is_company_like
        return self.is_developer_like

    def set_decision(self, role: Role, liked: bool) -> None:
        if role is Role.COMPANY:
            self.is_company_like = liked
        else:
            self.is_developer_like = liked

    def counterpart_user_id(self, role: Role) -> str:
        """User id of the side opposite to ``role``."""
        if role is Role.COMPANY:
            return self.developer_user_id
        return self.company_user_id

    @property
    def is_closed(self) -> bool:
        return self.is_company_like is not None and self.is_developer_like is not None

    @property
    def is_match(self) -> bool:
        return bool(self.is_company_like) and bool(self.is_developer_like)
