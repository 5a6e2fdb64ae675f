"""SQLAlchemy model for photos stored on the media host."""
from typing import Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tindev.models.base import Base, IdMixin


class Photo(IdMixin, Base):
    """Photo metadata; the file itself lives on the media host."""

    __tablename__ = "photos"

    title: Mapped[str] = mapped_column(String(255))
    publit_io_id: Mapped[str] = mapped_column(String(100))
    album_id: Mapped[str] = mapped_column(String(36))
    url_preview: Mapped[Optional[str]] = mapped_column(String(1000))
    url_thumbnail: Mapped[Optional[str]] = mapped_column(String(1000))
    description: Mapped[Optional[str]] = mapped_column(Text)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False)
