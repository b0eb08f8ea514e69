from __future__ import annotations

from typing import Optional, List
from uuid import UUID as UUID_t

from sqlalchemy import Enum as SAEnum, ForeignKey, Text, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from galleryfeed.database.core.main import Base
from galleryfeed.database.core.service_object import ServiceObject
from galleryfeed.domain.enums.media_kind import MediaKind


class MediaItem(ServiceObject, Base):
    __tablename__ = "media"
    __table_args__ = (
        # keyset pagination: ORDER BY date_created DESC, id DESC
        Index("ix_media_created_id", "date_created", "id"),
        Index("ix_media_type_created_id", "media_type", "date_created", "id"),
    )

    media_type: Mapped[MediaKind] = mapped_column(SAEnum(MediaKind, name="media_kind"), nullable=False)
    media_url: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[Optional[str]] = mapped_column(Text)
    title: Mapped[Optional[str]] = mapped_column(Text)

    tags: Mapped[List["MediaTag"]] = relationship(
        back_populates="media",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [MediaTag.tag_category, MediaTag.tag_value],
    )


class MediaTag(Base):
    """
    Flat tag assignment: (media, category, value). A value may appear under
    several categories; tag search matches on value only.
    """
    __tablename__ = "media_tag"
    __table_args__ = (
        Index("ix_media_tag_value", "tag_value"),
        Index("ix_media_tag_category_value", "tag_category", "tag_value"),
    )

    media_id: Mapped[UUID_t] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("media.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_category: Mapped[str] = mapped_column(Text, primary_key=True)
    tag_value: Mapped[str] = mapped_column(Text, primary_key=True)

    media: Mapped[MediaItem] = relationship(back_populates="tags")
