# galleryfeed/database/core/service_object.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID as PyUUID

from sqlalchemy import DateTime, func, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, declared_attr


class ServiceObject:
    """
    Identity + timestamps shared by persisted media rows.
    Use with multiple inheritance: `class MyModel(ServiceObject, Base): ...`

    (date_created, id) is the feed's total order, so date_created is NOT NULL
    and both columns sort ahead of the model's own columns in DDL.
    """
    __abstract__ = True

    @declared_attr
    def id(cls) -> Mapped[PyUUID]:
        # gen_random_uuid() comes from pgcrypto; enabled in migrations
        return mapped_column(
            UUID(as_uuid=True),
            primary_key=True,
            server_default=text("gen_random_uuid()"),
            sort_order=-30,
        )

    @declared_attr
    def date_created(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.clock_timestamp(),
            sort_order=-20,
        )

    @declared_attr
    def last_updated(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.clock_timestamp(),
            onupdate=func.clock_timestamp(),
            sort_order=-10,
        )
