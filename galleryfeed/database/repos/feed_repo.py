# galleryfeed/database/repos/feed_repo.py
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import any_, bindparam, select, func, and_, or_
from sqlalchemy.dialects.postgresql import ARRAY, UUID as PG_UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from galleryfeed.common.logging import get_logger
from galleryfeed.database.models import MediaItem as DBMediaItem, MediaTag as DBMediaTag
from galleryfeed.database.repos._mapping import to_feed_item
from galleryfeed.domain.entities.feed_item import FeedItem
from galleryfeed.domain.errors import RetrievalError
from galleryfeed.domain.dataclasses.feed import PageQuery

logger = get_logger(__name__)


def _as_uuid(value: object) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


class SqlAlchemyFeedRepo:
    """
    Read-only feed queries. Satisfies MediaFeedPort via structural typing.

    Every driver error and every row that fails FeedItem validation is
    re-raised as RetrievalError so callers never mistake a failure for an
    empty page.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve_ids_for_tags(self, tag_values: Sequence[str]) -> List[str]:
        """
        Items that carry *every* requested value, in any category:

            SELECT media_id FROM media_tag
            WHERE tag_value IN (:values)
            GROUP BY media_id
            HAVING COUNT(DISTINCT tag_value) = :n
        """
        values = sorted(set(tag_values))
        if not values:
            return []
        T = DBMediaTag
        stmt = (
            select(T.media_id)
            .where(T.tag_value.in_(values))
            .group_by(T.media_id)
            .having(func.count(func.distinct(T.tag_value)) == len(values))
        )
        try:
            return [str(mid) for (mid,) in self.session.execute(stmt).all()]
        except SQLAlchemyError as e:
            logger.error("resolve_ids_for_tags failed: %s", e)
            raise RetrievalError(str(e)) from e

    def fetch_page(self, query: PageQuery) -> List[FeedItem]:
        MI = DBMediaItem
        stmt = select(MI).options(selectinload(MI.tags))

        if query.allowed_ids is not None:
            ids = [u for u in (_as_uuid(x) for x in query.allowed_ids) if u is not None]
            if not ids:
                # nothing could match; skip the round trip
                return []
            # one uuid[] parameter, however large the tag match is
            allowed = bindparam("allowed_ids", ids, type_=ARRAY(PG_UUID(as_uuid=True)))
            stmt = stmt.where(MI.id == any_(allowed))

        if query.media_kind is not None:
            stmt = stmt.where(MI.media_type == query.media_kind)

        if query.before is not None:
            ts = query.before.created_at_dt
            tie_id = _as_uuid(query.before.item_id) if query.before.item_id else None
            if tie_id is not None:
                stmt = stmt.where(
                    or_(
                        MI.date_created < ts,
                        and_(MI.date_created == ts, MI.id < tie_id),
                    )
                )
            else:
                stmt = stmt.where(MI.date_created < ts)

        stmt = stmt.order_by(MI.date_created.desc(), MI.id.desc()).limit(query.fetch_limit)

        try:
            rows = self.session.execute(stmt).scalars().all()
            return [to_feed_item(r) for r in rows]
        except SQLAlchemyError as e:
            logger.error("fetch_page failed: %s", e)
            raise RetrievalError(str(e)) from e
        except ValueError as e:
            raise RetrievalError(f"Invalid media row: {e!s}") from e

    def get_item(self, item_id: str) -> Optional[FeedItem]:
        uid = _as_uuid(item_id)
        if uid is None:
            return None
        stmt = select(DBMediaItem).options(selectinload(DBMediaItem.tags)).where(DBMediaItem.id == uid)
        try:
            row = self.session.execute(stmt).scalars().first()
            return to_feed_item(row) if row else None
        except SQLAlchemyError as e:
            logger.error("get_item failed: %s", e)
            raise RetrievalError(str(e)) from e
        except ValueError as e:
            raise RetrievalError(f"Invalid media row: {e!s}") from e

    def list_tag_counts(self) -> List[Tuple[str, str, int]]:
        T = DBMediaTag
        n = func.count(func.distinct(T.media_id))
        stmt = (
            select(T.tag_category, T.tag_value, n.label("n"))
            .group_by(T.tag_category, T.tag_value)
            .order_by(T.tag_category.asc(), n.desc(), T.tag_value.asc())
        )
        try:
            return [(c, v, int(k)) for (c, v, k) in self.session.execute(stmt).all()]
        except SQLAlchemyError as e:
            logger.error("list_tag_counts failed: %s", e)
            raise RetrievalError(str(e)) from e
