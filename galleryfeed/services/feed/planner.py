# galleryfeed/services/feed/planner.py
from __future__ import annotations

from typing import Optional

from galleryfeed.common.pagination.cursor import FeedCursor
from galleryfeed.domain.dataclasses.feed import PageQuery
from galleryfeed.domain.enums.media_kind import MediaKind
from galleryfeed.services.feed.resolver import TagFilter

__all__ = ["PageQuery", "plan_page"]


def plan_page(
    *,
    limit: int,
    cursor: Optional[FeedCursor],
    media_kind: Optional[MediaKind],
    tag_filter: TagFilter,
) -> Optional[PageQuery]:
    """None means: tags were requested and matched nothing, skip the fetch."""
    if tag_filter.is_empty:
        return None
    return PageQuery(
        limit=limit,
        before=cursor,
        media_kind=media_kind,
        allowed_ids=tag_filter.allowed_ids,
    )
