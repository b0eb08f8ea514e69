# galleryfeed/services/feed/assembler.py
from __future__ import annotations

from typing import Optional, Sequence

from galleryfeed.common.pagination.cursor import encode_cursor
from galleryfeed.domain.dataclasses.feed import FeedPage
from galleryfeed.domain.entities.feed_item import FeedItem


def assemble_page(rows: Sequence[FeedItem], limit: int, total_matches: Optional[int] = None) -> FeedPage:
    """
    Trim an over-fetched (limit + 1) result back to `limit` and derive the
    next cursor from the last *retained* row.
    """
    has_next = len(rows) > limit
    items = list(rows[:limit]) if has_next else list(rows)

    next_cursor: Optional[str] = None
    if has_next and items:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at.isoformat(), last.id)

    return FeedPage(items=items, next_cursor=next_cursor, total_matches=total_matches)
