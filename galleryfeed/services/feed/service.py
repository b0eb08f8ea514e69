# galleryfeed/services/feed/service.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from galleryfeed.common.logging import get_logger
from galleryfeed.common.pagination.cursor import decode_cursor
from galleryfeed.domain.dataclasses.feed import FeedPage, PageQuery, TagCategory, TagValueCount
from galleryfeed.domain.entities.feed_item import FeedItem
from galleryfeed.domain.errors import MissingParameterError, RetrievalError
from galleryfeed.domain.ports.feed import MediaFeedPort
from galleryfeed.services.feed.assembler import assemble_page
from galleryfeed.services.feed.params import clamp_limit, parse_media_kind, parse_tag_values
from galleryfeed.services.feed.planner import plan_page
from galleryfeed.services.feed.resolver import TagFilter, resolve_tag_filter

logger = get_logger(__name__)


def coerce_feed_item(row: Any) -> FeedItem:
    """
    Boundary check for rows coming back from the repository. Anything that
    does not validate is a backing-store failure, not something to patch up.
    """
    if isinstance(row, FeedItem):
        return row
    if hasattr(row, "keys"):
        try:
            return FeedItem.from_mapping(row)
        except ValueError as e:
            raise RetrievalError(f"Invalid media row from store: {e!s}") from e
    raise RetrievalError(f"Invalid media row from store: {type(row).__name__}")


class FeedService:
    """
    Cursor-paginated media retrieval for the feed and tag-search endpoints.

    The repository is handed in per request; the service keeps no state
    between calls, so a cursor is all a client needs to continue.

        request -> [resolve tags] -> plan -> fetch(limit + 1) -> assemble
    """

    def __init__(self, repo: MediaFeedPort) -> None:
        self.repo = repo

    # ------------------------------------------------------------------
    # Feed / search
    # ------------------------------------------------------------------
    def feed(
        self,
        *,
        cursor: Optional[str] = None,
        limit: int | str | None = None,
        media_type: Optional[str] = None,
        tags: Optional[str] = None,
    ) -> FeedPage:
        tag_values = parse_tag_values(tags)
        tag_filter = resolve_tag_filter(self.repo, tag_values)
        page = self._page(cursor=cursor, limit=limit, media_type=media_type, tag_filter=tag_filter)
        # the unfiltered feed never reports a match count
        page.total_matches = None
        return page

    def search(
        self,
        *,
        tags: Optional[str],
        cursor: Optional[str] = None,
        limit: int | str | None = None,
        media_type: Optional[str] = None,
    ) -> FeedPage:
        if tags is None or tags == "":
            raise MissingParameterError("Missing required 'tags' query parameter")
        tag_values = parse_tag_values(tags)
        if not tag_values:
            raise MissingParameterError("At least one tag value is required")

        tag_filter = resolve_tag_filter(self.repo, tag_values)
        page = self._page(cursor=cursor, limit=limit, media_type=media_type, tag_filter=tag_filter)
        page.total_matches = tag_filter.total_matches
        return page

    def _page(
        self,
        *,
        cursor: Optional[str],
        limit: int | str | None,
        media_type: Optional[str],
        tag_filter: TagFilter,
    ) -> FeedPage:
        size = clamp_limit(limit)
        position = decode_cursor(cursor) if cursor else None
        if cursor and position is None:
            logger.debug("Malformed cursor ignored; starting from newest")

        query = plan_page(
            limit=size,
            cursor=position,
            media_kind=parse_media_kind(media_type),
            tag_filter=tag_filter,
        )
        if query is None:
            logger.debug("Tag filter matched nothing; skipping fetch")
            return FeedPage(items=[], next_cursor=None, total_matches=0)

        rows = self._fetch(query)
        return assemble_page(rows, size, total_matches=tag_filter.total_matches)

    def _fetch(self, query: PageQuery) -> List[FeedItem]:
        try:
            raw = self.repo.fetch_page(query)
        except RetrievalError:
            raise
        except Exception as e:
            logger.error("Page fetch failed: %s", e)
            raise RetrievalError(f"Page fetch failed: {e!s}") from e
        if raw is None:
            raise RetrievalError("Page fetch returned no result set")

        rows = [coerce_feed_item(r) for r in raw]
        if len(rows) > query.fetch_limit:
            # over-delivering store; keep the contract and drop the surplus
            logger.warning("Store returned %d rows for fetch_limit=%d", len(rows), query.fetch_limit)
            rows = rows[: query.fetch_limit]
        return rows

    # ------------------------------------------------------------------
    # Single item / tag index
    # ------------------------------------------------------------------
    def get_item(self, item_id: str) -> Optional[FeedItem]:
        try:
            row = self.repo.get_item(item_id)
        except RetrievalError:
            raise
        except Exception as e:
            logger.error("Item lookup failed for %s: %s", item_id, e)
            raise RetrievalError(f"Item lookup failed: {e!s}") from e
        return coerce_feed_item(row) if row is not None else None

    def tag_categories(self) -> List[TagCategory]:
        try:
            rows: Sequence = self.repo.list_tag_counts()
        except RetrievalError:
            raise
        except Exception as e:
            logger.error("Tag count lookup failed: %s", e)
            raise RetrievalError(f"Tag count lookup failed: {e!s}") from e

        by_name: Dict[str, List[TagValueCount]] = {}
        try:
            for category, value, count in rows or ():
                by_name.setdefault(str(category), []).append(TagValueCount(value=str(value), count=int(count)))
        except (TypeError, ValueError) as e:
            raise RetrievalError(f"Invalid tag count row from store: {e!s}") from e

        out: List[TagCategory] = []
        for name in sorted(by_name):
            values = sorted(by_name[name], key=lambda v: (-v.count, v.value))
            out.append(TagCategory(name=name, values=values))
        return out
