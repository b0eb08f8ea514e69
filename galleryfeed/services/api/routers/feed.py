from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from galleryfeed.common.settings import get_settings
from galleryfeed.services.api.deps import get_feed_service
from galleryfeed.services.feed.service import FeedService
from galleryfeed.services.mappers.feed import to_feed_read, to_search_read
from galleryfeed.services.schemas import ErrorRead, FeedPageRead, SearchPageRead

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["feed"])

_errors = {400: {"model": ErrorRead}, 500: {"model": ErrorRead}}

# limit/type arrive as plain strings: bad values are normalized, not rejected
_CURSOR_DOC = "nextCursor from a previous response"
_LIMIT_DOC = f"Items per page (default {cfg.feed.default_limit}, max {cfg.feed.max_limit})"
_TYPE_DOC = "image | video; anything else is ignored"


@router.get("/feed", response_model=FeedPageRead, responses=_errors)
def get_feed(
    cursor: Optional[str] = Query(None, description=_CURSOR_DOC),
    limit: Optional[str] = Query(None, description=_LIMIT_DOC),
    type: Optional[str] = Query(None, description=_TYPE_DOC),
    tags: Optional[str] = Query(None, description="Comma list; ALL must match, e.g. blonde,beach"),
    svc: FeedService = Depends(get_feed_service),
) -> FeedPageRead:
    """
    Cursor-paginated feed, newest first.
    Response: { data: MediaItem[], nextCursor: string | null }
    """
    page = svc.feed(cursor=cursor, limit=limit, media_type=type, tags=tags)
    return to_feed_read(page)


@router.get("/search", response_model=SearchPageRead, responses=_errors)
def search_by_tags(
    tags: Optional[str] = Query(None, description="Required. Comma list; ALL must match"),
    cursor: Optional[str] = Query(None, description=_CURSOR_DOC),
    limit: Optional[str] = Query(None, description=_LIMIT_DOC),
    type: Optional[str] = Query(None, description=_TYPE_DOC),
    svc: FeedService = Depends(get_feed_service),
) -> SearchPageRead:
    """
    Tag search (AND across values), cursor-paginated.
    Response: { data, nextCursor, totalMatches }
    """
    page = svc.search(tags=tags, cursor=cursor, limit=limit, media_type=type)
    return to_search_read(page)
