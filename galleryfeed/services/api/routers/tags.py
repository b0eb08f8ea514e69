from __future__ import annotations

from fastapi import APIRouter, Depends

from galleryfeed.common.settings import get_settings
from galleryfeed.services.api.deps import get_feed_service
from galleryfeed.services.feed.service import FeedService
from galleryfeed.services.mappers.feed import to_categories_read
from galleryfeed.services.schemas import ErrorRead, TagCategoriesRead

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["tags"])


@router.get("/tag-categories", response_model=TagCategoriesRead, responses={500: {"model": ErrorRead}})
def list_tag_categories(svc: FeedService = Depends(get_feed_service)) -> TagCategoriesRead:
    """
    Every tag category with its distinct values and item counts, e.g.
    { "categories": [ { "name": "hair", "values": [ { "value": "blonde", "count": 45 } ] } ] }
    """
    return to_categories_read(svc.tag_categories())
