from __future__ import annotations
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException, Path

from galleryfeed.common.settings import get_settings
from galleryfeed.services.api.deps import get_feed_service
from galleryfeed.services.feed.service import FeedService
from galleryfeed.services.mappers.feed import to_item_read
from galleryfeed.services.schemas import ErrorRead, MediaItemRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/media", tags=["media"])


@router.get("/{item_id}", response_model=MediaItemRead, responses={404: {"model": ErrorRead}})
def get_media_item(
    item_id: str = Path(..., min_length=1),
    svc: FeedService = Depends(get_feed_service),
) -> MediaItemRead:
    found = svc.get_item(item_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Not found")
    return to_item_read(found)
