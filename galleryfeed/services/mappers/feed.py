# galleryfeed/services/mappers/feed.py
from __future__ import annotations

from typing import List

from galleryfeed.domain.dataclasses.feed import FeedPage, TagCategory
from galleryfeed.domain.entities.feed_item import FeedItem
from galleryfeed.services.schemas.feed import (
    FeedPageRead, MediaItemRead, SearchPageRead, TagCategoriesRead, TagCategoryRead,
)


def to_item_read(item: FeedItem) -> MediaItemRead:
    return MediaItemRead(
        id=item.id,
        media_type=item.media_type,
        media_url=item.media_url,
        thumbnail_url=item.thumbnail_url,
        title=item.title,
        created_at=item.created_at,
        tags=item.tags_by_category(),
    )


def to_feed_read(page: FeedPage) -> FeedPageRead:
    return FeedPageRead(
        data=[to_item_read(i) for i in page.items],
        next_cursor=page.next_cursor,
    )


def to_search_read(page: FeedPage) -> SearchPageRead:
    return SearchPageRead(
        data=[to_item_read(i) for i in page.items],
        next_cursor=page.next_cursor,
        total_matches=page.total_matches or 0,
    )


def to_categories_read(categories: List[TagCategory]) -> TagCategoriesRead:
    return TagCategoriesRead(
        categories=[TagCategoryRead.model_validate(c) for c in categories],
    )
