# galleryfeed/database/repos/_mapping.py
from __future__ import annotations
from galleryfeed.database.models.media import MediaItem as DBMediaItem
from galleryfeed.domain.entities.feed_item import FeedItem, TagAssignment


def to_feed_item(row: DBMediaItem) -> FeedItem:
    # FeedItem.__post_init__ validates; ValueError bubbles to the repo
    return FeedItem(
        id=str(row.id),
        media_type=row.media_type,
        media_url=row.media_url,
        created_at=row.date_created,
        thumbnail_url=row.thumbnail_url,
        title=row.title,
        tags=tuple(
            TagAssignment(category=t.tag_category, value=t.tag_value)
            for t in (row.tags or [])
        ),
    )
