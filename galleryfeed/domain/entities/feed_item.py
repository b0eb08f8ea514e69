# galleryfeed/domain/entities/feed_item.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from galleryfeed.common.pagination.cursor import parse_timestamp
from galleryfeed.domain.enums.media_kind import MediaKind


@dataclass(frozen=True)
class TagAssignment:
    """
    One (category, value) label on a media item, e.g. ("hair", "blonde").
    DB enforces that (media_id, category, value) is unique.
    """
    category: str
    value: str

    def __post_init__(self):
        if not self.category or not str(self.category).strip():
            raise ValueError("tag category must be non-empty")
        if not self.value or not str(self.value).strip():
            raise ValueError("tag value must be non-empty")


def group_tags(tags: Iterable[TagAssignment]) -> Dict[str, List[str]]:
    """Reshape flat assignments into {category: [values]} keeping first-seen order."""
    out: Dict[str, List[str]] = {}
    for t in tags:
        values = out.setdefault(t.category, [])
        if t.value not in values:
            values.append(t.value)
    return out


@dataclass
class FeedItem:
    """
    A media item as served by the feed/search endpoints.

    Invariants that we keep here:
      - id and media_url are non-empty strings
      - media_type is a valid MediaKind (strings are coerced)
      - created_at is a timezone-aware datetime (naive is taken as UTC)
    Anything failing these raises ValueError; the feed service treats that
    as a backing-store failure rather than coercing silently.
    """
    id: str
    media_type: MediaKind
    media_url: str
    created_at: datetime
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None
    tags: Tuple[TagAssignment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.id is None or not str(self.id).strip():
            raise ValueError("FeedItem.id is required")
        self.id = str(self.id)

        kind = MediaKind.lookup(self.media_type)
        if kind is None:
            raise ValueError(f"unknown media_type {self.media_type!r}")
        self.media_type = kind

        if not isinstance(self.media_url, str) or not self.media_url:
            raise ValueError("FeedItem.media_url is required")

        if not isinstance(self.created_at, datetime):
            raise ValueError("FeedItem.created_at must be a datetime")
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)

        self.tags = tuple(self.tags or ())
        for t in self.tags:
            if not isinstance(t, TagAssignment):
                raise ValueError("FeedItem.tags must hold TagAssignment values")

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "FeedItem":
        """
        Build from a loosely-shaped row (e.g. a JSON record from a remote
        procedure). Tags may be TagAssignment objects or mappings with
        tag_category/tag_value (or category/value) keys.
        """
        try:
            raw_tags = row.get("tags") or row.get("media_tags") or ()
            tags = tuple(_coerce_tag(t) for t in raw_tags)
            created = row["created_at"]
            if isinstance(created, str):
                created = parse_timestamp(created)
            return cls(
                id=row["id"],
                media_type=row["media_type"],
                media_url=row["media_url"],
                created_at=created,
                thumbnail_url=row.get("thumbnail_url"),
                title=row.get("title"),
                tags=tags,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"malformed media row: {e!s}") from e

    def tags_by_category(self) -> Dict[str, List[str]]:
        return group_tags(self.tags)


def _coerce_tag(t: Any) -> TagAssignment:
    if isinstance(t, TagAssignment):
        return t
    category = t.get("tag_category", t.get("category"))
    value = t.get("tag_value", t.get("value"))
    return TagAssignment(category=category, value=value)
