# galleryfeed/services/schemas/feed.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from galleryfeed.domain.enums.media_kind import MediaKind


class MediaItemRead(BaseModel):
    id: str
    media_type: MediaKind
    media_url: str
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None
    created_at: datetime
    # {category: [values]}
    tags: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True, use_enum_values=False)


class FeedPageRead(BaseModel):
    data: List[MediaItemRead] = Field(default_factory=list)
    next_cursor: Optional[str] = Field(None, alias="nextCursor")

    model_config = ConfigDict(populate_by_name=True)


class SearchPageRead(FeedPageRead):
    total_matches: int = Field(0, ge=0, alias="totalMatches")


class TagValueCountRead(BaseModel):
    value: str
    count: int

    model_config = ConfigDict(from_attributes=True)


class TagCategoryRead(BaseModel):
    name: str
    values: List[TagValueCountRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TagCategoriesRead(BaseModel):
    categories: List[TagCategoryRead] = Field(default_factory=list)


class ErrorRead(BaseModel):
    error: str
