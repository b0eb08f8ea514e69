from galleryfeed.services.schemas.feed import (
    MediaItemRead,
    FeedPageRead,
    SearchPageRead,
    TagValueCountRead,
    TagCategoryRead,
    TagCategoriesRead,
    ErrorRead,
)

__all__ = [
    "MediaItemRead",
    "FeedPageRead",
    "SearchPageRead",
    "TagValueCountRead",
    "TagCategoryRead",
    "TagCategoriesRead",
    "ErrorRead",
]
