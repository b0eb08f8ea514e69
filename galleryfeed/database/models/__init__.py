# galleryfeed/database/models/__init__.py

from galleryfeed.database.models.media import (
    Base,
    MediaItem,
    MediaTag,
)

__all__ = [
    "Base",
    "MediaItem",
    "MediaTag",
]
