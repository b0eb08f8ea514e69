from galleryfeed.domain.enums.media_kind import MediaKind
from galleryfeed.domain.enums.tag_filter_state import TagFilterState

__all__ = [
    "MediaKind",
    "TagFilterState",
]
