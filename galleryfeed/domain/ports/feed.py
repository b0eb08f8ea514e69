from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple, Union

from galleryfeed.domain.dataclasses.feed import PageQuery
from galleryfeed.domain.entities.feed_item import FeedItem

FeedRow = Union[FeedItem, Mapping[str, Any]]


class MediaFeedPort(Protocol):
    """
    Read-only access to media + tag assignments. Implementations raise
    RetrievalError on any failure; an empty result is never a failure.
    """

    def resolve_ids_for_tags(self, tag_values: Sequence[str]) -> Sequence[Union[str, Mapping[str, Any]]]:
        """Ids of items carrying every value in tag_values (category-agnostic)."""
        ...

    def fetch_page(self, query: PageQuery) -> Sequence[FeedRow]:
        """At most query.fetch_limit rows, newest first, honoring every filter."""
        ...

    def get_item(self, item_id: str) -> Optional[FeedRow]: ...

    def list_tag_counts(self) -> Sequence[Tuple[str, str, int]]:
        """(category, value, item_count) triples."""
        ...
