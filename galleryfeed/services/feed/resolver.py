# galleryfeed/services/feed/resolver.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Sequence
from uuid import UUID

from galleryfeed.common.logging import get_logger
from galleryfeed.domain.enums.tag_filter_state import TagFilterState
from galleryfeed.domain.errors import RetrievalError
from galleryfeed.domain.ports.feed import MediaFeedPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class TagFilter:
    """
    Outcome of resolving a tag list. Keeps "no filter" and "filter matched
    nothing" apart:

        not_requested -> allowed_ids is None, total_matches is None
        matched       -> allowed_ids is a non-empty frozenset
        empty         -> allowed_ids is an empty frozenset, total_matches == 0
    """
    state: TagFilterState
    ids: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def not_requested(cls) -> "TagFilter":
        return cls(state=TagFilterState.not_requested)

    @classmethod
    def from_ids(cls, ids: Iterable[str]) -> "TagFilter":
        s = frozenset(ids)
        return cls(state=TagFilterState.matched if s else TagFilterState.empty, ids=s)

    @property
    def is_requested(self) -> bool:
        return self.state is not TagFilterState.not_requested

    @property
    def is_empty(self) -> bool:
        return self.state is TagFilterState.empty

    @property
    def allowed_ids(self) -> Optional[FrozenSet[str]]:
        return self.ids if self.is_requested else None

    @property
    def total_matches(self) -> Optional[int]:
        return len(self.ids) if self.is_requested else None


def _row_id(row: Any) -> str:
    if isinstance(row, (str, UUID)):
        rid = row
    elif isinstance(row, Mapping):
        rid = row.get("id")
    else:
        rid = getattr(row, "id", None)
    if rid is None or not str(rid).strip():
        raise ValueError(f"tag lookup returned a row without an id: {row!r}")
    return str(rid)


def resolve_tag_filter(repo: MediaFeedPort, tag_values: Sequence[str]) -> TagFilter:
    """
    AND-intersection of tag values -> TagFilter. An empty tag list means the
    caller asked for no filter and the repository is not consulted.
    """
    if not tag_values:
        return TagFilter.not_requested()

    try:
        rows = repo.resolve_ids_for_tags(list(tag_values))
        ids = {_row_id(r) for r in (rows or ())}
    except RetrievalError:
        raise
    except Exception as e:
        logger.error("Tag lookup failed for %s: %s", list(tag_values), e)
        raise RetrievalError(f"Tag lookup failed: {e!s}") from e

    result = TagFilter.from_ids(ids)
    logger.debug("Tags %s matched %d item(s)", list(tag_values), len(result.ids))
    return result
