# galleryfeed/services/feed/params.py
"""
Normalization of raw feed/search query parameters.

Nothing here rejects input: out-of-range limits are clamped, unknown media
types are ignored and tag lists are cleaned up. Client errors (missing
required parameters) are decided by the service, not here.
"""
from __future__ import annotations

import re
from typing import List, Optional

from galleryfeed.common.settings import get_settings
from galleryfeed.common.strings.splitters import csv_to_unique_list
from galleryfeed.domain.enums.media_kind import MediaKind

_INTEGER = re.compile(r"[+-]?[0-9]+")
_KIND_VALUES = frozenset(k.value for k in MediaKind)


def clamp_limit(raw: int | str | None, *, default: int | None = None, maximum: int | None = None) -> int:
    cfg = get_settings().feed
    default = cfg.default_limit if default is None else default
    maximum = cfg.max_limit if maximum is None else maximum

    if raw is None or isinstance(raw, bool):
        value = default
    elif isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        try:
            value = int(text)
        except ValueError:
            if _INTEGER.fullmatch(text):
                # too many digits for int(); still an integer, just far out of range
                value = 0 if text.startswith("-") else maximum
            else:
                value = default
    return max(1, min(maximum, value))


def parse_media_kind(raw: str | MediaKind | None) -> Optional[MediaKind]:
    """Exact `image` / `video` only; any other spelling means no type filter."""
    if isinstance(raw, MediaKind):
        return raw
    return MediaKind(raw) if raw in _KIND_VALUES else None


def parse_tag_values(raw: str | List[str] | None) -> List[str]:
    return csv_to_unique_list(raw)
