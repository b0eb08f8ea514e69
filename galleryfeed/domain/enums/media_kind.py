from __future__ import annotations
from enum import StrEnum
from typing import Optional


class MediaKind(StrEnum):
    video = "video"
    image = "image"

    @classmethod
    def lookup(cls, value: object) -> Optional["MediaKind"]:
        """Return the matching member, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
