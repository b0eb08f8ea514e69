from __future__ import annotations
from enum import StrEnum


class TagFilterState(StrEnum):
    not_requested = "not_requested"  # no tags in the request
    matched = "matched"              # tags resolved to >= 1 item id
    empty = "empty"                  # tags requested, nothing carries all of them
