# galleryfeed/common/pagination/cursor.py
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from galleryfeed.common.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FeedCursor:
    """
    Decoded continuation token: "items strictly older than this position".

    created_at is kept as the exact text that was encoded so that a
    decode(encode(t)) round-trip returns t unchanged. item_id, when present,
    breaks ties between rows sharing the same timestamp.
    """
    created_at: str
    item_id: Optional[str] = None

    @property
    def created_at_dt(self) -> datetime:
        return parse_timestamp(self.created_at)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp; naive values are taken as UTC.
    Raises ValueError on anything else.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("timestamp must be a non-empty string")
    dt = datetime.fromisoformat(value.strip())
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(token: str) -> bytes:
    padded = token + "=" * (-len(token) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


def encode_cursor(created_at: str, item_id: Optional[str] = None) -> str:
    """
    Build the opaque, URL-safe token handed to clients as `nextCursor`.
    """
    payload: dict[str, str] = {"ts": created_at}
    if item_id is not None:
        payload["id"] = str(item_id)
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return _b64url_encode(raw)


def decode_cursor(token: Optional[str]) -> Optional[FeedCursor]:
    """
    Inverse of encode_cursor. Returns None for anything malformed; callers
    treat that as "no cursor supplied". Never raises.

    Tokens whose payload is a bare timestamp (no JSON wrapper) are accepted
    and yield a cursor without a tie-break id.
    """
    if not token or not isinstance(token, str):
        return None
    try:
        text = _b64url_decode(token.strip()).decode("utf-8")
    except (ValueError, binascii.Error, UnicodeError):
        logger.debug("Ignoring undecodable cursor %r", token)
        return None

    created_at: object
    item_id: object = None
    if text.startswith("{"):
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError):
            logger.debug("Ignoring cursor with invalid JSON payload")
            return None
        if not isinstance(payload, dict):
            return None
        created_at = payload.get("ts")
        item_id = payload.get("id")
    else:
        created_at = text

    if not isinstance(created_at, str):
        return None
    if item_id is not None and (not isinstance(item_id, str) or not item_id):
        return None
    try:
        parse_timestamp(created_at)
    except (ValueError, TypeError):
        logger.debug("Ignoring cursor with unparseable timestamp %r", created_at)
        return None
    return FeedCursor(created_at=created_at, item_id=item_id)
