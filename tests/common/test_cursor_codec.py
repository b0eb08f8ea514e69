import base64
import json
from datetime import datetime, timezone

import pytest

from galleryfeed.common.pagination.cursor import (
    FeedCursor,
    decode_cursor,
    encode_cursor,
    parse_timestamp,
)


def _raw(payload: bytes) -> str:
    return base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")


@pytest.mark.parametrize("ts", [
    "2025-03-04T05:06:07.123456+00:00",
    "2025-03-04T05:06:07Z",
    "2024-12-31T23:59:59-05:00",
    "2025-01-01T00:00:00",
])
def test_round_trip_preserves_timestamp_text(ts):
    cur = decode_cursor(encode_cursor(ts, "abc"))
    assert cur == FeedCursor(created_at=ts, item_id="abc")


def test_round_trip_without_id():
    cur = decode_cursor(encode_cursor("2025-03-04T05:06:07+00:00"))
    assert cur is not None
    assert cur.item_id is None


def test_token_is_url_safe():
    token = encode_cursor("2025-03-04T05:06:07+00:00", "???>>>~~~")
    assert not set(token) & {"+", "/", "="}
    assert decode_cursor(token).item_id == "???>>>~~~"


def test_decoded_timestamp_is_aware():
    cur = decode_cursor(encode_cursor("2025-01-01T00:00:00"))
    assert cur.created_at_dt == datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_bare_timestamp_token_is_accepted():
    cur = decode_cursor(_raw(b"2025-02-02T10:00:00+00:00"))
    assert cur == FeedCursor(created_at="2025-02-02T10:00:00+00:00", item_id=None)


@pytest.mark.parametrize("token", [
    None,
    "",
    "***",
    "not base64 at all",
    _raw(b"\xff\xfe\xfd"),
    _raw(b"yesterday"),
    _raw(b"{not json"),
    _raw(json.dumps([1, 2]).encode()),
    _raw(json.dumps({"id": "x"}).encode()),
    _raw(json.dumps({"ts": 1700000000}).encode()),
    _raw(json.dumps({"ts": "2025-01-01T00:00:00Z", "id": 7}).encode()),
    _raw(json.dumps({"ts": "2025-01-01T00:00:00Z", "id": ""}).encode()),
    _raw(json.dumps({"ts": "13/45/2025"}).encode()),
])
def test_malformed_tokens_decode_to_none(token):
    assert decode_cursor(token) is None


def test_parse_timestamp_rejects_blank():
    with pytest.raises(ValueError):
        parse_timestamp("  ")
