from datetime import datetime, timezone

import pytest

from galleryfeed.domain.entities.feed_item import FeedItem, TagAssignment, group_tags
from galleryfeed.domain.enums.media_kind import MediaKind


def _kw(**over):
    kw = dict(
        id="m1",
        media_type="image",
        media_url="https://cdn.example.test/m1.jpg",
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    kw.update(over)
    return kw


def test_feed_item_coerces_kind_and_naive_timestamp():
    item = FeedItem(**_kw(media_type="VIDEO", created_at=datetime(2025, 1, 1)))
    assert item.media_type is MediaKind.video
    assert item.created_at.tzinfo is timezone.utc


@pytest.mark.parametrize(
    "over",
    [
        {"id": ""},
        {"id": None},
        {"media_type": "gif"},
        {"media_url": ""},
        {"created_at": "2025-01-01T00:00:00Z"},
        {"tags": (("hair", "blonde"),)},
    ],
)
def test_feed_item_rejects_invalid_fields(over):
    with pytest.raises(ValueError):
        FeedItem(**_kw(**over))


def test_tag_assignment_requires_both_parts():
    with pytest.raises(ValueError):
        TagAssignment(category="hair", value=" ")
    with pytest.raises(ValueError):
        TagAssignment(category="", value="blonde")


def test_group_tags_keeps_first_seen_order_and_drops_repeats():
    tags = [
        TagAssignment("place", "beach"),
        TagAssignment("hair", "blonde"),
        TagAssignment("place", "pool"),
        TagAssignment("place", "beach"),
    ]
    assert group_tags(tags) == {"place": ["beach", "pool"], "hair": ["blonde"]}


def test_from_mapping_accepts_both_tag_shapes():
    a = FeedItem.from_mapping({**_kw(created_at="2025-02-03T04:05:06+00:00"),
                               "media_tags": [{"tag_category": "hair", "tag_value": "red"}]})
    b = FeedItem.from_mapping({**_kw(), "tags": [{"category": "hair", "value": "red"}]})
    assert a.tags == b.tags == (TagAssignment("hair", "red"),)
    assert a.created_at == datetime(2025, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "row",
    [
        {"id": "x", "media_type": "image", "media_url": "u"},
        {"id": "x", "media_type": "image", "media_url": "u", "created_at": "soon"},
        {**_kw(), "tags": [{"category": "hair"}]},
        {**_kw(), "tags": ["hair:red"]},
    ],
)
def test_from_mapping_raises_value_error_on_bad_rows(row):
    with pytest.raises(ValueError):
        FeedItem.from_mapping(row)
