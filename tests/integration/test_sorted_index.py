"""Integration tests: composite keys as a sorted index.

Keys are handed to a sortedcontainers.SortedDict as raw bytes, the way a
storage layer would store them, and range scans are checked against
chronological order.
"""

import datetime
import random

import pytest
from sortedcontainers import SortedDict

from keyz import KeyBuilder, UtcDate, make_key

UTC = datetime.timezone.utc


@pytest.fixture
def events():
    """Create shuffled (timestamp, event id) pairs spanning several days."""
    start = datetime.datetime(2016, 11, 6, tzinfo=UTC)
    pairs = [
        (start + datetime.timedelta(hours=7 * i, milliseconds=i), f"event{i:03d}")
        for i in range(50)
    ]
    random.Random(42).shuffle(pairs)
    return pairs


@pytest.fixture
def index(events):
    """Create a sorted index keyed by (timestamp, event id)."""
    idx = SortedDict()
    for ts, event_id in events:
        idx[bytes(make_key(ts, event_id))] = event_id
    return idx


def test_index_iterates_chronologically(index, events):
    """Test that byte order of keys is chronological order."""
    expected = [event_id for _ts, event_id in sorted(events)]

    assert list(index.values()) == expected


def test_date_prefix_range_scan(index, events):
    """Test scanning one UTC day using date keys as bounds."""
    day = UtcDate.from_ymd(2016, 11, 8)
    start = bytes(make_key(day))
    end = bytes(make_key(UtcDate(day.date + datetime.timedelta(days=1))))

    scanned = [index[k] for k in index.irange(start, end, inclusive=(True, False))]

    expected = [
        event_id
        for ts, event_id in sorted(events)
        if ts.astimezone(UTC).date() == day.date
    ]
    assert scanned == expected
    assert scanned


def test_offsets_collapse_to_one_entry():
    """Test that one instant written with two offsets is a single index entry."""
    idx = SortedDict()
    utc = datetime.datetime(2016, 11, 8, 9, 0, tzinfo=UTC)
    tokyo = utc.astimezone(datetime.timezone(datetime.timedelta(hours=9)))

    idx[bytes(make_key(utc, "a"))] = 1
    idx[bytes(KeyBuilder().add(tokyo).add("a").build())] = 2

    assert len(idx) == 1
    assert list(idx.values()) == [2]
