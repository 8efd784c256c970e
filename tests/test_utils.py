from __future__ import annotations

import pytest

from eventhub.utils.dates import normalize_date, normalize_time
from eventhub.utils.slug import generate_slug


@pytest.mark.parametrize(
    "title, expected",
    [
        ("React Conf 2024!", "react-conf-2024"),
        ("  Hello___World -- 2024  ", "hello-world-2024"),
        ("AWS re:Invent 2024", "aws-reinvent-2024"),
        ("Google I/O 2024", "google-io-2024"),
        ("--Already-Slugged--", "already-slugged"),
        ("!!!", ""),
    ],
)
def test_generate_slug(title, expected):
    assert generate_slug(title) == expected


def test_normalize_date_canonicalizes_parseable_input():
    assert normalize_date("Oct 15, 2024") == "2024-10-15"
    assert normalize_date(" 2024-10-15 ") == "2024-10-15"


def test_normalize_date_converts_offsets_to_utc():
    assert normalize_date("2024-10-15T23:30:00-05:00") == "2024-10-16"


def test_normalize_date_keeps_unparseable_input():
    # no error surfaced; the trimmed original is stored as-is
    assert normalize_date("  sometime next spring ") == "sometime next spring"


@pytest.mark.parametrize(
    "value",
    ["October 15-16, 2024", "December 2-6, 2024", "today", "now", "9:00 AM", "2024", "15"],
)
def test_normalize_date_never_guesses_partial_dates(value):
    assert normalize_date(value) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        ("October 15, 2024", "2024-10-15"),
        ("10/15/2024", "2024-10-15"),
        ("15 October 2024", "2024-10-15"),
        ("2024-10-15 09:00", "2024-10-15"),
    ],
)
def test_normalize_date_known_formats(value, expected):
    assert normalize_date(value) == expected


def test_normalize_time_only_trims():
    assert normalize_time("  9:00 AM - 6:00 PM\n") == "9:00 AM - 6:00 PM"
