from __future__ import annotations

import logging
import re

import pandas as pd

logger = logging.getLogger(__name__)

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]\S+)?$")

# Whole-string formats only; free text such as "October 15-16, 2024" matches none of them.
DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
)


def _parse(raw: str):
    if _ISO_PREFIX.match(raw):
        return pd.to_datetime(raw, format="ISO8601")
    for fmt in DATE_FORMATS:
        try:
            return pd.to_datetime(raw, format=fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: str) -> str:
    """
    Best-effort canonicalization to YYYY-MM-DD.
    Anything that is not a complete date in a known format (ranges like
    "October 15-16, 2024", "today", a bare time) comes back trimmed but otherwise untouched.
    """
    raw = value.strip()
    try:
        ts = _parse(raw)
    except (ValueError, OverflowError):
        ts = None
    if ts is None or pd.isna(ts):
        logger.debug("normalize_date: keeping unparsed value %r", raw)
        return raw
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return ts.strftime("%Y-%m-%d")


def normalize_time(value: str) -> str:
    return value.strip()
