from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def generate_slug(text: str) -> str:
    """
    Turn a title into a URL-friendly slug:
      "React Conf 2024!" -> "react-conf-2024"
    No uniqueness suffix is added; the unique index on events.slug decides.
    """
    s = text.lower().strip()
    s = _DISALLOWED.sub("", s)
    s = _SEPARATORS.sub("-", s)
    return s.strip("-")
