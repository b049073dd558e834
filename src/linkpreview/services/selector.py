from __future__ import annotations

import re

_URL_RE = re.compile(r"https?://[a-zA-Z0-9./?=_-]+")


def extract_last_url(text: str | None) -> str:
    """Return the last http(s) URL in ``text``, or ``""`` when there is none.

    Shared links conventionally trail the message, so the last match wins.
    """
    if not text:
        return ""
    matches = _URL_RE.findall(text)
    if not matches:
        return ""
    return matches[-1]
