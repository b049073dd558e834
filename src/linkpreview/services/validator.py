from __future__ import annotations

from urllib.parse import urlsplit

from linkpreview.errors import InvalidURLError

_ALLOWED_SCHEMES = {"http", "https"}


def validate_url(link: str) -> str:
    try:
        parsed = urlsplit(link)
        host = parsed.hostname
    except ValueError as exc:
        raise InvalidURLError(f"invalid URL: {exc}") from exc

    if not parsed.scheme:
        raise InvalidURLError(f"invalid URL: missing scheme in {link!r}")

    if parsed.scheme not in _ALLOWED_SCHEMES:
        raise InvalidURLError(f"unsupported scheme: {parsed.scheme}")

    if not host:
        raise InvalidURLError(f"invalid URL: missing host in {link!r}")

    return link
