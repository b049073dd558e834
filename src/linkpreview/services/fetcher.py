from __future__ import annotations

import logging
from collections.abc import Iterator

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from linkpreview.errors import BadStatusError, FetchError, ParseError

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"


class _BodyReader:
    """File-like view over a streamed response body.

    BeautifulSoup accepts any object with ``read``, so the body goes straight
    from the socket into the parser.
    """

    def __init__(self, chunks: Iterator[bytes]) -> None:
        self._chunks = chunks

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            return b"".join(self._chunks)
        return next(self._chunks, b"")


def open_document(client: httpx.Client, url: str) -> BeautifulSoup:
    """GET ``url`` once and parse the body as HTML.

    Raises:
        FetchError: The request or the body read failed.
        BadStatusError: The server answered with anything but 200.
        ParseError: The body was rejected by the HTML parser.
    """
    try:
        with client.stream("GET", url) as response:
            if response.status_code != httpx.codes.OK:
                status = f"{response.status_code} {response.reason_phrase}".strip()
                raise BadStatusError(f"unexpected status: {status}", response.status_code)

            logger.debug("Parsing %s (%s)", url, response.headers.get("content-type", "unknown"))
            try:
                return BeautifulSoup(_BodyReader(response.iter_bytes()), HTML_PARSER)
            except ParserRejectedMarkup as exc:
                raise ParseError(f"failed to parse HTML: {exc}") from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"request failed: {exc}") from exc
