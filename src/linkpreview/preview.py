from __future__ import annotations

import logging
from datetime import datetime

import httpx

from linkpreview.config import Settings, get_settings
from linkpreview.errors import PreviewError
from linkpreview.schemas.card import Card
from linkpreview.services.extractor import extract_card
from linkpreview.services.fetcher import open_document
from linkpreview.services.ids import new_card_id
from linkpreview.services.selector import extract_last_url
from linkpreview.services.validator import validate_url

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        headers=settings.client_headers(),
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
    )


class PreviewService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def fetch_preview(
        self,
        text: str,
        now: datetime,
        client: httpx.Client | None = None,
    ) -> Card | None:
        """Build a preview card for the last link in ``text``.

        Returns ``None`` when ``text`` holds no link. Any failure after a link
        was found raises a :class:`PreviewError`; callers should treat it as
        "preview unavailable" and carry on.

        The injected ``client`` is left open. Without one, a client is built
        from the settings (bounded by ``request_timeout_seconds``) and closed
        before returning.
        """
        link = extract_last_url(text)
        if not link:
            logger.debug("No link found in text")
            return None

        logger.debug("Selected link %s", link)
        try:
            validate_url(link)
            if client is not None:
                return self._build_card(client, link, now)
            with build_client(self.settings) as owned_client:
                return self._build_card(owned_client, link, now)
        except PreviewError as exc:
            logger.warning("Preview failed for %s: %s", link, exc)
            raise

    def _build_card(self, client: httpx.Client, link: str, now: datetime) -> Card:
        soup = open_document(client, link)
        card = extract_card(soup, link, new_card_id(now))
        logger.info("Built card %s for %s (metadata=%s)", card.id, card.url, card.has_metadata)
        return card


def fetch_preview(
    text: str,
    now: datetime,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> Card | None:
    service = PreviewService(settings or get_settings())
    return service.fetch_preview(text, now, client=client)
