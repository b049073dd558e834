from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from linkpreview.schemas.card import Card

_OPEN_GRAPH_FIELDS = {
    "og:title": "title",
    "og:description": "description",
    "og:type": "type",
    "og:image": "image",
    "og:site_name": "provider_name",
}


def _attr(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def extract_open_graph_fields(soup: BeautifulSoup, link: str) -> dict[str, str]:
    """Walk every ``<meta>`` tag and map OpenGraph properties onto card fields.

    Every matching tag assigns, so the last occurrence of a property wins. An
    empty ``og:url`` never replaces the link already in place.
    """
    fields: dict[str, str] = {"url": link}
    for tag in soup.find_all("meta"):
        prop = _attr(tag, "property") or ""
        content = _attr(tag, "content") or ""

        if prop == "og:url":
            if content:
                fields["url"] = content
            continue

        field_name = _OPEN_GRAPH_FIELDS.get(prop)
        if field_name is not None:
            fields[field_name] = content

    return fields


def extract_card(soup: BeautifulSoup, link: str, card_id: str) -> Card:
    fields = extract_open_graph_fields(soup, link)

    if not fields.get("title"):
        fields["title"] = "".join(tag.get_text() for tag in soup.find_all("title"))

    if not fields.get("description"):
        tag = soup.find("meta", attrs={"name": "description"})
        if tag is not None:
            description = _attr(tag, "content")
            if description is not None:
                fields["description"] = description

    return Card(id=card_id, **fields)
