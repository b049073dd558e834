from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    title: str = ""
    description: str = ""
    type: str = ""
    image: str = ""
    provider_name: str = ""

    @property
    def has_metadata(self) -> bool:
        return any((self.title, self.description, self.type, self.image, self.provider_name))


def serialize_card(card: Card) -> dict[str, Any]:
    return card.model_dump(mode="json")


def parse_card(payload: dict[str, Any] | None) -> Card | None:
    if not payload:
        return None
    return Card.model_validate(payload)
