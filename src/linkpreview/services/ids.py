from __future__ import annotations

from datetime import datetime

from ulid import ULID


def new_card_id(now: datetime) -> str:
    """Return a ULID whose timestamp component is ``now``."""
    return str(ULID.from_datetime(now))
