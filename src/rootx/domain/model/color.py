"""Color master list entry (optional lookup data for the admin UI)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from rootx.domain.exceptions import ValidationError
from rootx.domain.model.value_objects import new_entity_id


@dataclass
class Color:

    id: str
    name: str
    hex: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str | None, hex: str | None = None) -> Color:
        if name is None or not name.strip():
            raise ValidationError("Color name required")
        return Color(
            id=new_entity_id(),
            name=name.strip(),
            hex=hex.strip() if hex else None,
        )
