"""Shared base for API payload models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class OpenModel(BaseModel):
    """Payload model that accepts and keeps undeclared fields."""

    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """Dump only the fields that were set, plus any extra fields."""

        return self.model_dump(mode="json", exclude_unset=True)


# A numeric string matches ``str`` exactly, so it is kept as sent rather than coerced.
Number = float | str | None
