"""
Cube Cobra cube document.

Only the envelope is typed. Cards stay plain JSON objects because the
field lookup falls back to arbitrary keys on the card and its details,
and metadata lookups index arbitrary top-level keys of the cube.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# A mainboard entry: top-level overrides (cmc, type_line, cardID, ...) plus
# a nested "details" object with the Scryfall-derived attributes.
Card = dict[str, Any]


class CubeBoards(BaseModel):
    """The card lists of a cube."""

    model_config = ConfigDict(extra="allow")

    mainboard: list[Card]
    maybeboard: list[Card] = Field(default_factory=list)


class Cube(BaseModel):
    """
    A cube as returned by the cubeJSON endpoint.

    Attributes:
        id: Cube identifier, when the payload carries one
        cards: Mainboard and maybeboard card lists

    Every other top-level key (name, owner, description, ...) is kept as
    extra data and reachable through ``attribute``.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    cards: CubeBoards

    @property
    def mainboard(self) -> list[Card]:
        return self.cards.mainboard

    def attribute(self, field: str) -> Any:
        """Raw top-level value of ``field``, or None if the cube has no such key."""
        if field == "cards":
            return self.cards.model_dump()
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field)
