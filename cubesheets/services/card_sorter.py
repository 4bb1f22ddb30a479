"""
Card sorting.

Orders cube cards the way players lay out a collection: by color identity,
then card type, then mana value, then name.
"""

import math
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from cubesheets.models.cube import Card
from cubesheets.services.card_fields import card_detail, card_details

COLORS = ("W", "U", "B", "R", "G")

# Mono, two, three, four and five color, then colorless last
COLOR_IDENTITY_ORDER = (
    "W",
    "U",
    "B",
    "R",
    "G",
    "WU",
    "WB",
    "WR",
    "WG",
    "UB",
    "UR",
    "UG",
    "BR",
    "BG",
    "RG",
    "WUB",
    "WUR",
    "WUG",
    "WBR",
    "WBG",
    "WRG",
    "UBR",
    "UBG",
    "URG",
    "BRG",
    "WUBR",
    "WUBG",
    "WURG",
    "WBRG",
    "UBRG",
    "WUBRG",
    "",
)

_COLOR_IDENTITY_RANK = MappingProxyType(
    {identity: index for index, identity in enumerate(COLOR_IDENTITY_ORDER)}
)

CARD_TYPE_ORDER = (
    "Creature",
    "Instant",
    "Sorcery",
    "Artifact",
    "Enchantment",
    "Planeswalker",
    "Land",
)

# Rank for type lines matching none of CARD_TYPE_ORDER
UNKNOWN_TYPE_RANK = len(CARD_TYPE_ORDER)


def normalize_color_identity(color_identity: Iterable[str]) -> str:
    """
    Canonical WUBRG-ordered string for a color identity.

    Case and order of the input don't matter, duplicates collapse and
    non-WUBRG symbols are dropped: ``["g", "W", "G"]`` -> ``"WG"``.
    """
    joined = "".join(str(color) for color in color_identity).upper()
    return "".join(color for color in COLORS if color in joined)


def color_identity_rank(color_identity: Iterable[str]) -> int:
    """Position of the color identity in COLOR_IDENTITY_ORDER (colorless is last)."""
    return _COLOR_IDENTITY_RANK[normalize_color_identity(color_identity)]


def card_type_rank(type_line: str | None) -> int:
    """
    Rank of the first CARD_TYPE_ORDER entry found in the type line.

    "Artifact Creature — Golem" ranks as a Creature. Unrecognized or
    missing type lines rank UNKNOWN_TYPE_RANK, after every known type.
    """
    if not type_line:
        return UNKNOWN_TYPE_RANK

    for index, card_type in enumerate(CARD_TYPE_ORDER):
        if card_type in type_line:
            return index

    return UNKNOWN_TYPE_RANK


def _mana_value(cmc: Any) -> float:
    """Loosely coerce a mana value; missing or non-numeric values sort last."""
    if cmc is None or isinstance(cmc, bool):
        return math.inf
    try:
        value = float(cmc)
    except (TypeError, ValueError):
        return math.inf
    return math.inf if math.isnan(value) else value


def card_sort_key(card: Card) -> tuple[int, int, float, str]:
    """
    Sort key for a cube card.

    Raises:
        MissingCardDataError: If the card has no details or no color identity
    """
    return (
        color_identity_rank(card_detail(card, "color_identity")),
        card_type_rank(card.get("type_line")),
        _mana_value(card.get("cmc")),
        card_details(card).get("name") or "",
    )


def sort_cards(cards: list[Card]) -> list[Card]:
    """
    Sort cards by color identity, type, mana value and name.

    The list is sorted in place and returned. Cards equal on every key
    keep their input order.
    """
    cards.sort(key=card_sort_key)
    return cards
