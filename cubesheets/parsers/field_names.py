"""
Card field name normalization.

Cube Cobra card attributes are a mix of snake_case (``type_line``,
``color_identity``) and camelCase (``cardID``, ``addedTmsp``). Sheet users
type headers like "Mana Value" or "Card Name", so names are snake-cased
and then mapped through a fixed alias table.
"""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

CARD_FIELD_ALIASES = MappingProxyType(
    {
        "card_name": "name",
        "card": "name",
        "type": "type_line",
        "color": "colors",
        "color_category": "colorCategory",
        "is_unlimited": "isUnlimited",
        "card_id": "cardID",
        "cube_count": "cubeCount",
        "pick_count": "pickCount",
        "is_token": "isToken",
        "mv": "cmc",
        "mana_value": "cmc",
        "converted_mana_cost": "cmc",
        "added_timestamp": "addedTmsp",
        "price": "price_usd",
    }
)


def flatten_fields(fields: Any) -> list[Any]:
    """
    Flatten a nested list of field names into a single list.

    Sheet ranges arrive as lists of rows, so ``[["name", "cmc"]]`` and
    ``["name", ["cmc"]]`` both become ``["name", "cmc"]``. A bare string
    is a single field.
    """
    if isinstance(fields, str) or not isinstance(fields, Iterable):
        return [fields]

    flat: list[Any] = []
    for item in fields:
        flat.extend(flatten_fields(item))
    return flat


def normalize_field_name(name: str) -> str:
    """
    Map a user-supplied field name to the name Cube Cobra uses.

    Example: "Mana Value" -> "mana_value" -> "cmc"
    """
    snake_name = str(name).lower().replace(" ", "_")
    return CARD_FIELD_ALIASES.get(snake_name, snake_name)


def normalize_field_names(fields: Any) -> list[str]:
    """Flatten ``fields`` and normalize every name, preserving order."""
    return [normalize_field_name(name) for name in flatten_fields(fields)]
