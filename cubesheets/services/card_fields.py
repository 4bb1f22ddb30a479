"""
Card field formatting.

Turns one attribute of a cube card into a single spreadsheet cell value.
Array attributes are joined and prices are picked out of the nested
``details.prices`` object; every other field is read straight off the card,
then off its details.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from cubesheets.models.cube import Card
from cubesheets.models.failure import MissingCardDataError


def card_details(card: Card) -> dict[str, Any]:
    """
    Return the card's nested ``details`` object.

    Raises:
        MissingCardDataError: If the card has no details
    """
    details = card.get("details")
    if details is None:
        raise MissingCardDataError("details", card.get("cardID"))
    return details


def card_detail(card: Card, attribute: str) -> Any:
    """
    Return a required attribute from the card's details.

    Raises:
        MissingCardDataError: If the details or the attribute are missing
    """
    value = card_details(card).get(attribute)
    if value is None:
        raise MissingCardDataError(f"details.{attribute}", card.get("cardID"))
    return value


def _joined(attribute: str, separator: str = "") -> Callable[[Card], str]:
    def formatter(card: Card) -> str:
        return separator.join(str(value) for value in card_detail(card, attribute))

    return formatter


def _price(currency: str) -> Callable[[Card], Any]:
    def formatter(card: Card) -> Any:
        return card_detail(card, "prices").get(currency)

    return formatter


CARD_FIELD_FORMATTERS: MappingProxyType[str, Callable[[Card], Any]] = MappingProxyType(
    {
        "color_identity": _joined("color_identity"),
        "colors": _joined("colors"),
        "finishes": _joined("finishes", ", "),
        "parsed_cost": _joined("parsed_cost"),
        "price_usd": _price("usd"),
        "price_usd_foil": _price("usd_foil"),
        "price_usd_etched": _price("usd_etched"),
        "price_eur": _price("eur"),
        "price_tix": _price("tix"),
    }
)


def card_attribute(card: Card, field: str) -> Any:
    """
    Read ``field`` from the card, falling back to its details.

    Top-level values are card-specific overrides in the cube, so they win
    over the details. Returns None if neither has the field.
    """
    value = card.get(field)
    if value is not None:
        return value
    return card_details(card).get(field)


def format_card_field(card: Card, field: str) -> Any:
    """
    Format a card attribute for display in a sheet cell.

    Args:
        card: Cube card
        field: Canonical (normalized) field name

    Returns:
        Scalar cell value, or None for unknown fields

    Raises:
        MissingCardDataError: If a formatted field's nested data is missing
    """
    formatter = CARD_FIELD_FORMATTERS.get(field)
    if formatter is not None:
        return formatter(card)
    return card_attribute(card, field)
