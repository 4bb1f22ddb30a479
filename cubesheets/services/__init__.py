from cubesheets.services.card_fields import CARD_FIELD_FORMATTERS, format_card_field
from cubesheets.services.card_sorter import (
    card_sort_key,
    card_type_rank,
    color_identity_rank,
    normalize_color_identity,
    sort_cards,
)
from cubesheets.services.cube_client import api_url_for_cube, fetch_cube
from cubesheets.services.cube_queries import get_cube_metadata, list_cube_cards

__all__ = [
    "CARD_FIELD_FORMATTERS",
    "api_url_for_cube",
    "card_sort_key",
    "card_type_rank",
    "color_identity_rank",
    "fetch_cube",
    "format_card_field",
    "get_cube_metadata",
    "list_cube_cards",
    "normalize_color_identity",
    "sort_cards",
]
