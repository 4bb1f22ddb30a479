from cubesheets.parsers.cube_link import overview_url_for_cube, resolve_cube_id
from cubesheets.parsers.field_names import (
    CARD_FIELD_ALIASES,
    flatten_fields,
    normalize_field_name,
    normalize_field_names,
)

__all__ = [
    "CARD_FIELD_ALIASES",
    "flatten_fields",
    "normalize_field_name",
    "normalize_field_names",
    "overview_url_for_cube",
    "resolve_cube_id",
]
