import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cubesheets.models.cube import Card


@pytest.fixture
def sample_cube_json() -> dict[str, Any]:
    """Sample cubeJSON response from Cube Cobra."""
    fixture_path = Path(__file__).parent / "fixtures" / "cube_sample.json"
    return json.loads(fixture_path.read_text(encoding="utf-8"))


@pytest.fixture
def make_card() -> Callable[..., Card]:
    """Factory for minimal cube cards."""

    def _make_card(
        name: str,
        color_identity: list[str] | None = None,
        type_line: str = "Creature — Human",
        cmc: Any = 1,
        **details: Any,
    ) -> Card:
        return {
            "cardID": name.lower().replace(" ", "-"),
            "cmc": cmc,
            "type_line": type_line,
            "details": {
                "name": name,
                "color_identity": color_identity if color_identity is not None else [],
                **details,
            },
        }

    return _make_card
