from typing import Any

import httpx
import pytest
import respx

from cubesheets.models.failure import CubeFetchError, FailureKind
from cubesheets.services.cube_client import api_url_for_cube, fetch_cube

CUBE_URL = "https://cubecobra.com/cube/api/cubeJSON/sample-cube"


class TestApiUrl:
    def test_builds_cube_json_url(self) -> None:
        assert api_url_for_cube("sample-cube") == CUBE_URL


class TestFetchCube:
    """Tests for fetching cubes from Cube Cobra."""

    @respx.mock
    def test_fetches_and_parses_cube(self, sample_cube_json: dict[str, Any]) -> None:
        """Can fetch a cube from the cubeJSON endpoint."""
        route = respx.get(CUBE_URL).mock(
            return_value=httpx.Response(200, json=sample_cube_json)
        )

        cube = fetch_cube("sample-cube")

        assert route.call_count == 1
        assert cube.id == "sample-cube"
        assert len(cube.mainboard) == 7
        assert cube.attribute("name") == "Sample Vintage Cube"

    @respx.mock
    def test_sends_user_agent(self, sample_cube_json: dict[str, Any]) -> None:
        route = respx.get(CUBE_URL).mock(
            return_value=httpx.Response(200, json=sample_cube_json)
        )

        fetch_cube("sample-cube")

        assert route.calls.last.request.headers["User-Agent"] == "CubeSheets/1.0"

    @respx.mock
    def test_uses_given_client(self, sample_cube_json: dict[str, Any]) -> None:
        """A caller-supplied client is used for the request."""
        respx.get(CUBE_URL).mock(return_value=httpx.Response(200, json=sample_cube_json))

        with httpx.Client(headers={"User-Agent": "custom"}) as client:
            cube = fetch_cube("sample-cube", client=client)

        assert cube.id == "sample-cube"
        assert respx.calls.last.request.headers["User-Agent"] == "custom"

    @respx.mock
    def test_raises_on_http_error(self) -> None:
        """HTTP errors are wrapped in CubeFetchError."""
        respx.get(CUBE_URL).mock(return_value=httpx.Response(404))

        with pytest.raises(CubeFetchError, match="HTTP 404") as exc_info:
            fetch_cube("sample-cube")

        assert exc_info.value.kind == FailureKind.EXTERNAL_API_ERROR
        assert exc_info.value.cube_id == "sample-cube"
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @respx.mock
    def test_raises_on_transport_error(self) -> None:
        respx.get(CUBE_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(CubeFetchError, match="connection refused"):
            fetch_cube("sample-cube")

    @respx.mock
    def test_raises_on_invalid_json(self) -> None:
        respx.get(CUBE_URL).mock(return_value=httpx.Response(200, text="<html>Not found</html>"))

        with pytest.raises(CubeFetchError, match="not valid JSON"):
            fetch_cube("sample-cube")

    @respx.mock
    def test_raises_on_non_cube_payload(self) -> None:
        """JSON without a mainboard is not a cube."""
        respx.get(CUBE_URL).mock(
            return_value=httpx.Response(200, json={"success": "false", "message": "Not found"})
        )

        with pytest.raises(CubeFetchError, match="not a cube document"):
            fetch_cube("sample-cube")
