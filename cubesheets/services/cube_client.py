"""
Cube Cobra API client.

Fetches a single cube document from the cubeJSON endpoint. One GET per
call: no caching, no retry, no pagination.
"""

import logging

import httpx
from pydantic import ValidationError

from cubesheets.config import settings
from cubesheets.models.cube import Cube
from cubesheets.models.failure import CubeFetchError

logger = logging.getLogger(__name__)


def api_url_for_cube(cube_id: str) -> str:
    """URL of the cube's JSON document on the Cube Cobra API."""
    return f"{settings.cube_cobra_url}/cube/api/cubeJSON/{cube_id}"


def fetch_cube(cube_id: str, client: httpx.Client | None = None) -> Cube:
    """
    Fetch and parse a cube from Cube Cobra.

    Args:
        cube_id: Resolved cube ID
        client: Optional httpx client for connection reuse

    Returns:
        The parsed Cube

    Raises:
        CubeFetchError: If the request fails, the status is not 2xx, or the
            body is not a cube JSON document
    """
    url = api_url_for_cube(cube_id)
    logger.info("Fetching cube %s from %s", cube_id, url)

    try:
        if client:
            response = client.get(url)
        else:
            response = httpx.get(
                url,
                headers={"User-Agent": settings.user_agent},
                timeout=settings.request_timeout,
                follow_redirects=True,
            )
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Cube Cobra returned HTTP %s for cube %s", e.response.status_code, cube_id)
        raise CubeFetchError(cube_id, f"HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("Request for cube %s failed: %s", cube_id, e)
        raise CubeFetchError(cube_id, str(e)) from e
    except ValueError as e:
        logger.error("Cube %s response is not valid JSON: %s", cube_id, e)
        raise CubeFetchError(cube_id, "response is not valid JSON") from e

    try:
        cube = Cube.model_validate(data)
    except ValidationError as e:
        logger.error("Cube %s response is not a cube document: %s", cube_id, e)
        raise CubeFetchError(cube_id, "response is not a cube document") from e

    logger.info("Fetched cube %s with %d mainboard cards", cube_id, len(cube.mainboard))
    return cube
