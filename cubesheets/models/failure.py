"""
Failure classification for cube queries.

Every fault a query can raise is a KnownError subclass carrying a
FailureKind, so the host calling the sheet functions can show the user
what went wrong instead of a bare traceback.

Failure kinds:
- INVALID_INPUT: the cube link or ID could not be understood
- EXTERNAL_API_ERROR: Cube Cobra could not be reached or returned garbage
- MISSING_CARD_DATA: a card lacks an attribute a formatter or the sorter needs

There is no retry and no partial result. A raised error fails the whole call.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_INPUT = "invalid_input"
    EXTERNAL_API_ERROR = "external_api_error"
    MISSING_CARD_DATA = "missing_card_data"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail the host can display."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidCubeLinkError(KnownError):
    """Raised when no cube ID can be derived from the user's input."""

    def __init__(self, id_or_link: str | None):
        self.id_or_link = id_or_link
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message="Could not find a Cube Cobra cube ID in the given value.",
            detail=f"Input: {id_or_link!r}",
            suggestion="Pass a cube ID or a link to any page of the cube on Cube Cobra.",
        )


class CubeFetchError(KnownError):
    """Raised when fetching or parsing a cube from Cube Cobra fails."""

    def __init__(self, cube_id: str, reason: str):
        self.cube_id = cube_id
        self.reason = reason
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message=f"Failed to fetch cube {cube_id}: {reason}",
            detail=reason,
            suggestion="Check that the cube exists and is public on Cube Cobra.",
        )


class MissingCardDataError(KnownError):
    """
    Raised when a card lacks an attribute that must be present.

    Cube Cobra always sends ``details`` and its nested arrays, so hitting
    this means the API contract changed. Never substitute a default.
    """

    def __init__(self, attribute: str, card_id: str | None = None):
        self.attribute = attribute
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.MISSING_CARD_DATA,
            message=f"Card is missing required attribute '{attribute}'.",
            detail=f"cardID: {card_id}" if card_id else None,
        )
