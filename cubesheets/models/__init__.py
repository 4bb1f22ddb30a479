from cubesheets.models.cube import Card, Cube, CubeBoards
from cubesheets.models.failure import (
    CubeFetchError,
    FailureDetail,
    FailureKind,
    InvalidCubeLinkError,
    KnownError,
    MissingCardDataError,
)

__all__ = [
    "Card",
    "Cube",
    "CubeBoards",
    "CubeFetchError",
    "FailureDetail",
    "FailureKind",
    "InvalidCubeLinkError",
    "KnownError",
    "MissingCardDataError",
]
