"""Domain value objects for Soular."""

from soular.domain.value.identifiers import ItemId, ParentId, UserId
from soular.domain.value.types import (
    MAX_RATING,
    MIN_RATING,
    BodyText,
    EmailDigest,
    Language,
    LikeState,
    Rating,
    Theme,
)

__all__ = [
    # Identifiers
    "ItemId",
    "ParentId",
    "UserId",
    # Types
    "BodyText",
    "EmailDigest",
    "Language",
    "LikeState",
    "Rating",
    "Theme",
    "MIN_RATING",
    "MAX_RATING",
]
