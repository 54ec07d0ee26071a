"""Domain services."""

from .rating_service import RatingService, round_rating

__all__ = [
    "RatingService",
    "round_rating",
]
