"""Running average rating arithmetic.

The client only knows the server's average and total count, not the sum of
ratings, so local adjustments approximate the server value. A reload replaces
them with the authoritative aggregate.
"""

from decimal import ROUND_HALF_UP, Decimal

from .base import Service


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RatingService(Service):
    """Keeps the displayed average rating in step with local changes."""

    def average_after_add(
        self, average: float, new_total: int, rating: int | None
    ) -> float:
        """Fold a new rating into the average.

        Uses the count after the addition for both terms:
        (average * (new_total - 1) + rating) / new_total

        Args:
            average: Average before the new item
            new_total: Item count including the new item
            rating: Rating of the new item, None leaves the average unchanged

        Returns:
            New average rounded to one decimal
        """
        if rating is None:
            return average
        if new_total <= 0:
            return round_rating(rating)
        return round_rating((average * (new_total - 1) + rating) / new_total)

    def average_after_remove(
        self, average: float, new_total: int, rating: int | None
    ) -> float:
        """Fold a removed rating out of the average.

        Args:
            average: Average before removal
            new_total: Item count after removal
            rating: Rating of the removed item, None leaves the average unchanged

        Returns:
            New average rounded to one decimal, 0.0 when nothing is left
        """
        if rating is None:
            return average
        if new_total <= 0:
            return 0.0
        remaining = (average * (new_total + 1) - rating) / new_total
        return round_rating(max(remaining, 0.0))
