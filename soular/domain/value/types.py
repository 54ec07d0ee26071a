"""Domain value objects for Soular.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum
from typing import Annotated

from pydantic import Field, field_validator

from soular.domain.value.common import RootValueObject

MIN_RATING = 1
MAX_RATING = 5
MAX_BODY_LENGTH = 5000

Rating = Annotated[int, Field(ge=MIN_RATING, le=MAX_RATING)]


class LikeState(str, Enum):
    """Like relation between the viewer and one item."""

    NOT_LIKED = "not_liked"
    LIKED = "liked"


class Theme(str, Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class Language(str, Enum):
    """Interface language preference."""

    INDONESIAN = "id"
    ENGLISH = "en"


class EmailDigest(str, Enum):
    """How often the email digest is sent."""

    NEVER = "never"
    DAILY = "daily"
    WEEKLY = "weekly"


class BodyText(RootValueObject[str]):
    """Text body of a comment or post.

    Surrounding whitespace is stripped; the result must not be empty.
    """

    @field_validator("root")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Strip whitespace and enforce length limits."""
        v = v.strip()
        if not v:
            raise ValueError("Comment is required")
        if len(v) > MAX_BODY_LENGTH:
            raise ValueError(f"Comment must be at most {MAX_BODY_LENGTH} characters")
        return v
