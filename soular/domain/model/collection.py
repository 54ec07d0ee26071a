"""Collection state and list pages."""

from pydantic import Field, field_validator

from soular.domain.model.common import DomainModel
from soular.domain.model.item import Item


class ItemPage(DomainModel):
    """One page of a list call, with server-computed aggregates."""

    items: list[Item]
    total: int = Field(ge=0)
    average_rating: float = Field(default=0.0, ge=0)
    limit: int | None = None
    offset: int | None = None

    @field_validator("average_rating", mode="before")
    @classmethod
    def default_missing_average(cls, v: object) -> object:
        """Parents without ratings report a null average."""
        return 0.0 if v is None else v


class CollectionState(DomainModel):
    """Renderable snapshot of one parent's items.

    Items are ordered newest first. average_rating is rounded to one decimal.
    """

    items: tuple[Item, ...] = ()
    total_count: int = Field(default=0, ge=0)
    average_rating: float = 0.0
    is_loading: bool = False
    error: str | None = None
    has_more: bool = False
