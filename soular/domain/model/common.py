"""Base model for domain entities and snapshots."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Instances are frozen; state changes produce a new instance via
    model_copy(update=...), so a snapshot handed to a renderer never changes
    under it.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # NewType ids and value objects
    )
