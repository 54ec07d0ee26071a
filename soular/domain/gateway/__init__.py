"""Gateway interfaces for the remote API."""

from soular.domain.gateway.account import AccountGateway
from soular.domain.gateway.item import ItemGateway

__all__ = [
    "AccountGateway",
    "ItemGateway",
]
