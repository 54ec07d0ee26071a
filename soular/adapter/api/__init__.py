"""REST API adapter."""

from .client import HttpAccountGateway, HttpItemGateway
from .inmemory import InMemoryAccountGateway, InMemoryItemGateway

__all__ = [
    "HttpAccountGateway",
    "HttpItemGateway",
    "InMemoryAccountGateway",
    "InMemoryItemGateway",
]
