"""Interaction controllers."""

from .factory import ItemControllerFactory
from .item_collection import ItemCollectionController

__all__ = [
    "ItemCollectionController",
    "ItemControllerFactory",
]
