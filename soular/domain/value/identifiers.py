"""Strongly typed identifiers for Soular entities.

NewType keeps item, parent and user ids from being mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

ItemId = NewType("ItemId", UUID)
ParentId = NewType("ParentId", UUID)  # Film or discussion the items belong to
UserId = NewType("UserId", UUID)
