#!/usr/bin/env python3
"""Print the items of one film or discussion, newest first.

Usage:
    python scripts/list_items.py <parent-uuid>
"""

import asyncio
import sys
from uuid import UUID

import logfire

from soular.application.controller import ItemControllerFactory
from soular.domain.value import ParentId
from soular.util.di.container import bootstrap


async def list_items(parent_id: ParentId) -> int:
    """Load the collection read-only and print it."""
    container = bootstrap()
    try:
        async with container() as request_container:
            factory = await request_container.get(ItemControllerFactory)
            controller = factory.create(parent_id)
            state = await controller.load()
    finally:
        await container.close()

    if state.error:
        print(f"error: {state.error}", file=sys.stderr)
        return 1

    print(f"{state.total_count} items, average rating {state.average_rating}")
    for item in state.items:
        rating = f" [{item.rating}/5]" if item.rating else ""
        print(
            f"- {item.author_display_name}{rating} ({item.like_count} likes): "
            f"{item.body_text}"
        )
    return 0


def main() -> int:
    """Parse arguments and run."""
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    try:
        parent_id = ParentId(UUID(sys.argv[1]))
    except ValueError:
        print(f"not a UUID: {sys.argv[1]}", file=sys.stderr)
        return 2

    try:
        return asyncio.run(list_items(parent_id))
    except Exception as e:
        logfire.error(
            "Listing items failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
