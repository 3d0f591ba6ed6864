"""
Helpers for joining independent store lookups.

Each lookup is issued concurrently; the join waits for all of them so that
a failure in one does not prevent the others from being attempted, but a
failure anywhere fails the whole join.
"""

from asyncio import gather
from typing import Any, Awaitable

from catalog.logging import logger


async def join(*aws: Awaitable[Any]) -> list[Any]:
    """
    Await all lookups concurrently and return their results in order.

    Args:
        *aws: Awaitables to run concurrently.

    Returns:
        Results in the same order as ``aws``.

    Raises:
        Exception: The first failure, after every lookup has completed.
    """
    results = await gather(*aws, return_exceptions=True)

    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        if len(failures) > 1:
            logger.warning(
                f"{len(failures)} concurrent lookups failed, raising the first"
            )
        raise failures[0]

    return list(results)
