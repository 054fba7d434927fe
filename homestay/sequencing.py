import logging
from collections.abc import Awaitable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestRequestGuard:
    """Hands out increasing request tokens so late responses can be dropped.

    Only the response belonging to the most recently issued token is applied;
    anything that resolves after a newer request was issued is discarded.
    """

    def __init__(self) -> None:
        self._latest = 0

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def invalidate(self) -> None:
        """Drop whatever is in flight, e.g. when the user leaves the screen."""
        self._latest += 1

    async def latest(self, awaitable: Awaitable[T]) -> T | None:
        token = self.issue()
        result = await awaitable
        if not self.is_current(token):
            logger.debug("Discarding stale response for request %d (latest=%d)", token, self._latest)
            return None
        return result
