"""Cooperative cancellation for asynchronous validation."""

from __future__ import annotations

import asyncio


class CancellationToken:
    """Flag checked by async validators at every rule boundary.

    Native asyncio cancellation (``task.cancel()``) works as well; the token
    exists for callers that want to stop a run without owning its task.
    """

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise asyncio.CancelledError("validation cancelled")
