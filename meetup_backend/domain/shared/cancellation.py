"""Per-request cancellation token.

Every capability method receives a CancellationToken as its first
argument. The token is cancelled explicitly (client disconnect, shutdown)
or implicitly when its deadline passes.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, TypeVar

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    RequestCancelledError,
)

T = TypeVar("T")

DisconnectProbe = Callable[[], Awaitable[bool]]

# Seconds between disconnect probes while a guarded call is in flight.
DEFAULT_POLL_INTERVAL_S = 0.1

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Cancellation and deadline carrier for one request.

    Example:
        >>> token = CancellationToken(timeout_s=5.0)
        >>> meetups = await token.guard(repository.list_all())
    """

    def __init__(
        self,
        timeout_s: Optional[float] = None,
        disconnect_probe: Optional[DisconnectProbe] = None,
        clock: Callable[[], float] = time.monotonic,
        poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
    ) -> None:
        """
        Args:
            timeout_s: Seconds until the deadline (None or 0 = no deadline)
            disconnect_probe: Async callable returning True once the client
                has gone away (e.g. ``request.is_disconnected``)
            clock: Monotonic clock, injectable for tests
            poll_interval_s: Delay between disconnect probes during guard()
        """
        self._clock = clock
        self._deadline: Optional[float] = (
            clock() + timeout_s if timeout_s else None
        )
        self._disconnect_probe = disconnect_probe
        self._poll_interval_s = poll_interval_s
        self._event = asyncio.Event()
        self._reason: Optional[str] = None

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        """True once cancel() was called or the deadline has passed."""
        if self._event.is_set():
            return True
        if self._deadline is not None and self._clock() >= self._deadline:
            self.cancel("deadline exceeded")
            return True
        return False

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def cancel(self, reason: str = "request cancelled") -> None:
        """Cancel the token. Idempotent: the first reason wins."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """
        Raises:
            RequestCancelledError: If the token is cancelled
        """
        if self.cancelled:
            raise RequestCancelledError(self._reason or "request cancelled")

    async def check(self) -> None:
        """Like raise_if_cancelled(), also consulting the disconnect probe.

        Raises:
            RequestCancelledError: If cancelled or the client disconnected
        """
        self.raise_if_cancelled()
        if self._disconnect_probe is not None and await self._disconnect_probe():
            self.cancel("client disconnected")
            self.raise_if_cancelled()

    async def _watch_disconnect(self) -> None:
        """Poll the disconnect probe until the client goes away."""
        assert self._disconnect_probe is not None
        while not self._event.is_set():
            await asyncio.sleep(self._poll_interval_s)
            if await self._disconnect_probe():
                self.cancel("client disconnected")
                return

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """
        Await ``awaitable`` unless the token is cancelled first.

        The awaitable runs as a task raced against the cancel event, the
        deadline and, when a disconnect probe is set, a watcher polling it.
        If cancellation wins, the task is cancelled and awaited before
        RequestCancelledError is raised. A task that already finished
        always wins: its result (or exception) is returned.

        Args:
            awaitable: Collaborator call to protect (e.g. a repository call)

        Returns:
            Result of the awaitable

        Raises:
            RequestCancelledError: If cancelled before the awaitable finished
        """
        try:
            await self.check()
        except RequestCancelledError:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise

        task = asyncio.ensure_future(awaitable)
        helpers = [asyncio.ensure_future(self._event.wait())]
        if self._disconnect_probe is not None:
            helpers.append(asyncio.ensure_future(self._watch_disconnect()))
        try:
            done, _ = await asyncio.wait(
                {task, *helpers},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for helper in helpers:
                helper.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()

        # Let the cancelled task and helpers unwind before reporting.
        await asyncio.gather(task, *helpers, return_exceptions=True)

        for helper in helpers:
            if helper in done and helper.exception() is not None:
                raise helper.exception()  # type: ignore[misc]

        if not self._event.is_set():
            self.cancel("deadline exceeded")

        logger.info("request.cancelled", extra={"reason": self._reason})
        raise RequestCancelledError(self._reason or "request cancelled")
