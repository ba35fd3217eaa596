"""Unit tests for CancellationToken."""

import asyncio
import inspect
from typing import List

import pytest

from meetup_backend.domain.meetup.core.exceptions.domain_errors import (
    RequestCancelledError,
    StorageError,
)
from meetup_backend.domain.shared.cancellation import CancellationToken


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestCancelState:
    def test_new_token_is_not_cancelled(self) -> None:
        token = CancellationToken()
        assert token.cancelled is False
        assert token.remaining() is None
        token.raise_if_cancelled()

    def test_cancel_sets_reason_once(self) -> None:
        token = CancellationToken()
        token.cancel("client disconnected")
        token.cancel("second reason")

        assert token.cancelled is True
        assert token.reason == "client disconnected"
        with pytest.raises(RequestCancelledError, match="client disconnected"):
            token.raise_if_cancelled()

    def test_deadline_expiry_cancels(self) -> None:
        clock = FakeClock()
        token = CancellationToken(timeout_s=5.0, clock=clock)
        assert token.remaining() == 5.0

        clock.now = 4.0
        assert token.cancelled is False
        assert token.remaining() == 1.0

        clock.now = 5.0
        assert token.cancelled is True
        assert token.reason == "deadline exceeded"
        assert token.remaining() == 0.0

    def test_zero_timeout_means_no_deadline(self) -> None:
        token = CancellationToken(timeout_s=0)
        assert token.deadline is None

    def test_cancelled_error_has_code(self) -> None:
        token = CancellationToken()
        token.cancel()
        with pytest.raises(RequestCancelledError) as exc_info:
            token.raise_if_cancelled()
        assert exc_info.value.code == "CANCELLED"


class TestCheck:
    @pytest.mark.asyncio
    async def test_disconnect_probe_cancels(self) -> None:
        async def disconnected() -> bool:
            return True

        token = CancellationToken(disconnect_probe=disconnected)
        with pytest.raises(RequestCancelledError, match="client disconnected"):
            await token.check()
        assert token.cancelled is True

    @pytest.mark.asyncio
    async def test_connected_probe_passes(self) -> None:
        async def connected() -> bool:
            return False

        token = CancellationToken(disconnect_probe=connected)
        await token.check()
        assert token.cancelled is False


class TestGuard:
    @pytest.mark.asyncio
    async def test_returns_result(self) -> None:
        async def value() -> int:
            return 42

        assert await CancellationToken().guard(value()) == 42

    @pytest.mark.asyncio
    async def test_propagates_operation_error(self) -> None:
        async def failing() -> None:
            raise StorageError("boom")

        with pytest.raises(StorageError, match="boom"):
            await CancellationToken().guard(failing())

    @pytest.mark.asyncio
    async def test_already_cancelled_never_starts_operation(self) -> None:
        calls: List[str] = []

        async def operation() -> None:
            calls.append("ran")

        token = CancellationToken()
        token.cancel()
        coro = operation()

        with pytest.raises(RequestCancelledError):
            await token.guard(coro)

        assert calls == []
        assert inspect.getcoroutinestate(coro) == inspect.CORO_CLOSED

    @pytest.mark.asyncio
    async def test_cancel_during_operation_stops_it(self) -> None:
        token = CancellationToken()
        started = asyncio.Event()
        interrupted: List[bool] = []

        async def slow() -> None:
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                interrupted.append(True)
                raise

        async def cancel_when_started() -> None:
            await started.wait()
            token.cancel("client disconnected")

        canceller = asyncio.ensure_future(cancel_when_started())
        with pytest.raises(RequestCancelledError, match="client disconnected"):
            await token.guard(slow())
        await canceller

        assert interrupted == [True]

    @pytest.mark.asyncio
    async def test_deadline_during_operation(self) -> None:
        token = CancellationToken(timeout_s=0.05)

        with pytest.raises(RequestCancelledError, match="deadline exceeded"):
            await token.guard(asyncio.sleep(10))

        assert token.cancelled is True

    @pytest.mark.asyncio
    async def test_disconnect_during_operation_stops_it(self) -> None:
        gone = asyncio.Event()
        interrupted: List[bool] = []

        async def is_disconnected() -> bool:
            return gone.is_set()

        async def slow() -> str:
            gone.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                interrupted.append(True)
                raise
            return "stored"

        token = CancellationToken(disconnect_probe=is_disconnected, poll_interval_s=0.01)
        loop = asyncio.get_running_loop()
        started_at = loop.time()

        with pytest.raises(RequestCancelledError, match="client disconnected"):
            await token.guard(slow())

        assert loop.time() - started_at < 1.0
        assert interrupted == [True]
        assert token.reason == "client disconnected"

    @pytest.mark.asyncio
    async def test_connected_client_lets_operation_finish(self) -> None:
        async def connected() -> bool:
            return False

        async def slow() -> str:
            await asyncio.sleep(0.05)
            return "stored"

        token = CancellationToken(disconnect_probe=connected, poll_interval_s=0.01)

        assert await token.guard(slow()) == "stored"
        assert token.cancelled is False

    @pytest.mark.asyncio
    async def test_failing_disconnect_probe_propagates(self) -> None:
        calls: List[int] = []

        async def flaky() -> bool:
            calls.append(1)
            if len(calls) > 1:
                raise RuntimeError("receive channel closed")
            return False

        token = CancellationToken(disconnect_probe=flaky, poll_interval_s=0.01)

        with pytest.raises(RuntimeError, match="receive channel closed"):
            await token.guard(asyncio.sleep(10))
