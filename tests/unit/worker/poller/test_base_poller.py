"""
BasePoller 단위 테스트
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from worker.poller.base import BasePoller


class ConcretePoller(BasePoller):
    """테스트용 구체 Poller"""

    def __init__(self, *args, fail: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.poll_count = 0
        self.fail = fail

    @property
    def poller_name(self) -> str:
        return "test"

    async def _do_poll(self) -> int:
        self.poll_count += 1
        if self.fail:
            raise RuntimeError("upstream down")
        return 5


class TestBasePollerShouldPoll:
    """should_poll() 테스트"""

    @pytest.mark.asyncio
    async def test_first_run(self) -> None:
        """첫 실행 시 True 반환"""
        poller = ConcretePoller(poll_interval_seconds=300)

        assert await poller.should_poll() is True

    @pytest.mark.asyncio
    async def test_within_interval(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300)
        poller.mark_polled()

        assert await poller.should_poll() is False

    @pytest.mark.asyncio
    async def test_after_interval(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300)
        poller.mark_polled(datetime.now(timezone.utc) - timedelta(seconds=301))

        assert await poller.should_poll() is True

    @pytest.mark.asyncio
    async def test_not_while_running(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300)
        poller._is_running = True

        assert await poller.should_poll() is False


class TestBasePollerPoll:
    """poll() 테스트"""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300)

        result = await poller.poll()

        assert result["records_processed"] == 5
        assert "duration_ms" in result
        assert poller.last_poll_time is not None
        assert poller.is_running is False

    @pytest.mark.asyncio
    async def test_failure_is_not_raised(self) -> None:
        """실패해도 예외 전파 없이 error 반환, 다음 주기까지 대기"""
        poller = ConcretePoller(poll_interval_seconds=300, fail=True)

        result = await poller.poll()

        assert result["records_processed"] == 0
        assert result["error"] == "upstream down"
        assert poller.last_poll_time is not None
        assert await poller.should_poll() is False

    @pytest.mark.asyncio
    async def test_skip_when_running(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300)
        poller._is_running = True

        result = await poller.poll()

        assert result == {"records_processed": 0, "skipped": True}
        assert poller.poll_count == 0


class TestBasePollerRunLoop:
    """run_loop() 테스트"""

    @pytest.mark.asyncio
    async def test_runs_immediately_and_stops(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300, tick_seconds=0.01)
        shutdown_event = asyncio.Event()

        task = asyncio.create_task(poller.run_loop(shutdown_event))
        await asyncio.sleep(0.05)
        shutdown_event.set()
        await asyncio.wait_for(task, timeout=1)

        assert poller.poll_count == 1

    @pytest.mark.asyncio
    async def test_delayed_first_run(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=300, tick_seconds=0.01)
        shutdown_event = asyncio.Event()

        task = asyncio.create_task(poller.run_loop(shutdown_event, run_immediately=False))
        await asyncio.sleep(0.05)
        shutdown_event.set()
        await asyncio.wait_for(task, timeout=1)

        assert poller.poll_count == 0

    @pytest.mark.asyncio
    async def test_repeats_each_interval(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=0, tick_seconds=0.01)
        shutdown_event = asyncio.Event()

        task = asyncio.create_task(poller.run_loop(shutdown_event))
        await asyncio.sleep(0.1)
        shutdown_event.set()
        await asyncio.wait_for(task, timeout=1)

        assert poller.poll_count >= 2

    @pytest.mark.asyncio
    async def test_failure_keeps_loop_alive(self) -> None:
        poller = ConcretePoller(poll_interval_seconds=0, tick_seconds=0.01, fail=True)
        shutdown_event = asyncio.Event()

        task = asyncio.create_task(poller.run_loop(shutdown_event))
        await asyncio.sleep(0.05)
        shutdown_event.set()
        await asyncio.wait_for(task, timeout=1)

        assert poller.poll_count >= 2
        assert task.exception() is None
