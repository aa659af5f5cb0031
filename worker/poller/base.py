"""
BasePoller

모든 Poller의 베이스 클래스.
공통 폴링 로직과 마지막 폴링 시간 관리 제공.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from core.constants import Defaults

logger = logging.getLogger(__name__)


class BasePoller(ABC):
    """Poller 베이스 클래스

    주기적으로 작업을 실행하는 공통 로직 제공.
    실행 중에는 같은 Poller의 중복 실행을 건너뜀.

    Args:
        poll_interval_seconds: 폴링 간격 (초)
        tick_seconds: 루프 확인 간격 (초)
    """

    def __init__(
        self,
        poll_interval_seconds: int,
        tick_seconds: float = Defaults.SYNC_TICK_SEC,
    ):
        self.poll_interval_seconds = poll_interval_seconds
        self.tick_seconds = tick_seconds

        self._last_poll_time: datetime | None = None
        self._is_running: bool = False

    @property
    @abstractmethod
    def poller_name(self) -> str:
        """Poller 이름 (로깅용)"""
        ...

    @property
    def last_poll_time(self) -> datetime | None:
        return self._last_poll_time

    @property
    def is_running(self) -> bool:
        return self._is_running

    def mark_polled(self, when: datetime | None = None) -> None:
        """마지막 폴링 시간 기록 (첫 실행을 다음 주기로 미룰 때 사용)"""
        self._last_poll_time = when or datetime.now(timezone.utc)

    async def should_poll(self) -> bool:
        """폴링 필요 여부 확인

        마지막 폴링 이후 poll_interval_seconds가 경과했는지 확인.

        Returns:
            True if 폴링 필요, False otherwise
        """
        if self._is_running:
            return False

        if self._last_poll_time is None:
            return True

        now = datetime.now(timezone.utc)
        elapsed = (now - self._last_poll_time).total_seconds()

        return elapsed >= self.poll_interval_seconds

    async def poll(self) -> dict[str, Any]:
        """폴링 실행

        실패해도 예외를 전파하지 않고 결과에 error를 담아 반환.

        Returns:
            폴링 결과:
            {
                "records_processed": int,
                "poll_time": datetime,
                "duration_ms": float,
            }
        """
        if self._is_running:
            logger.warning(f"{self.poller_name} Poller가 이미 실행 중입니다")
            return {"records_processed": 0, "skipped": True}

        self._is_running = True
        start_time = datetime.now(timezone.utc)

        try:
            logger.info(f"{self.poller_name} Poller 시작")

            processed = await self._do_poll()

            end_time = datetime.now(timezone.utc)
            duration_ms = (end_time - start_time).total_seconds() * 1000

            logger.info(
                f"{self.poller_name} Poller 완료",
                extra={
                    "records_processed": processed,
                    "duration_ms": duration_ms,
                },
            )

            return {
                "records_processed": processed,
                "poll_time": start_time,
                "duration_ms": duration_ms,
            }

        except Exception as e:
            logger.error(
                f"{self.poller_name} Poller 실패: {e}",
                extra={"error": str(e)},
                exc_info=True,
            )
            return {"records_processed": 0, "error": str(e)}

        finally:
            # 실패해도 다음 주기까지 대기 (연속 재시도 방지)
            self._last_poll_time = start_time
            self._is_running = False

    @abstractmethod
    async def _do_poll(self) -> int:
        """실제 폴링 로직 구현

        Returns:
            처리된 레코드 수
        """
        ...

    async def run_loop(
        self,
        shutdown_event: asyncio.Event,
        run_immediately: bool = True,
    ) -> None:
        """종료 이벤트까지 주기적으로 폴링

        Args:
            shutdown_event: 설정되면 루프 종료
            run_immediately: False면 첫 폴링을 한 주기 뒤로 미룸
        """
        if not run_immediately:
            self.mark_polled()

        logger.info(
            f"{self.poller_name} Poller 루프 시작",
            extra={"interval_seconds": self.poll_interval_seconds},
        )

        while not shutdown_event.is_set():
            if await self.should_poll():
                await self.poll()

            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=self.tick_seconds)
            except asyncio.TimeoutError:
                pass

        logger.info(f"{self.poller_name} Poller 루프 종료")
