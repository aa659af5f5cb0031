"""
AccountSyncPoller

원격 API → DB 계정 동기화를 주기적으로 실행 (기본 5분).
실행마다 전용 DB 연결을 열고 닫음.
"""

from pathlib import Path

from adapters.interfaces import IRemoteDataSource
from core.constants import Defaults
from worker.poller.base import BasePoller
from worker.sync_service import sync_to_database


class AccountSyncPoller(BasePoller):
    """계정 동기화 Poller

    Args:
        source: 원격 데이터 소스
        db_path: DB 파일 경로
        poll_interval_seconds: 동기화 간격 (초)
    """

    def __init__(
        self,
        source: IRemoteDataSource,
        db_path: Path | str,
        poll_interval_seconds: int = Defaults.SYNC_INTERVAL_SEC,
        tick_seconds: float = Defaults.SYNC_TICK_SEC,
    ):
        super().__init__(poll_interval_seconds, tick_seconds)
        self.source = source
        self.db_path = db_path

    @property
    def poller_name(self) -> str:
        return "AccountSync"

    async def _do_poll(self) -> int:
        return await sync_to_database(self.source, self.db_path)
