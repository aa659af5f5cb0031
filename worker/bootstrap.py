"""
Worker 부트스트랩

Web 서버 없이 계정 동기화 루프만 실행.
Web 프로세스도 같은 Poller를 백그라운드 태스크로 실행하므로
둘 중 하나만 띄우는 것을 권장.
"""

import asyncio
import logging
import signal
import sys

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from adapters.interfaces import IRemoteDataSource
from adapters.remote.rest_client import RemoteDataClient
from core.config.loader import Settings, get_settings
from core.logging import setup_logging
from worker.poller.account_poller import AccountSyncPoller

logger = logging.getLogger(__name__)


def create_sync_poller(settings: Settings, source: IRemoteDataSource) -> AccountSyncPoller:
    """설정 기반 AccountSyncPoller 생성"""
    return AccountSyncPoller(
        source=source,
        db_path=settings.db_path,
        poll_interval_seconds=settings.sync.interval_seconds,
    )


def _install_signal_handlers(shutdown_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except (NotImplementedError, RuntimeError):
            # Windows: Ctrl+C는 KeyboardInterrupt로 처리
            pass


async def main() -> None:
    """Worker 메인 함수"""
    setup_logging("worker")

    logger.info("=" * 60)
    logger.info("LedgerSync Worker 시작")
    logger.info("=" * 60)

    # 1. 설정 로드
    try:
        settings = get_settings()
    except Exception as e:
        logger.error(f"설정 로드 실패: {e}")
        sys.exit(1)

    logger.info(f"DB: {settings.db_path}")
    logger.info(f"동기화 주기: {settings.sync.interval_seconds}초")

    if not settings.remote.is_configured:
        logger.warning("원격 API URL이 설정되지 않았습니다 (API_TOKEN_URL, API_DATA_URL)")

    # 2. 스키마 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    # 3. 동기화 루프
    shutdown_event = asyncio.Event()
    _install_signal_handlers(shutdown_event)

    async with RemoteDataClient(settings.remote) as client:
        poller = create_sync_poller(settings, client)
        try:
            await poller.run_loop(shutdown_event, run_immediately=settings.sync.on_startup)
        except asyncio.CancelledError:
            logger.info("동기화 루프 취소됨")

    logger.info("LedgerSync Worker 정상 종료")
