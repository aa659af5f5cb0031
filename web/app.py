"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
시작 시 스키마 초기화 후 계정 동기화 Poller를 백그라운드 태스크로 실행.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config.loader import get_settings
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.routes import data, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
    from adapters.remote.rest_client import RemoteDataClient
    from worker.bootstrap import create_sync_poller

    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    if not settings.remote.is_configured:
        logger.warning("Web: 원격 API URL 미설정, 동기화는 실패 로그만 남김")

    # 원격 클라이언트 (수동 동기화 라우트와 공유)
    remote_client = RemoteDataClient(settings.remote)
    app.state.remote_client = remote_client

    # 주기 동기화 (첫 실행 실패는 로그만 남기고 서버는 계속)
    shutdown_event = asyncio.Event()
    poller = create_sync_poller(settings, remote_client)
    poller_task = asyncio.create_task(
        poller.run_loop(shutdown_event, run_immediately=settings.sync.on_startup)
    )
    logger.info(f"Web: 동기화 Poller 시작 ({settings.sync.interval_seconds}초 주기)")

    yield

    # 종료 시 - Poller 정지 후 리소스 정리
    shutdown_event.set()
    try:
        await poller_task
    except asyncio.CancelledError:
        pass

    await remote_client.close()
    app.state.remote_client = None
    logger.info("Web: 종료 완료")


def create_app() -> FastAPI:
    """FastAPI 앱 생성"""
    web_config = get_settings().web

    application = FastAPI(
        title="LedgerSync API",
        description="원격 회계 API 계정 데이터 동기화 및 조회",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(web_config.cors_origins),
        allow_origin_regex=web_config.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # API 라우터 등록
    # =========================================================================

    application.include_router(health.router)
    application.include_router(data.router)

    return application


app = create_app()
