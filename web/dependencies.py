"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IRemoteDataSource
from adapters.remote.rest_client import RemoteDataClient
from core.accounts.names import AccountNameBook
from core.config.loader import Settings, get_settings


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (요청마다 연결 1개)"""
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path) as db:
        yield db


def get_remote_source(request: Request) -> IRemoteDataSource:
    """원격 데이터 소스 반환

    lifespan에서 생성한 클라이언트를 재사용 (토큰 캐시 공유).
    없으면 설정으로 생성하여 app.state에 등록.
    """
    client = getattr(request.app.state, "remote_client", None)
    if client is None:
        client = RemoteDataClient(get_settings().remote)
        request.app.state.remote_client = client
    return client


def get_name_book(settings: Settings = Depends(get_app_settings)) -> AccountNameBook:
    """계정명 이름표 반환 (secrets.yaml account_names 반영)"""
    return AccountNameBook.with_overrides(settings.account_names)
