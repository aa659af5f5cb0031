"""
앱 생명주기 테스트

TestClient 컨텍스트로 lifespan 실행 (스키마 초기화, 시작 동기화, Poller 정지, 클라이언트 종료).
"""

import asyncio
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.mock.remote_client import MockRemoteDataClient
from core.accounts.types import AccountRecord
from core.config.loader import Settings, get_settings
from core.constants import EnvVars
from core.storage.account_store import AccountStore
from web.app import create_app

RECORDS = [
    AccountRecord("100.01.0001", "A", Decimal("100"), Decimal("0")),
    AccountRecord("100.02.0002", "B", Decimal("0"), Decimal("50")),
]


async def _read_records(path: Path) -> list[AccountRecord]:
    async with SQLiteAdapter(path) as db:
        return await AccountStore(db).get_all()


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    return temp_dir / "lifespan.db"


@pytest.fixture
def configure(
    monkeypatch: pytest.MonkeyPatch,
    temp_secrets_file: Path,
    db_path: Path,
    reset_settings: None,
):
    """DB 경로와 시작 동기화 여부를 환경 변수로 지정"""

    def _configure(on_startup: bool) -> None:
        monkeypatch.setenv(EnvVars.DB_PATH, str(db_path))
        monkeypatch.setenv(EnvVars.SYNC_ON_STARTUP, "true" if on_startup else "false")
        Settings.reset()
        get_settings(temp_secrets_file)

    return _configure


def _run_app(remote: MockRemoteDataClient) -> None:
    with patch("adapters.remote.rest_client.RemoteDataClient", return_value=remote):
        with TestClient(create_app()) as client:
            response = client.get("/health")
            assert response.status_code == 200

            body = client.get("/api/data").json()
            assert body["success"] is True


class TestLifespan:
    """lifespan 테스트"""

    def test_startup_sync(self, configure, db_path: Path) -> None:
        configure(on_startup=True)
        remote = MockRemoteDataClient(RECORDS)

        _run_app(remote)

        assert remote.state.fetch_count == 1
        assert remote.state.closed is True
        assert asyncio.run(_read_records(db_path)) == RECORDS

    def test_startup_sync_failure_is_not_fatal(self, configure, db_path: Path) -> None:
        """첫 동기화가 실패해도 서버는 요청 처리"""
        configure(on_startup=True)
        remote = MockRemoteDataClient(RECORDS)
        remote.set_fail_next_fetch()

        _run_app(remote)

        assert remote.state.fetch_count == 1
        assert remote.state.closed is True
        assert asyncio.run(_read_records(db_path)) == []

    def test_startup_sync_disabled(self, configure, db_path: Path) -> None:
        configure(on_startup=False)
        remote = MockRemoteDataClient(RECORDS)

        _run_app(remote)

        assert remote.state.fetch_count == 0
        assert remote.state.closed is True
        assert db_path.exists()
