"""
Data 라우트 테스트

TestClient + dependency_overrides (lifespan 미실행).
"""

import asyncio
from decimal import Decimal
from pathlib import Path
from typing import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from adapters.mock.remote_client import MockRemoteDataClient
from core.accounts.names import AccountNameBook
from core.accounts.types import AccountRecord
from core.storage.account_store import AccountStore, StoreError
from web.app import app
from web.dependencies import get_db, get_name_book, get_remote_source

RECORDS = [
    AccountRecord("100.01.0001", "A", Decimal("100"), Decimal("0")),
    AccountRecord("100.02.0002", "B", Decimal("0"), Decimal("50")),
]


async def _prepare_db(path: Path, records: list[AccountRecord]) -> None:
    async with SQLiteAdapter(path) as db:
        await init_schema(db)
        store = AccountStore(db)
        for record in records:
            await store.upsert(record)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """스키마만 있는 빈 DB"""
    path = tmp_path / "empty.db"
    asyncio.run(_prepare_db(path, []))
    return path


@pytest.fixture
def seeded_db_path(tmp_path: Path) -> Path:
    """샘플 레코드가 저장된 DB"""
    path = tmp_path / "ledger.db"
    asyncio.run(_prepare_db(path, RECORDS))
    return path


@pytest.fixture
def remote() -> MockRemoteDataClient:
    return MockRemoteDataClient(RECORDS)


def _make_client(db_path: Path, remote: MockRemoteDataClient) -> TestClient:
    async def override_get_db() -> AsyncGenerator[SQLiteAdapter, None]:
        async with SQLiteAdapter(db_path) as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_remote_source] = lambda: remote
    app.dependency_overrides[get_name_book] = lambda: AccountNameBook()
    return TestClient(app)


@pytest.fixture
def client(seeded_db_path: Path, remote: MockRemoteDataClient) -> TestClient:
    yield _make_client(seeded_db_path, remote)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(db_path: Path, remote: MockRemoteDataClient) -> TestClient:
    yield _make_client(db_path, remote)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert "timestamp" in body


class TestListData:
    """GET /api/data"""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/data")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 2
        assert body["data"][0] == {
            "accountCode": "100.01.0001",
            "accountName": "A",
            "debit": 100.0,
            "credit": 0.0,
        }

    def test_empty(self, empty_client: TestClient) -> None:
        body = empty_client.get("/api/data").json()

        assert body == {"success": True, "data": [], "count": 0}

    def test_store_error_returns_500(self, client: TestClient) -> None:
        with patch(
            "web.services.account_service.AccountStore.get_all",
            new=AsyncMock(side_effect=StoreError("database is locked")),
        ):
            response = client.get("/api/data")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Error fetching data",
            "error": "database is locked",
        }


class TestGrouped:
    """GET /api/data/grouped"""

    def test_grouped(self, client: TestClient) -> None:
        response = client.get("/api/data/grouped")

        assert response.status_code == 200
        data = response.json()["data"]
        level1 = data["level1"]["100"]
        assert level1["debit"] == 100.0
        assert level1["credit"] == 50.0
        assert level1["level2"]["100.0"]["level3"]["100.01.0001"] == {
            "code": "100.01.0001",
            "accountName": "A",
            "debit": 100.0,
            "credit": 0.0,
        }


class TestTree:
    """GET /api/data/tree"""

    def test_tree(self, client: TestClient) -> None:
        response = client.get("/api/data/tree")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 5

        root = body["data"][0]
        assert root["accountCode"] == "100"
        assert root["accountName"] == "KASA VE BANKA"
        assert root["synthesized"] is True
        assert root["debit"] == 0.0
        assert root["totalDebit"] == 100.0
        assert root["totalCredit"] == 50.0
        assert root["netBalance"] == 50.0
        assert [c["accountCode"] for c in root["children"]] == ["100.01", "100.02"]

        leaf = root["children"][0]["children"][0]
        assert leaf["accountCode"] == "100.01.0001"
        assert leaf["synthesized"] is False
        assert leaf["depth"] == 3
        assert leaf["children"] == []


class TestDebugTotals:
    """GET /api/data/debug-totals"""

    def test_totals(self, client: TestClient) -> None:
        body = client.get("/api/data/debug-totals").json()

        assert body["success"] is True
        assert body["totalRecords"] == 2
        assert body["totalDebit"] == 100.0
        assert body["totalCredit"] == 50.0
        assert body["netBalance"] == 50.0
        assert body["recordsWithDebit"] == 1
        assert body["recordsWithCredit"] == 1
        assert len(body["sampleRecords"]) == 2


class TestSync:
    """POST /api/data/sync"""

    def test_sync(self, empty_client: TestClient, remote: MockRemoteDataClient) -> None:
        response = empty_client.post("/api/data/sync")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Data synchronized successfully from external API",
            "recordsProcessed": 2,
        }
        assert remote.state.fetch_count == 1

        assert empty_client.get("/api/data").json()["count"] == 2

    def test_sync_failure(self, empty_client: TestClient, remote: MockRemoteDataClient) -> None:
        remote.set_fail_next_fetch()

        response = empty_client.post("/api/data/sync")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error synchronizing data from external API"
        assert body["error"] == "Mock fetch error"
        assert "API_TOKEN_URL" in body["note"]

        assert empty_client.get("/api/data").json()["count"] == 0

    def test_sync_empty_source(self, empty_client: TestClient, remote: MockRemoteDataClient) -> None:
        """원격 데이터 0건은 성공 처리"""
        remote.set_records([])

        response = empty_client.post("/api/data/sync")

        assert response.status_code == 200
        assert response.json()["recordsProcessed"] == 0
