"""
Mock 원격 데이터 클라이언트 테스트
"""

from decimal import Decimal

import pytest

from adapters.interfaces import IRemoteDataSource
from adapters.mock.remote_client import MockRemoteDataClient
from adapters.remote.errors import RemoteFetchError
from core.accounts.types import AccountRecord


@pytest.fixture
def records() -> list[AccountRecord]:
    return [
        AccountRecord("100.01.0001", "A", Decimal("100"), Decimal("0")),
        AccountRecord("100.02.0002", "B", Decimal("0"), Decimal("50")),
    ]


class TestMockRemoteDataClient:
    """MockRemoteDataClient 테스트"""

    def test_implements_protocol(self) -> None:
        assert isinstance(MockRemoteDataClient(), IRemoteDataSource)

    @pytest.mark.asyncio
    async def test_fetch_records(self, records: list[AccountRecord]) -> None:
        client = MockRemoteDataClient(records)

        result = await client.fetch_records()

        assert result == records
        assert client.state.fetch_count == 1

    @pytest.mark.asyncio
    async def test_returns_copy(self, records: list[AccountRecord]) -> None:
        client = MockRemoteDataClient(records)

        result = await client.fetch_records()
        result.clear()

        assert len(await client.fetch_records()) == 2

    @pytest.mark.asyncio
    async def test_set_records(self, records: list[AccountRecord]) -> None:
        client = MockRemoteDataClient()
        assert await client.fetch_records() == []

        client.set_records(records[:1])

        assert await client.fetch_records() == records[:1]

    @pytest.mark.asyncio
    async def test_fail_next_fetch_once(self, records: list[AccountRecord]) -> None:
        client = MockRemoteDataClient(records)
        client.set_fail_next_fetch()

        with pytest.raises(RemoteFetchError):
            await client.fetch_records()

        assert await client.fetch_records() == records
        assert client.state.fetch_count == 2

    @pytest.mark.asyncio
    async def test_custom_error(self) -> None:
        client = MockRemoteDataClient()
        client.set_fail_next_fetch(RemoteFetchError("expired", status_code=401))

        with pytest.raises(RemoteFetchError) as exc_info:
            await client.fetch_records()

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        client = MockRemoteDataClient()

        await client.close()

        assert client.state.closed is True
