"""
어댑터 인터페이스 테스트

구현체가 Protocol을 준수하는지 확인.
"""

from pathlib import Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IAccountStore, IRemoteDataSource
from adapters.mock.remote_client import MockRemoteDataClient
from adapters.remote.rest_client import RemoteDataClient
from core.config.loader import RemoteApiConfig
from core.storage.account_store import AccountStore


class TestIRemoteDataSource:
    """IRemoteDataSource Protocol 테스트"""

    def test_rest_client_implements(self) -> None:
        client = RemoteDataClient(RemoteApiConfig("https://t", "https://d", "u", "p"))

        assert isinstance(client, IRemoteDataSource)

    def test_mock_client_implements(self) -> None:
        assert isinstance(MockRemoteDataClient(), IRemoteDataSource)

    def test_store_is_not_source(self, tmp_path: Path) -> None:
        assert not isinstance(AccountStore(SQLiteAdapter(tmp_path / "x.db")), IRemoteDataSource)


class TestIAccountStore:
    """IAccountStore Protocol 테스트"""

    def test_account_store_implements(self, tmp_path: Path) -> None:
        assert isinstance(AccountStore(SQLiteAdapter(tmp_path / "x.db")), IAccountStore)
