"""
Mock 원격 데이터 클라이언트

테스트/오프라인 실행용 Mock 데이터 소스.
IRemoteDataSource Protocol 준수.
"""

from dataclasses import dataclass, field

from adapters.remote.errors import RemoteFetchError
from core.accounts.types import AccountRecord


@dataclass
class MockRemoteState:
    """Mock 상태 (메모리 내 저장)"""

    records: list[AccountRecord] = field(default_factory=list)

    # 시뮬레이션 옵션
    fail_next_fetch: Exception | None = None

    # 호출 카운터
    fetch_count: int = 0
    closed: bool = False


class MockRemoteDataClient:
    """Mock 원격 데이터 클라이언트

    사용 예시:
    ```python
    client = MockRemoteDataClient([
        AccountRecord("100.01.0001", "A", Decimal("100"), Decimal("0")),
    ])
    records = await client.fetch_records()

    # 다음 조회 실패 시뮬레이션
    client.set_fail_next_fetch()
    ```
    """

    def __init__(self, records: list[AccountRecord] | None = None):
        self.state = MockRemoteState(records=list(records or []))

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def set_records(self, records: list[AccountRecord]) -> None:
        """반환할 레코드 설정"""
        self.state.records = list(records)

    def set_fail_next_fetch(self, error: Exception | None = None) -> None:
        """다음 조회 실패 설정"""
        self.state.fail_next_fetch = error or RemoteFetchError("Mock fetch error")

    # -------------------------------------------------------------------------
    # IRemoteDataSource
    # -------------------------------------------------------------------------

    async def fetch_records(self) -> list[AccountRecord]:
        self.state.fetch_count += 1

        if self.state.fail_next_fetch is not None:
            error = self.state.fail_next_fetch
            self.state.fail_next_fetch = None
            raise error

        return list(self.state.records)

    async def close(self) -> None:
        self.state.closed = True
