"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Protocol, runtime_checkable

from core.accounts.types import AccountRecord


@runtime_checkable
class IRemoteDataSource(Protocol):
    """원격 계정 데이터 소스 인터페이스

    RemoteDataClient, MockRemoteDataClient가 구현.
    금액은 반드시 Decimal 타입 사용.
    """

    async def fetch_records(self) -> list[AccountRecord]:
        """계정 레코드 전체 조회

        Returns:
            정규화된 계정 레코드 목록

        Raises:
            RemoteFetchError: 통신/인증/응답 형식 실패
        """
        ...

    async def close(self) -> None:
        """리소스 정리"""
        ...


@runtime_checkable
class IAccountStore(Protocol):
    """계정 레코드 저장소 인터페이스"""

    async def upsert(self, record: AccountRecord) -> None:
        """계정 코드 기준 생성 또는 갱신

        Raises:
            StoreError: 저장 실패
        """
        ...

    async def get_all(self) -> list[AccountRecord]:
        """계정 코드 오름차순 전체 조회"""
        ...
