"""
계정 동기화 서비스

원격 데이터 소스에서 계정 레코드를 조회하여 저장소에 순차 upsert.
주기 실행(AccountSyncPoller)과 수동 실행(POST /api/data/sync)이 공유.

- 조회 실패: RemoteFetchError 전파 (저장소 변경 없음)
- 저장 실패: StoreError 전파 (이미 저장된 레코드는 유지, 나머지 중단)
"""

import logging
from pathlib import Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IAccountStore, IRemoteDataSource
from core.storage.account_store import AccountStore

logger = logging.getLogger(__name__)


class AccountSyncService:
    """계정 동기화 서비스

    Args:
        source: 원격 데이터 소스
        store: 계정 저장소
    """

    def __init__(self, source: IRemoteDataSource, store: IAccountStore):
        self.source = source
        self.store = store

    async def sync(self) -> int:
        """동기화 실행

        Returns:
            처리된 레코드 수

        Raises:
            RemoteFetchError: 원격 조회 실패
            StoreError: 저장 실패
        """
        records = await self.source.fetch_records()

        logger.info(f"{len(records)}건 DB 동기화 시작")

        processed = 0
        for record in records:
            await self.store.upsert(record)
            processed += 1

        logger.info("DB 동기화 완료", extra={"records_processed": processed})
        return processed


async def sync_to_database(source: IRemoteDataSource, db_path: Path | str) -> int:
    """전용 DB 연결을 열어 동기화 1회 실행

    Args:
        source: 원격 데이터 소스
        db_path: DB 파일 경로

    Returns:
        처리된 레코드 수
    """
    async with SQLiteAdapter(db_path) as db:
        service = AccountSyncService(source, AccountStore(db))
        return await service.sync()
