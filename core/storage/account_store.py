"""
AccountStore - 계정 레코드 저장소

account_data 테이블을 통해 계정 레코드 저장/조회.
계정 코드가 키이며 upsert는 단일 SQL 문으로 키 단위 원자성 보장.

- upsert: 없으면 생성, 있으면 이름/차변/대변 덮어쓰기 + updated_at 갱신
- get_all: 계정 코드 오름차순 전체 조회
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

import aiosqlite

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.accounts.grouping import GroupedData, build_grouped
from core.accounts.types import AccountRecord

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """저장소 작업 실패 예외"""

    def __init__(self, message: str, account_code: str | None = None):
        super().__init__(message)
        self.account_code = account_code


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        logger.warning(f"저장된 금액 변환 실패: {value!r}")
        return Decimal("0")


def _row_to_record(row: tuple[Any, ...]) -> AccountRecord:
    return AccountRecord(
        account_code=row[0],
        account_name=row[1],
        debit=_to_decimal(row[2]),
        credit=_to_decimal(row[3]),
    )


class AccountStore:
    """계정 레코드 저장소

    Args:
        db: SQLiteAdapter 인스턴스

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        store = AccountStore(db)
        await store.upsert(AccountRecord("100.01.0001", "KASA", Decimal("10"), Decimal("0")))
        records = await store.get_all()
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def upsert(self, record: AccountRecord) -> None:
        """계정 레코드 생성 또는 갱신

        Args:
            record: 계정 레코드

        Raises:
            StoreError: DB 오류
        """
        now = datetime.now(timezone.utc).isoformat()

        sql = """
            INSERT INTO account_data (
                account_code, account_name, debit, credit, created_at, updated_at
            )
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(account_code) DO UPDATE SET
                account_name = excluded.account_name,
                debit = excluded.debit,
                credit = excluded.credit,
                updated_at = excluded.updated_at
        """

        try:
            await self.db.execute(
                sql,
                (
                    record.account_code,
                    record.account_name or None,
                    str(record.debit),
                    str(record.credit),
                    now,
                    now,
                ),
            )
            await self.db.commit()
        except (aiosqlite.Error, RuntimeError) as e:
            raise StoreError(
                f"계정 저장 실패 ({record.account_code!r}): {e}",
                account_code=record.account_code,
            ) from e

    async def get_all(self) -> list[AccountRecord]:
        """전체 계정 레코드 (계정 코드 오름차순)

        Raises:
            StoreError: DB 오류
        """
        sql = """
            SELECT account_code, account_name, debit, credit
            FROM account_data
            ORDER BY account_code ASC
        """

        try:
            rows = await self.db.fetchall(sql)
        except (aiosqlite.Error, RuntimeError) as e:
            raise StoreError(f"계정 조회 실패: {e}") from e

        return [_row_to_record(row) for row in rows]

    async def get_grouped(self) -> GroupedData:
        """고정 3단계 그룹핑 결과

        Raises:
            StoreError: DB 오류
        """
        return build_grouped(await self.get_all())
