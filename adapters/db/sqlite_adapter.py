"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
Web 요청과 동기화 Worker가 동시에 접근 가능하도록 설정.
"""

import logging
from pathlib import Path
from typing import Any

import aiosqlite

logger = logging.getLogger(__name__)


async def create_connection(db_path: Path | str) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로

    Returns:
        aiosqlite 연결 객체
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(str(db_path))
    await conn.execute("PRAGMA journal_mode=WAL")

    # 동시 접근 설정
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

    logger.debug("SQLite 연결 생성", extra={"db_path": str(db_path)})

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    연결 1개를 열고 닫는 비동기 컨텍스트 매니저.
    쓰기는 호출자가 commit()으로 확정.

    Args:
        db_path: DB 파일 경로

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        rows = await db.fetchall("SELECT account_code FROM account_data")
    ```
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self.is_connected:
            return

        self._conn = await create_connection(self.db_path)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.debug("SQLite 연결 종료")

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        conn = self._require_conn()

        if parameters:
            return await conn.execute(sql, parameters)
        return await conn.execute(sql)

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            await self._conn.commit()

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    account_data: 계정 코드당 1행 (코드가 키)

    Args:
        adapter: 연결된 SQLiteAdapter (쓰기 가능)
    """
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS account_data (
            account_code     TEXT PRIMARY KEY,
            account_name     TEXT,
            debit            TEXT NOT NULL DEFAULT '0',
            credit           TEXT NOT NULL DEFAULT '0',
            created_at       TEXT NOT NULL,
            updated_at       TEXT NOT NULL
        )
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS idx_account_data_updated
        ON account_data (updated_at)
    """)

    await adapter.commit()
    logger.info("스키마 초기화 완료", extra={"db_path": str(adapter.db_path)})
