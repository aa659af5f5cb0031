"""
1회 동기화

설정된 원격 API에서 계정 데이터를 조회하여 로컬 DB에 저장.

사용법:
    python -m scripts.sync_once
    python -m scripts.sync_once --db data/ledger.db
"""

import argparse
import asyncio
import logging
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from adapters.remote.errors import RemoteFetchError
from adapters.remote.rest_client import RemoteDataClient
from core.config.loader import get_settings
from core.storage.account_store import StoreError
from worker.sync_service import sync_to_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def main(db_path: Path) -> int:
    """동기화 1회 실행

    Returns:
        종료 코드 (0: 성공, 1: 실패)
    """
    settings = get_settings()

    if not settings.remote.is_configured:
        logger.error("API_TOKEN_URL / API_DATA_URL 미설정")
        return 1

    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)

    async with RemoteDataClient(settings.remote) as client:
        try:
            processed = await sync_to_database(client, db_path)
        except (RemoteFetchError, StoreError) as e:
            logger.error(f"동기화 실패: {e}")
            return 1

    logger.info(f"동기화 완료: {processed}건 ({db_path})")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="원격 API → 로컬 DB 1회 동기화"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="DB 파일 경로 (기본: 설정의 database.path)"
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.db or get_settings().db_path)))
