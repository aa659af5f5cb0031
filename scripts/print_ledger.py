"""
계정 원장 출력

로컬 DB에 저장된 계정 레코드를 계층 트리로 출력하고 합계 표시.

사용법:
    python -m scripts.print_ledger
    python -m scripts.print_ledger --db data/ledger.db
"""

import argparse
import asyncio
import logging
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.accounts.hierarchy import build_forest
from core.accounts.names import AccountNameBook
from core.accounts.report import format_amount, render_ledger, summarize
from core.config.loader import get_settings
from core.storage.account_store import AccountStore

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def main(db_path: Path) -> None:
    """원장 출력

    Args:
        db_path: DB 파일 경로
    """
    settings = get_settings()
    names = AccountNameBook.with_overrides(settings.account_names)

    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        records = await AccountStore(db).get_all()

    if not records:
        print(f"No account data in {db_path}")
        return

    for line in render_ledger(build_forest(records, names)):
        print(line)

    totals = summarize(records)
    print()
    print(f"Hesap sayısı : {totals.total_accounts}")
    print(f"Toplam Borç  : {format_amount(totals.total_debit)}")
    print(f"Toplam Alacak: {format_amount(totals.total_credit)}")
    print(f"Net Bakiye   : {format_amount(totals.net_balance)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="로컬 DB 계정 원장 출력"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="DB 파일 경로 (기본: 설정의 database.path)"
    )
    args = parser.parse_args()

    asyncio.run(main(args.db or get_settings().db_path))
