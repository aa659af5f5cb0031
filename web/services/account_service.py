"""
Account 서비스

계정 레코드 조회, 그룹핑, 계층 트리, 합계 진단
"""

import logging
from decimal import Decimal

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.accounts.hierarchy import build_forest, iter_nodes, net_balance, total_credit, total_debit
from core.accounts.names import AccountNameBook
from core.accounts.types import AccountNode, AccountRecord
from core.storage.account_store import AccountStore
from web.models.responses import (
    AccountNodeResponse,
    AccountRecordResponse,
    DebugTotalsResponse,
    GroupedDataResponse,
)

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5


def to_record_response(record: AccountRecord) -> AccountRecordResponse:
    return AccountRecordResponse(
        account_code=record.account_code,
        account_name=record.account_name or None,
        debit=float(record.debit),
        credit=float(record.credit),
    )


def to_node_response(node: AccountNode) -> AccountNodeResponse:
    """AccountNode → 응답 (하위 합계 계산 포함, 재귀)"""
    return AccountNodeResponse(
        account_code=node.account_code,
        account_name=node.account_name,
        depth=node.depth,
        synthesized=node.synthesized,
        debit=float(node.debit),
        credit=float(node.credit),
        total_debit=float(total_debit(node)),
        total_credit=float(total_credit(node)),
        net_balance=float(net_balance(node)),
        children=[to_node_response(child) for child in node.children],
    )


class AccountService:
    """Account 서비스

    Args:
        db: SQLite 어댑터
        names: 계정명 이름표 (None이면 기본 이름표)
    """

    def __init__(self, db: SQLiteAdapter, names: AccountNameBook | None = None):
        self.store = AccountStore(db)
        self.names = names or AccountNameBook()

    async def list_records(self) -> list[AccountRecordResponse]:
        """전체 계정 레코드 (코드 오름차순)"""
        records = await self.store.get_all()
        return [to_record_response(r) for r in records]

    async def get_grouped(self) -> GroupedDataResponse:
        """고정 3단계 그룹핑"""
        grouped = await self.store.get_grouped()
        return GroupedDataResponse.model_validate(grouped.to_dict())

    async def get_tree(self) -> tuple[list[AccountNodeResponse], int]:
        """계층 트리

        Returns:
            (루트 노드 목록, 전체 노드 수)
        """
        records = await self.store.get_all()
        roots = build_forest(records, self.names)
        node_count = sum(1 for _ in iter_nodes(roots))
        return [to_node_response(root) for root in roots], node_count

    async def get_debug_totals(self) -> DebugTotalsResponse:
        """전체 합계 진단"""
        records = await self.store.get_all()
        debits = [r.debit for r in records if r.debit > 0]
        credits = [r.credit for r in records if r.credit > 0]
        total_debit_sum = sum(debits, Decimal("0"))
        total_credit_sum = sum(credits, Decimal("0"))

        return DebugTotalsResponse(
            total_records=len(records),
            total_debit=float(total_debit_sum),
            total_credit=float(total_credit_sum),
            net_balance=float(total_debit_sum - total_credit_sum),
            records_with_debit=len(debits),
            records_with_credit=len(credits),
            sample_records=[to_record_response(r) for r in records[:SAMPLE_SIZE]],
        )
