"""
계정 원장 보고서

계층 트리를 텍스트 보고서로 렌더링하고 전체 합계를 계산.

- 상위 계정 (하위 있음): 코드, 계정명, 하위 포함 차변 합계
- 하위 계정 (leaf): 코드, 계정명, 차변, 대변, 순잔액
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from core.accounts.hierarchy import total_debit
from core.accounts.types import AccountNode, AccountRecord

INDENT = "  "


@dataclass(frozen=True)
class LedgerTotals:
    """전체 합계 (계정 코드가 있는 레코드 기준)"""

    total_accounts: int
    total_debit: Decimal
    total_credit: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.total_debit - self.total_credit


def summarize(records: Iterable[AccountRecord]) -> LedgerTotals:
    """레코드 합계 계산 (공백 코드 제외)"""
    count = 0
    debit = Decimal("0")
    credit = Decimal("0")

    for record in records:
        if not record.has_code:
            continue
        count += 1
        debit += record.debit
        credit += record.credit

    return LedgerTotals(total_accounts=count, total_debit=debit, total_credit=credit)


def format_amount(amount: Decimal) -> str:
    """금액 포맷 (천 단위 구분, 소수 2자리)"""
    return f"{amount:,.2f}"


def render_ledger(roots: Sequence[AccountNode]) -> list[str]:
    """포레스트 → 보고서 라인 목록

    Args:
        roots: build_forest 결과

    Returns:
        들여쓰기된 텍스트 라인
    """
    lines: list[str] = []
    for root in roots:
        _render_node(root, 0, lines)
    return lines


def _render_node(node: AccountNode, level: int, lines: list[str]) -> None:
    prefix = INDENT * level

    if node.children:
        lines.append(
            f"{prefix}{node.account_code}  {node.account_name}"
            f"  [Borç {format_amount(total_debit(node))}]"
        )
        for child in node.children:
            _render_node(child, level + 1, lines)
        return

    net = node.debit - node.credit
    debit = format_amount(node.debit) if node.debit > 0 else "-"
    credit = format_amount(node.credit) if node.credit > 0 else "-"
    lines.append(
        f"{prefix}{node.account_code}  {node.account_name}"
        f"  Borç: {debit}  Alacak: {credit}  Net: {format_amount(net)}"
    )
