"""
계정 계층 트리 빌더

평탄한 계정 레코드 목록을 점(.) 세그먼트 규칙에 따라 포레스트로 변환.

처리 순서:
1. 공백 코드 레코드 제외
2. 계정 코드 사전순 정렬
3. 코드 → 노드 매핑 생성 (중복 코드는 마지막 값 사용)
4. 누락된 상위 계정 수집 (여러 단계 누락 포함)
5. 누락된 상위 계정 생성 (금액 0, 이름표 또는 기본 이름)
6. 각 노드를 상위 노드의 children에 연결, 상위가 없으면 루트

노드는 부모 참조를 가지지 않음. 부모가 children 목록을 단독 소유.
하위 합계는 노드에 저장하지 않고 total_debit / total_credit 으로 매번 계산.
"""

import logging
from decimal import Decimal
from typing import Iterable, Iterator, Sequence

from core.accounts.codes import account_depth, ancestor_codes, parent_code
from core.accounts.names import AccountNameBook
from core.accounts.types import AccountNode, AccountRecord

logger = logging.getLogger(__name__)


def build_forest(
    records: Iterable[AccountRecord],
    names: AccountNameBook | None = None,
) -> list[AccountNode]:
    """계정 레코드 → 포레스트 (루트 노드 목록)

    Args:
        records: 계정 레코드 목록 (정렬/중복 제거 불필요)
        names: 계정명 이름표 (None이면 기본 이름표)

    Returns:
        코드 순으로 정렬된 루트 노드 목록
    """
    if names is None:
        names = AccountNameBook()

    valid: list[AccountRecord] = []
    skipped = 0
    for record in records:
        if record.has_code:
            valid.append(record)
        else:
            skipped += 1

    if skipped:
        logger.warning(
            f"계정 코드가 없는 레코드 {skipped}건 제외",
            extra={"skipped": skipped},
        )

    valid.sort(key=lambda r: r.account_code)

    # 코드 → 노드 (arena)
    nodes: dict[str, AccountNode] = {}
    for record in valid:
        nodes[record.account_code] = AccountNode(
            account_code=record.account_code,
            account_name=record.account_name or names.resolve(record.account_code),
            debit=record.debit,
            credit=record.credit,
            depth=account_depth(record.account_code),
        )

    # 누락된 상위 계정 수집 (dict로 삽입 순서 유지)
    missing: dict[str, None] = {}
    for code in nodes:
        for ancestor in ancestor_codes(code):
            if ancestor not in nodes:
                missing[ancestor] = None

    for code in missing:
        nodes[code] = AccountNode(
            account_code=code,
            account_name=names.resolve(code),
            debit=Decimal("0"),
            credit=Decimal("0"),
            depth=account_depth(code),
            synthesized=True,
        )

    # 연결 (코드 순서로 처리하여 형제 순서 고정)
    roots: list[AccountNode] = []
    for code in sorted(nodes):
        node = nodes[code]
        parent = parent_code(code)

        if parent is not None and parent in nodes:
            nodes[parent].children.append(node)
        else:
            roots.append(node)

    logger.debug(
        "계정 트리 생성 완료",
        extra={
            "records": len(valid),
            "synthesized": len(missing),
            "roots": len(roots),
        },
    )

    return roots


# =========================================================================
# 집계
# =========================================================================

def total_debit(node: AccountNode) -> Decimal:
    """하위 포함 차변 합계"""
    total = node.debit
    for child in node.children:
        total += total_debit(child)
    return total


def total_credit(node: AccountNode) -> Decimal:
    """하위 포함 대변 합계"""
    total = node.credit
    for child in node.children:
        total += total_credit(child)
    return total


def net_balance(node: AccountNode) -> Decimal:
    """하위 포함 순잔액 (차변 - 대변)"""
    return total_debit(node) - total_credit(node)


# =========================================================================
# 순회
# =========================================================================

def iter_nodes(roots: Sequence[AccountNode]) -> Iterator[AccountNode]:
    """전위 순회 (깊이 우선)"""
    for root in roots:
        yield root
        yield from iter_nodes(root.children)


def find_node(roots: Sequence[AccountNode], code: str) -> AccountNode | None:
    """계정 코드로 노드 검색"""
    for node in iter_nodes(roots):
        if node.account_code == code:
            return node
    return None
