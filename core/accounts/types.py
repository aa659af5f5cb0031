"""
계정 데이터 타입

원격 API에서 수집한 계정 레코드와 계층 트리 노드 정의.
모든 금액은 Decimal 타입 사용.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class AccountRecord:
    """계정 레코드 (수집/저장 단위)

    Attributes:
        account_code: 점(.)으로 구분된 계정 코드 (예: 100.01.00001001), 저장 키
        account_name: 표시용 계정명 (없을 수 있음)
        debit: 차변 (borç)
        credit: 대변 (alacak)
    """

    account_code: str
    account_name: str | None = None
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")

    @property
    def has_code(self) -> bool:
        """공백 제거 후 계정 코드가 있는지 여부"""
        return bool(self.account_code and self.account_code.strip())


@dataclass
class AccountNode:
    """계층 트리 노드

    debit/credit은 해당 레코드 자체의 값만 보관 (하위 합계 아님).
    하위 합계는 hierarchy.total_debit / total_credit 으로 매번 계산.

    Attributes:
        account_code: 계정 코드
        account_name: 계정명 (없으면 이름표 또는 기본 이름)
        debit: 자체 차변
        credit: 자체 대변
        depth: 코드 세그먼트 수 (1 이상)
        children: 하위 노드 (부모가 단독 소유)
        synthesized: 입력에 없어 생성된 상위 계정 여부
    """

    account_code: str
    account_name: str
    debit: Decimal
    credit: Decimal
    depth: int
    children: list["AccountNode"] = field(default_factory=list)
    synthesized: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children
