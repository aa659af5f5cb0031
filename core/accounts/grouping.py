"""
고정 3단계 그룹핑

계정 코드를 문자열 길이로 잘라 3단계로 묶고 차변/대변 합계 계산.

    level1 = code[:3]   (예: "100")
    level2 = code[:5]   (예: "100.0")
    level3 = code       (레코드 자체)

세그먼트 규칙(hierarchy.build_forest)과 별개의 레거시 그룹핑.
코드 길이를 검증하지 않으므로 5자 미만 코드는 잘린 키로 묶임.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable

from core.accounts.types import AccountRecord
from core.constants import AccountCodes


@dataclass
class LevelTwoGroup:
    """2단계 그룹 (level3 = 레코드)"""

    code: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    level3: dict[str, AccountRecord] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "debit": self.debit,
            "credit": self.credit,
            "level3": {
                key: {
                    "code": record.account_code,
                    "accountName": record.account_name,
                    "debit": record.debit,
                    "credit": record.credit,
                }
                for key, record in self.level3.items()
            },
        }


@dataclass
class LevelOneGroup:
    """1단계 그룹"""

    code: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    level2: dict[str, LevelTwoGroup] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "debit": self.debit,
            "credit": self.credit,
            "level2": {key: group.to_dict() for key, group in self.level2.items()},
        }


@dataclass
class GroupedData:
    """고정 3단계 그룹핑 결과"""

    level1: dict[str, LevelOneGroup] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level1": {key: group.to_dict() for key, group in self.level1.items()},
        }


def build_grouped(records: Iterable[AccountRecord]) -> GroupedData:
    """계정 레코드 → 고정 3단계 그룹

    그룹은 처음 등장할 때 0으로 생성. 같은 코드가 반복되면 level3 값은
    덮어쓰지만 합계에는 모두 누적됨.

    Args:
        records: 계정 레코드 목록

    Returns:
        GroupedData
    """
    grouped = GroupedData()

    for record in records:
        code = record.account_code
        level1_key = code[:AccountCodes.LEVEL1_LENGTH]
        level2_key = code[:AccountCodes.LEVEL2_LENGTH]

        level1 = grouped.level1.get(level1_key)
        if level1 is None:
            level1 = LevelOneGroup(code=level1_key)
            grouped.level1[level1_key] = level1

        level2 = level1.level2.get(level2_key)
        if level2 is None:
            level2 = LevelTwoGroup(code=level2_key)
            level1.level2[level2_key] = level2

        level2.level3[code] = record

        level1.debit += record.debit
        level1.credit += record.credit
        level2.debit += record.debit
        level2.credit += record.credit

    return grouped
