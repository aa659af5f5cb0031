"""
고정 3단계 그룹핑 테스트
"""

from decimal import Decimal

from core.accounts.grouping import build_grouped
from core.accounts.types import AccountRecord


def _record(code: str, debit: str = "0", credit: str = "0", name: str | None = None) -> AccountRecord:
    return AccountRecord(code, name, Decimal(debit), Decimal(credit))


class TestBuildGrouped:
    """build_grouped 테스트"""

    def test_substring_keys(self) -> None:
        grouped = build_grouped([
            _record("100.01.00001", debit="10"),
            _record("100.01.00002", debit="15", credit="3"),
        ])

        assert list(grouped.level1) == ["100"]
        level1 = grouped.level1["100"]
        assert list(level1.level2) == ["100.0"]

        level2 = level1.level2["100.0"]
        assert set(level2.level3) == {"100.01.00001", "100.01.00002"}

    def test_sums_per_level(self) -> None:
        grouped = build_grouped([
            _record("100.01.00001", debit="10"),
            _record("100.01.00002", debit="15", credit="3"),
            _record("100.12.00001", debit="100"),
            _record("120.01.00001", credit="7"),
        ])

        level1 = grouped.level1["100"]
        assert level1.debit == Decimal("125")
        assert level1.credit == Decimal("3")

        assert level1.level2["100.0"].debit == Decimal("25")
        assert level1.level2["100.1"].debit == Decimal("100")

        assert grouped.level1["120"].credit == Decimal("7")
        assert grouped.level1["120"].debit == Decimal("0")

    def test_duplicate_code_overwrites_leaf_but_sums_accumulate(self) -> None:
        grouped = build_grouped([
            _record("100.01.00001", debit="10", name="ESKİ"),
            _record("100.01.00001", debit="20", name="YENİ"),
        ])

        level2 = grouped.level1["100"].level2["100.0"]
        assert level2.level3["100.01.00001"].account_name == "YENİ"
        assert level2.debit == Decimal("30")

    def test_short_code(self) -> None:
        """5자 미만 코드는 잘린 키 그대로 사용"""
        grouped = build_grouped([_record("12", debit="1")])

        assert grouped.level1["12"].level2["12"].level3["12"].debit == Decimal("1")

    def test_to_dict(self) -> None:
        grouped = build_grouped([_record("100.01.00001", debit="10", name="KASA")])

        data = grouped.to_dict()

        leaf = data["level1"]["100"]["level2"]["100.0"]["level3"]["100.01.00001"]
        assert leaf == {
            "code": "100.01.00001",
            "accountName": "KASA",
            "debit": Decimal("10"),
            "credit": Decimal("0"),
        }
        assert data["level1"]["100"]["debit"] == Decimal("10")

    def test_empty(self) -> None:
        assert build_grouped([]).to_dict() == {"level1": {}}
