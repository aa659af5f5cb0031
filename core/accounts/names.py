"""
계정명 이름표

상위 계정 코드 → 표시용 이름 매핑 (정적 도메인 데이터).
누락된 상위 계정을 생성하거나 이름 없는 레코드를 표시할 때만 사용.
"""

from types import MappingProxyType
from typing import Mapping

from core.constants import AccountCodes


# 기본 이름표 (Tek Düzen Hesap Planı)
DEFAULT_ACCOUNT_NAMES: Mapping[str, str] = MappingProxyType({
    # 2단계 (보조 계정)
    "100.01": "KASA",
    "100.02": "BANKA",
    "120.01": "ALICILAR",
    "153.01": "TİCARİ MALLAR",
    "191.01": "İNDİRİLECEK KDV",
    "191.02": "İNDİRİLECEK KDV TEVKİFATI",
    "191.03": "İNDİRİLECEK İADE KDV",
    "320.01": "SATICILAR",
    "360.02": "ÖDENECEK TİCARİ VERGİLER",
    "391.01": "HESAPLANAN KDV",
    "391.02": "HESAPLANAN KDV TEVKİFATI",
    "391.03": "HESAPLANAN İADE KDV",
    "600.01": "YURTİÇİ SATIŞLAR",
    "610.01": "SATIŞTAN İADELER",
    # 1단계 (대표 계정)
    "100": "KASA VE BANKA",
    "120": "TİCARİ ALACAKLAR",
    "153": "TİCARİ MALLAR",
    "191": "İNDİRİLECEK VERGİLER",
    "320": "TİCARİ BORÇLAR",
    "360": "ÖDENECEK VERGİLER",
    "391": "HESAPLANAN VERGİLER",
    "600": "SATIŞLAR",
    "610": "SATIŞTAN İADELER",
})


class AccountNameBook:
    """계정명 조회기

    주입 가능한 이름표. 기본 이름표에 설정값을 덮어써서 사용.

    Args:
        names: 코드 → 이름 매핑 (None이면 기본 이름표)
        placeholder: 이름표에 없는 코드의 기본 이름

    사용 예시:
    ```python
    book = AccountNameBook.with_overrides({"102.01": "VADESİZ MEVDUAT"})
    book.resolve("100.01")  # "KASA"
    book.resolve("999")     # "ANA HESAP"
    ```
    """

    def __init__(
        self,
        names: Mapping[str, str] | None = None,
        placeholder: str = AccountCodes.PLACEHOLDER_NAME,
    ):
        self._names = dict(DEFAULT_ACCOUNT_NAMES if names is None else names)
        self.placeholder = placeholder

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, str] | None = None) -> "AccountNameBook":
        """기본 이름표 + 추가 이름"""
        names = dict(DEFAULT_ACCOUNT_NAMES)
        if overrides:
            names.update({str(code): str(name) for code, name in overrides.items()})
        return cls(names)

    def lookup(self, code: str) -> str | None:
        """이름표 조회 (없으면 None)"""
        return self._names.get(code)

    def resolve(self, code: str) -> str:
        """이름표 조회 (없으면 기본 이름)"""
        return self._names.get(code, self.placeholder)

    def __contains__(self, code: object) -> bool:
        return code in self._names

    def __len__(self) -> int:
        return len(self._names)
