"""
원격 API 응답 -> AccountRecord 변환

FileMaker Data API 응답을 표준 AccountRecord로 변환.
지원하는 응답 형식 (우선순위 순):

1. response.scriptResult          : JSON 문자열 (레코드 배열)
2. response.data[0].fieldData.data: JSON 문자열 (레코드 배열, 중첩 형식)
3. response.data[*].fieldData     : 레코드 객체

레코드 필드 (튀르키예어):
- hesap_kodu: 계정 코드
- hesap_adi / firma_adi / sirket_adi / unvan / cari_adi / musteri_adi / tedarikci_adi: 계정명 후보
- borc: 차변
- alacak: 대변
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from adapters.remote.errors import UnrecognizedResponseShape
from core.accounts.types import AccountRecord

logger = logging.getLogger(__name__)

CODE_FIELD = "hesap_kodu"
DEBIT_FIELD = "borc"
CREDIT_FIELD = "alacak"

# 계정명 후보 필드 (앞쪽 우선)
NAME_FIELDS: tuple[str, ...] = (
    "hesap_adi",
    "firma_adi",
    "sirket_adi",
    "unvan",
    "cari_adi",
    "musteri_adi",
    "tedarikci_adi",
)


def parse_amount(value: Any) -> Decimal:
    """금액 변환 (변환 불가 또는 없으면 0)

    Args:
        value: 숫자 또는 문자열

    Returns:
        Decimal 금액
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")

    text = str(value).strip()
    if not text:
        return Decimal("0")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Decimal("0")

    if not amount.is_finite():
        return Decimal("0")

    return amount


def pick_account_name(item: dict[str, Any]) -> str:
    """계정명 후보 필드 중 첫 번째 값 (없으면 빈 문자열)"""
    for name_field in NAME_FIELDS:
        value = item.get(name_field)
        if value:
            return str(value)
    return ""


def parse_record(item: dict[str, Any]) -> AccountRecord:
    """원시 레코드 -> AccountRecord

    {
        "hesap_kodu": "120.01.0001",
        "hesap_adi": "ABC LTD. ŞTİ.",
        "borc": "1500.50",
        "alacak": "0"
    }
    """
    raw_code = item.get(CODE_FIELD)
    code = "" if raw_code is None else str(raw_code)
    name = pick_account_name(item)

    if not name and code:
        logger.warning(
            f"계정명을 찾을 수 없음: {code}",
            extra={"available_fields": sorted(item.keys())},
        )

    return AccountRecord(
        account_code=code,
        account_name=name,
        debit=parse_amount(item.get(DEBIT_FIELD)),
        credit=parse_amount(item.get(CREDIT_FIELD)),
    )


def _decode_item_list(raw: Any, source: str) -> list[dict[str, Any]]:
    """JSON 문자열 -> 레코드 목록"""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise UnrecognizedResponseShape(f"{source} JSON 파싱 실패: {e}") from e

    if not isinstance(raw, list):
        raise UnrecognizedResponseShape(f"{source}가 배열이 아닙니다")

    return [item for item in raw if isinstance(item, dict)]


def parse_records_payload(payload: Any) -> list[AccountRecord]:
    """데이터 API 응답 -> AccountRecord 목록

    Args:
        payload: 응답 JSON

    Returns:
        AccountRecord 목록 (응답 순서 유지)

    Raises:
        UnrecognizedResponseShape: 알려진 형식이 아닌 경우
    """
    response = payload.get("response") if isinstance(payload, dict) else None
    if not isinstance(response, dict):
        raise UnrecognizedResponseShape("No data found in response")

    # 1. 스크립트 결과
    if response.get("scriptResult"):
        items = _decode_item_list(response["scriptResult"], "scriptResult")
        logger.info(f"scriptResult에서 {len(items)}건 수신")
        return [parse_record(item) for item in items]

    data = response.get("data")
    if not isinstance(data, list):
        raise UnrecognizedResponseShape("No data found in response")

    if not data:
        logger.info("fieldData에서 0건 수신")
        return []

    first_field_data = data[0].get("fieldData") if isinstance(data[0], dict) else None

    # 2. 중첩 JSON (fieldData.data)
    if isinstance(first_field_data, dict) and first_field_data.get("data"):
        items = _decode_item_list(first_field_data["data"], "fieldData.data")
        logger.info(f"fieldData.data에서 {len(items)}건 수신")
        return [parse_record(item) for item in items]

    # 3. 일반 fieldData 형식
    records = []
    for row in data:
        field_data = row.get("fieldData") if isinstance(row, dict) else None
        if not isinstance(field_data, dict):
            raise UnrecognizedResponseShape("fieldData가 없는 레코드가 있습니다")
        records.append(parse_record(field_data))

    logger.info(f"fieldData에서 {len(records)}건 수신")
    return records


def parse_token(payload: Any) -> str | None:
    """토큰 응답에서 토큰 추출

    {"response": {"token": "..."}, "messages": [{"code": "0", "message": "OK"}]}
    """
    if not isinstance(payload, dict):
        return None
    response = payload.get("response")
    if not isinstance(response, dict):
        return None
    token = response.get("token")
    return str(token) if token else None
