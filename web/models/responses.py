"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
클라이언트 호환을 위해 JSON 키는 camelCase (alias) 사용.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """camelCase alias 공통 설정 (필드명으로도 생성 가능)"""

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="OK", description="서비스 상태")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


class ErrorResponse(BaseModel):
    """실패 응답 (500)"""

    success: bool = Field(default=False, description="성공 여부")
    message: str = Field(..., description="실패 요약")
    error: str = Field(..., description="원인 에러 메시지")
    note: str | None = Field(default=None, description="조치 안내")


# =========================================================================
# 계정 레코드
# =========================================================================

class AccountRecordResponse(CamelModel):
    """계정 레코드"""

    account_code: str = Field(..., alias="accountCode", description="계정 코드")
    account_name: str | None = Field(default=None, alias="accountName", description="계정명")
    debit: float = Field(default=0, description="차변")
    credit: float = Field(default=0, description="대변")


class DataListResponse(CamelModel):
    """계정 레코드 목록 응답"""

    success: bool = Field(default=True)
    data: list[AccountRecordResponse] = Field(default_factory=list)
    count: int = Field(default=0, description="레코드 수")


# =========================================================================
# 고정 3단계 그룹핑
# =========================================================================

class LevelThreeResponse(CamelModel):
    """3단계 (레코드)"""

    code: str
    account_name: str | None = Field(default=None, alias="accountName")
    debit: float
    credit: float


class LevelTwoResponse(CamelModel):
    """2단계 그룹 (code[:5])"""

    code: str
    debit: float
    credit: float
    level3: dict[str, LevelThreeResponse] = Field(default_factory=dict)


class LevelOneResponse(CamelModel):
    """1단계 그룹 (code[:3])"""

    code: str
    debit: float
    credit: float
    level2: dict[str, LevelTwoResponse] = Field(default_factory=dict)


class GroupedDataResponse(CamelModel):
    """그룹핑 결과"""

    level1: dict[str, LevelOneResponse] = Field(default_factory=dict)


class GroupedResponse(CamelModel):
    """그룹핑 응답"""

    success: bool = Field(default=True)
    data: GroupedDataResponse


# =========================================================================
# 계층 트리
# =========================================================================

class AccountNodeResponse(CamelModel):
    """계층 트리 노드 (하위 합계 포함)"""

    account_code: str = Field(..., alias="accountCode")
    account_name: str = Field(..., alias="accountName")
    depth: int = Field(..., description="코드 세그먼트 수")
    synthesized: bool = Field(default=False, description="생성된 상위 계정 여부")
    debit: float = Field(..., description="자체 차변")
    credit: float = Field(..., description="자체 대변")
    total_debit: float = Field(..., alias="totalDebit", description="하위 포함 차변")
    total_credit: float = Field(..., alias="totalCredit", description="하위 포함 대변")
    net_balance: float = Field(..., alias="netBalance", description="하위 포함 순잔액")
    children: list["AccountNodeResponse"] = Field(default_factory=list)


class TreeResponse(CamelModel):
    """계층 트리 응답"""

    success: bool = Field(default=True)
    data: list[AccountNodeResponse] = Field(default_factory=list, description="루트 노드 목록")
    count: int = Field(default=0, description="전체 노드 수")


# =========================================================================
# 동기화 / 합계
# =========================================================================

class SyncResponse(CamelModel):
    """수동 동기화 응답"""

    success: bool = Field(default=True)
    message: str
    records_processed: int = Field(..., alias="recordsProcessed")


class DebugTotalsResponse(CamelModel):
    """전체 합계 진단 응답"""

    success: bool = Field(default=True)
    total_records: int = Field(..., alias="totalRecords")
    total_debit: float = Field(..., alias="totalDebit")
    total_credit: float = Field(..., alias="totalCredit")
    net_balance: float = Field(..., alias="netBalance")
    records_with_debit: int = Field(..., alias="recordsWithDebit")
    records_with_credit: int = Field(..., alias="recordsWithCredit")
    sample_records: list[AccountRecordResponse] = Field(default_factory=list, alias="sampleRecords")
