"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.responses import (
    AccountNodeResponse,
    AccountRecordResponse,
    DataListResponse,
    DebugTotalsResponse,
    ErrorResponse,
    GroupedDataResponse,
    GroupedResponse,
    HealthResponse,
    SyncResponse,
    TreeResponse,
)

__all__ = [
    "AccountNodeResponse",
    "AccountRecordResponse",
    "DataListResponse",
    "DebugTotalsResponse",
    "ErrorResponse",
    "GroupedDataResponse",
    "GroupedResponse",
    "HealthResponse",
    "SyncResponse",
    "TreeResponse",
]
