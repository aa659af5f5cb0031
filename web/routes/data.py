"""
Data 라우트

계정 데이터 조회 및 동기화 API

- GET  /api/data              : 저장된 전체 레코드
- GET  /api/data/grouped      : 고정 3단계 그룹핑
- GET  /api/data/tree         : 계층 트리 (하위 합계 포함)
- GET  /api/data/debug-totals : 전체 합계 진단
- POST /api/data/sync         : 원격 API 수동 동기화

실패 시 500 + {success: false, message, error}
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from adapters.db.sqlite_adapter import SQLiteAdapter
from adapters.interfaces import IRemoteDataSource
from core.accounts.names import AccountNameBook
from core.storage.account_store import AccountStore
from web.dependencies import get_db, get_name_book, get_remote_source
from web.models.responses import (
    DataListResponse,
    DebugTotalsResponse,
    ErrorResponse,
    GroupedResponse,
    SyncResponse,
    TreeResponse,
)
from web.services.account_service import AccountService
from worker.sync_service import AccountSyncService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/data", tags=["Data"])

SYNC_FAILURE_NOTE = (
    "Check that API_TOKEN_URL, API_DATA_URL and credentials are configured "
    "(environment or config/secrets.yaml)"
)


def _error_response(message: str, error: Exception, note: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=str(error), note=note)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@router.get("", response_model=DataListResponse)
async def list_data(
    db: SQLiteAdapter = Depends(get_db),
):
    """저장된 전체 계정 레코드 (코드 오름차순)"""
    service = AccountService(db)

    try:
        records = await service.list_records()
    except Exception as e:
        logger.error(f"데이터 조회 실패: {e}")
        return _error_response("Error fetching data", e)

    return DataListResponse(data=records, count=len(records))


@router.get("/grouped", response_model=GroupedResponse)
async def get_grouped(
    db: SQLiteAdapter = Depends(get_db),
):
    """고정 3단계 그룹핑 (code[:3] → code[:5] → 전체 코드)"""
    service = AccountService(db)

    try:
        grouped = await service.get_grouped()
    except Exception as e:
        logger.error(f"그룹 데이터 조회 실패: {e}")
        return _error_response("Error fetching grouped data", e)

    return GroupedResponse(data=grouped)


@router.get("/tree", response_model=TreeResponse)
async def get_tree(
    db: SQLiteAdapter = Depends(get_db),
    names: AccountNameBook = Depends(get_name_book),
):
    """계층 트리

    누락된 상위 계정은 생성된 노드(synthesized)로 채움.
    """
    service = AccountService(db, names)

    try:
        roots, node_count = await service.get_tree()
    except Exception as e:
        logger.error(f"계층 트리 생성 실패: {e}")
        return _error_response("Error building account tree", e)

    return TreeResponse(data=roots, count=node_count)


@router.get("/debug-totals", response_model=DebugTotalsResponse)
async def get_debug_totals(
    db: SQLiteAdapter = Depends(get_db),
):
    """전체 합계 진단 (양수 차변/대변 합계, 샘플 5건)"""
    service = AccountService(db)

    try:
        return await service.get_debug_totals()
    except Exception as e:
        logger.error(f"합계 진단 실패: {e}")
        return _error_response("Error calculating totals", e)


@router.post("/sync", response_model=SyncResponse)
async def sync_data(
    db: SQLiteAdapter = Depends(get_db),
    source: IRemoteDataSource = Depends(get_remote_source),
):
    """원격 API에서 즉시 동기화"""
    service = AccountSyncService(source, AccountStore(db))

    try:
        processed = await service.sync()
    except Exception as e:
        logger.error(f"수동 동기화 실패: {e}")
        return _error_response(
            "Error synchronizing data from external API",
            e,
            note=SYNC_FAILURE_NOTE,
        )

    return SyncResponse(
        message="Data synchronized successfully from external API",
        records_processed=processed,
    )
