"""
원격 데이터 API 어댑터

토큰 인증 기반 계정 데이터 조회 및 응답 정규화.
"""

from adapters.remote.errors import (
    AuthExpiredError,
    RemoteFetchError,
    UnrecognizedResponseShape,
)
from adapters.remote.models import parse_record, parse_records_payload
from adapters.remote.rest_client import RemoteDataClient

__all__ = [
    "RemoteDataClient",
    "RemoteFetchError",
    "AuthExpiredError",
    "UnrecognizedResponseShape",
    "parse_record",
    "parse_records_payload",
]
