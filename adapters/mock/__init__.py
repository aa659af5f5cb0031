"""
Mock 어댑터

테스트용 Mock 구현체.
"""

from adapters.mock.remote_client import MockRemoteDataClient, MockRemoteState

__all__ = [
    "MockRemoteDataClient",
    "MockRemoteState",
]
