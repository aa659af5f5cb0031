"""
스토리지 모듈

계정 레코드 저장소 제공
"""

from core.storage.account_store import AccountStore, StoreError

__all__ = [
    "AccountStore",
    "StoreError",
]
