"""
Poller 모듈

원격 API를 주기적으로 폴링하여 계정 데이터를 동기화.
"""

from worker.poller.base import BasePoller
from worker.poller.account_poller import AccountSyncPoller

__all__ = [
    "BasePoller",
    "AccountSyncPoller",
]
