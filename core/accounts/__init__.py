"""
계정 계층 모듈

원격 API에서 수집한 평탄한 계정 레코드를 계층 트리로 변환.

사용 예시:
```python
from core.accounts import build_forest, total_debit

roots = build_forest(records)
for root in roots:
    print(root.account_code, total_debit(root))
```
"""

from core.accounts.codes import account_depth, ancestor_codes, parent_code
from core.accounts.grouping import GroupedData, build_grouped
from core.accounts.hierarchy import (
    build_forest,
    find_node,
    iter_nodes,
    net_balance,
    total_credit,
    total_debit,
)
from core.accounts.names import DEFAULT_ACCOUNT_NAMES, AccountNameBook
from core.accounts.types import AccountNode, AccountRecord

__all__ = [
    # 타입
    "AccountRecord",
    "AccountNode",
    "GroupedData",
    # 코드 규칙
    "account_depth",
    "parent_code",
    "ancestor_codes",
    # 트리
    "build_forest",
    "total_debit",
    "total_credit",
    "net_balance",
    "iter_nodes",
    "find_node",
    # 그룹핑
    "build_grouped",
    # 이름표
    "AccountNameBook",
    "DEFAULT_ACCOUNT_NAMES",
]
