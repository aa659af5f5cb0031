"""
계정 코드 규칙

점(.) 세그먼트 기준 깊이 및 상위 코드 계산.

    100              → depth 1, 상위 없음
    100.01           → depth 2, 상위 100
    100.01.00001001  → depth 3, 상위 100.01

4단계 이상 코드는 상위 규칙이 없으므로 루트로 취급.
"""

from core.constants import AccountCodes


def split_segments(code: str) -> list[str]:
    """계정 코드를 세그먼트로 분리"""
    return code.split(AccountCodes.SEPARATOR)


def account_depth(code: str) -> int:
    """계정 코드 깊이 (세그먼트 수)"""
    return len(split_segments(code))


def parent_code(code: str) -> str | None:
    """상위 계정 코드 반환

    Args:
        code: 계정 코드

    Returns:
        상위 계정 코드 (루트이거나 규칙이 없으면 None)
    """
    parts = split_segments(code)

    if len(parts) < 2 or len(parts) > AccountCodes.MAX_DEPTH:
        return None

    return AccountCodes.SEPARATOR.join(parts[:-1])


def ancestor_codes(code: str) -> list[str]:
    """가까운 상위부터 루트까지 모든 상위 코드"""
    ancestors = []
    current = parent_code(code)

    while current is not None:
        ancestors.append(current)
        current = parent_code(current)

    return ancestors
