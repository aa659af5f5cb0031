"""
원격 데이터 API 에러 정의
"""


class RemoteFetchError(Exception):
    """원격 API 통신 실패 (네트워크/인증/응답 형식)

    Attributes:
        status_code: HTTP 상태 코드 (응답이 있는 경우)
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"{message} (HTTP {self.status_code})"
        return message


class AuthExpiredError(RemoteFetchError):
    """토큰 재발급 후 재시도에도 인증 실패 (401)"""

    def __init__(self, message: str = "Authentication failed after token refresh"):
        super().__init__(message, status_code=401)


class UnrecognizedResponseShape(RemoteFetchError):
    """알려진 응답 형식과 일치하지 않는 응답"""

    pass
