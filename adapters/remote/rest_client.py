"""
원격 데이터 API 클라이언트

FileMaker Data API 호환 REST 클라이언트.
Basic 인증으로 세션 토큰 발급 후 Bearer 토큰으로 데이터 조회.

401 응답 시 토큰을 재발급하고 정확히 1회만 재시도.
재시도도 401이면 AuthExpiredError.
"""

import logging
from typing import Any

import httpx

from adapters.remote.errors import AuthExpiredError, RemoteFetchError
from adapters.remote.models import parse_records_payload, parse_token
from core.accounts.types import AccountRecord
from core.config.loader import RemoteApiConfig

logger = logging.getLogger(__name__)


class RemoteDataClient:
    """원격 데이터 API 클라이언트

    IRemoteDataSource Protocol 구현.

    Args:
        config: 원격 API 설정 (URL, 인증 정보, 타임아웃)

    사용 예시:
    ```python
    async with RemoteDataClient(settings.remote) as client:
        records = await client.fetch_records()
    ```
    """

    def __init__(self, config: RemoteApiConfig):
        self.config = config
        self._token: str | None = None
        self._client: httpx.AsyncClient | None = None

        logger.info(
            "원격 API 클라이언트 초기화",
            extra={
                "token_url": config.token_url,
                "data_url": config.data_url,
                "username": config.username,
            },
        )

    @property
    def has_token(self) -> bool:
        return self._token is not None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def invalidate_token(self) -> None:
        """캐시된 토큰 폐기"""
        self._token = None

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """요청 전송 (전송 계층 오류 → RemoteFetchError)"""
        client = await self._get_client()

        try:
            return await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"원격 API 타임아웃: {url}")
            raise RemoteFetchError(f"Request timed out: {url}") from e
        except httpx.RequestError as e:
            logger.error(f"원격 API 요청 실패: {e}")
            raise RemoteFetchError(f"Request failed: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteFetchError(
                "Response is not valid JSON",
                status_code=response.status_code,
            ) from e

    async def get_token(self) -> str:
        """세션 토큰 발급

        Returns:
            토큰 문자열

        Raises:
            RemoteFetchError: URL 미설정, HTTP 에러, 토큰 없음
        """
        if not self.config.token_url:
            raise RemoteFetchError("API_TOKEN_URL is not configured")

        logger.info("API 토큰 요청")
        response = await self._send(
            "POST",
            self.config.token_url,
            json={},
            headers={"Content-Type": "application/json"},
            auth=(self.config.username, self.config.password),
        )

        if response.status_code >= 400:
            raise RemoteFetchError("Token request failed", status_code=response.status_code)

        token = parse_token(self._json(response))
        if token is None:
            raise RemoteFetchError("Token not found in response")

        self._token = token
        logger.info("API 토큰 발급 완료")
        return token

    async def _get_data(self) -> httpx.Response:
        if self._token is None:
            await self.get_token()

        return await self._send(
            "GET",
            self.config.data_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._token}",
            },
        )

    async def fetch_records(self) -> list[AccountRecord]:
        """계정 레코드 조회

        Returns:
            AccountRecord 목록

        Raises:
            AuthExpiredError: 토큰 재발급 후에도 401
            UnrecognizedResponseShape: 알 수 없는 응답 형식
            RemoteFetchError: 그 외 통신 실패
        """
        if not self.config.data_url:
            raise RemoteFetchError("API_DATA_URL is not configured")

        logger.info("원격 API 데이터 조회")
        response = await self._get_data()

        if response.status_code == 401:
            logger.info("토큰 만료, 재발급 후 1회 재시도")
            self.invalidate_token()
            response = await self._get_data()

            if response.status_code == 401:
                self.invalidate_token()
                raise AuthExpiredError()

        if response.status_code >= 400:
            raise RemoteFetchError("Data request failed", status_code=response.status_code)

        records = parse_records_payload(self._json(response))
        logger.info(f"원격 API 데이터 {len(records)}건 조회 완료")
        return records

    async def __aenter__(self) -> "RemoteDataClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
