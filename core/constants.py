"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → ledgersync/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 3001
    CORS_ORIGINS: tuple[str, ...] = ("http://localhost:3000",)

    HTTP_TIMEOUT_SEC: float = 30.0
    SYNC_INTERVAL_SEC: int = 300  # 5분
    SYNC_TICK_SEC: float = 1.0


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    WORKER_LOGS_DIR: Path = LOGS_DIR / "worker"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # DB 파일
    DB_FILE: Path = DATA_DIR / "ledger.db"


class EnvVars:
    """환경 변수 이름 (secrets.yaml 값보다 우선)"""

    TOKEN_URL: str = "API_TOKEN_URL"
    DATA_URL: str = "API_DATA_URL"
    USERNAME: str = "API_USERNAME"
    PASSWORD: str = "API_PASSWORD"
    TIMEOUT: str = "API_TIMEOUT"
    VERIFY_SSL: str = "API_VERIFY_SSL"

    HOST: str = "HOST"
    PORT: str = "PORT"
    CORS_ORIGINS: str = "CORS_ORIGINS"
    CORS_ORIGIN_REGEX: str = "CORS_ORIGIN_REGEX"

    DB_PATH: str = "DB_PATH"

    SYNC_INTERVAL: str = "SYNC_INTERVAL_SECONDS"
    SYNC_ON_STARTUP: str = "SYNC_ON_STARTUP"


class AccountCodes:
    """계정 코드 규칙"""

    SEPARATOR: str = "."
    MAX_DEPTH: int = 3  # 100 / 100.01 / 100.01.00001001

    # 고정 3단계 그룹핑 (문자열 슬라이싱 기준)
    LEVEL1_LENGTH: int = 3
    LEVEL2_LENGTH: int = 5

    PLACEHOLDER_NAME: str = "ANA HESAP"
