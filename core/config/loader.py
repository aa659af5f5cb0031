"""
설정 로더

secrets.yaml (선택) 로드 후 환경 변수로 덮어써서 설정 생성.
우선순위: 환경 변수 > secrets.yaml > 기본값
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from core.constants import Defaults, EnvVars, Paths, PROJECT_ROOT


@dataclass(frozen=True)
class RemoteApiConfig:
    """원격 데이터 API 연결 설정

    토큰 발급 URL, 데이터 조회 URL, 인증 정보 포함
    """

    token_url: str
    data_url: str
    username: str
    password: str
    timeout: float = Defaults.HTTP_TIMEOUT_SEC
    verify_ssl: bool = True

    @property
    def is_configured(self) -> bool:
        """URL이 모두 설정되었는지 여부"""
        return bool(self.token_url and self.data_url)


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str = Defaults.WEB_HOST
    port: int = Defaults.WEB_PORT
    cors_origins: tuple[str, ...] = Defaults.CORS_ORIGINS
    cors_origin_regex: str | None = None


@dataclass(frozen=True)
class SyncConfig:
    """동기화 주기 설정"""

    interval_seconds: int = Defaults.SYNC_INTERVAL_SEC
    on_startup: bool = True


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정

    불변 데이터 구조로 설정 변경 방지
    """

    remote: RemoteApiConfig
    web: WebConfig
    sync: SyncConfig
    db_path: Path
    account_names: Mapping[str, str] = field(default_factory=dict)


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _read_yaml(path: Path) -> dict[str, Any]:
    """secrets.yaml 읽기 (없으면 빈 dict)"""
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    return data


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigLoadError(f"secrets.yaml의 '{name}' 섹션은 매핑이어야 합니다")
    return value


def _pick(env: Mapping[str, str], env_key: str, section: Mapping[str, Any], key: str, default: Any) -> Any:
    """환경 변수 > YAML > 기본값 순으로 선택"""
    if env.get(env_key) not in (None, ""):
        return env[env_key]
    if section.get(key) is not None:
        return section[key]
    return default


def parse_bool(value: Any, name: str) -> bool:
    """bool 설정값 변환

    Raises:
        ConfigLoadError: 변환 불가능한 값
    """
    if isinstance(value, bool):
        return value

    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False

    raise ConfigLoadError(f"'{name}' 값이 bool이 아닙니다: {value!r}")


def _parse_number(value: Any, name: str, kind: type) -> Any:
    try:
        number = kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"'{name}' 값이 숫자가 아닙니다: {value!r}") from e

    if number <= 0:
        raise ConfigLoadError(f"'{name}' 값은 0보다 커야 합니다: {value!r}")

    return number


def _parse_origins(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    return tuple(item.strip() for item in items if str(item).strip())


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """설정 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용, 파일이 없어도 됨)
        environ: 환경 변수 (None이면 os.environ)

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigLoadError: YAML 형식 오류 또는 잘못된 값
    """
    if path is None:
        path = Paths.SECRETS_FILE
    if environ is None:
        environ = os.environ

    data = _read_yaml(path)
    remote = _section(data, "remote")
    web = _section(data, "web")
    database = _section(data, "database")
    sync = _section(data, "sync")

    remote_config = RemoteApiConfig(
        token_url=str(_pick(environ, EnvVars.TOKEN_URL, remote, "token_url", "")),
        data_url=str(_pick(environ, EnvVars.DATA_URL, remote, "data_url", "")),
        username=str(_pick(environ, EnvVars.USERNAME, remote, "username", "")),
        password=str(_pick(environ, EnvVars.PASSWORD, remote, "password", "")),
        timeout=_parse_number(
            _pick(environ, EnvVars.TIMEOUT, remote, "timeout", Defaults.HTTP_TIMEOUT_SEC),
            "timeout",
            float,
        ),
        verify_ssl=parse_bool(
            _pick(environ, EnvVars.VERIFY_SSL, remote, "verify_ssl", True),
            "verify_ssl",
        ),
    )

    regex = _pick(environ, EnvVars.CORS_ORIGIN_REGEX, web, "cors_origin_regex", None)
    web_config = WebConfig(
        host=str(_pick(environ, EnvVars.HOST, web, "host", Defaults.WEB_HOST)),
        port=_parse_number(
            _pick(environ, EnvVars.PORT, web, "port", Defaults.WEB_PORT),
            "port",
            int,
        ),
        cors_origins=_parse_origins(
            _pick(environ, EnvVars.CORS_ORIGINS, web, "cors_origins", Defaults.CORS_ORIGINS)
        ),
        cors_origin_regex=str(regex) if regex else None,
    )

    sync_config = SyncConfig(
        interval_seconds=_parse_number(
            _pick(environ, EnvVars.SYNC_INTERVAL, sync, "interval_seconds", Defaults.SYNC_INTERVAL_SEC),
            "interval_seconds",
            int,
        ),
        on_startup=parse_bool(
            _pick(environ, EnvVars.SYNC_ON_STARTUP, sync, "on_startup", True),
            "on_startup",
        ),
    )

    db_path = Path(_pick(environ, EnvVars.DB_PATH, database, "path", Paths.DB_FILE))
    if not db_path.is_absolute():
        db_path = PROJECT_ROOT / db_path

    names = data.get("account_names") or {}
    if not isinstance(names, dict):
        raise ConfigLoadError("secrets.yaml의 'account_names'는 매핑이어야 합니다")

    return AppConfig(
        remote=remote_config,
        web=web_config,
        sync=sync_config,
        db_path=db_path,
        account_names={str(k): str(v) for k, v in names.items()},
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml + 환경 변수를 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(secrets_path)

    @property
    def config(self) -> AppConfig:
        assert self._config is not None
        return self._config

    @property
    def remote(self) -> RemoteApiConfig:
        """원격 API 설정"""
        return self.config.remote

    @property
    def web(self) -> WebConfig:
        """Web 서버 설정"""
        return self.config.web

    @property
    def sync(self) -> SyncConfig:
        """동기화 설정"""
        return self.config.sync

    @property
    def db_path(self) -> Path:
        """DB 경로"""
        return self.config.db_path

    @property
    def account_names(self) -> Mapping[str, str]:
        """추가 계정명 (기본 이름표 덮어쓰기용)"""
        return self.config.account_names

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
