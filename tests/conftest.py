"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest

from core.config.loader import Settings
from core.constants import EnvVars


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
remote:
  token_url: "https://fm.example.com/sessions"
  data_url: "https://fm.example.com/layouts/Hesaplar/script/Liste"
  username: "muhasebe"
  password: "gizli"
  timeout: 15
  verify_ssl: false

web:
  host: "0.0.0.0"
  port: 8080
  cors_origins:
    - "http://localhost:3000"
    - "https://muhasebe.example.com"

database:
  path: "data/test_ledger.db"

sync:
  interval_seconds: 60
  on_startup: false

account_names:
  "102.01": "VADESİZ MEVDUAT"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Settings 싱글턴 초기화 (테스트 전후, 설정 환경 변수 제거)"""
    for name, value in vars(EnvVars).items():
        if not name.startswith("_"):
            monkeypatch.delenv(value, raising=False)

    Settings.reset()
    yield
    Settings.reset()
