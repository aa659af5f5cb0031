"""
로깅 설정 유틸리티

Web과 Worker 공통 로깅 설정.
- 콘솔: stdout
- 파일: logs/<process>/<process>.log (자정마다 롤링, 7일 보관)

사용법:
    from core.logging import setup_logging
    setup_logging("web")
    setup_logging("worker", console_level=logging.DEBUG)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# 요청/쿼리마다 로그를 남기는 라이브러리 (WARNING 이상만)
NOISY_LOGGERS: tuple[str, ...] = (
    "aiosqlite",
    "httpcore",
    "httpx",
    "asyncio",
    "uvicorn.access",
)

_LOG_DIRS: dict[str, Path] = {
    "web": Paths.WEB_LOGS_DIR,
    "worker": Paths.WORKER_LOGS_DIR,
}


def get_log_file_path(process_name: str, log_dir: Path | None = None) -> Path:
    """로그 파일 경로

    Args:
        process_name: "web" 또는 "worker" (그 외는 logs/ 바로 아래)
        log_dir: 로그 디렉토리 직접 지정 (테스트용)
    """
    if log_dir is None:
        log_dir = _LOG_DIRS.get(process_name, Paths.LOGS_DIR)
    return log_dir / f"{process_name}.log"


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"  # 백업 파일: worker.log.2026-10-19
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 설정

    기존 핸들러를 교체하므로 여러 번 호출해도 핸들러가 중복되지 않음.

    Args:
        process_name: 프로세스 이름 ("web" 또는 "worker")
        console_level: 콘솔 로그 레벨
        file_level: 파일 로그 레벨
        log_dir: 로그 디렉토리 직접 지정 (None이면 프로세스별 기본 경로)

    Returns:
        설정된 루트 Logger
    """
    log_file = get_log_file_path(process_name, log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(console_level, file_level))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(_console_handler(console_level, formatter))
    root_logger.addHandler(_file_handler(log_file, file_level, formatter))

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화 완료: {process_name}",
        extra={"log_file": str(log_file)},
    )

    return root_logger
