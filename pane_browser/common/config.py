"""
BrowserConfig - 실행 설정

기본값은 constants 모듈에서 가져오고, PANE_BROWSER_* 환경변수로 덮어쓸 수 있음

    PANE_BROWSER_API_URL       위키 parse API 주소
    PANE_BROWSER_LANDING_PAGE  시작 문서 제목
    PANE_BROWSER_WORKERS       네트워크 워커 수
    PANE_BROWSER_TIMEOUT       요청 타임아웃 (초)
    PANE_BROWSER_LOG_LEVEL     로그 레벨 (DEBUG, INFO, ...)
    PANE_BROWSER_LOG_FILE      로그 파일 경로
    PANE_BROWSER_TRACE_FILE    chrome://tracing 용 트레이스 파일 경로
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_PANE_WIDTH,
    HEIGHT,
    LANDING_PAGE,
    MIN_PANE_WIDTH,
    WIDTH,
    WIKI_API_URL,
    WIKI_ARTICLE_URL,
)

ENV_PREFIX = "PANE_BROWSER_"


@dataclass
class BrowserConfig:
    api_url: str = WIKI_API_URL
    article_url: str = WIKI_ARTICLE_URL
    landing_page: str = LANDING_PAGE

    width: int = WIDTH
    height: int = HEIGHT
    default_pane_width: int = DEFAULT_PANE_WIDTH
    min_pane_width: int = MIN_PANE_WIDTH

    max_workers: int = 4
    timeout: float = 10.0

    log_level: int = logging.INFO
    log_file: Optional[str] = None
    trace_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BrowserConfig":
        """환경변수에서 설정 읽기 (없는 값은 기본값 유지)"""
        if environ is None:
            environ = os.environ

        def get(name):
            value = environ.get(ENV_PREFIX + name)
            return value if value else None

        config = cls()
        if get("API_URL"):
            config.api_url = get("API_URL")
        if get("LANDING_PAGE"):
            config.landing_page = get("LANDING_PAGE")
        if get("WORKERS"):
            config.max_workers = max(1, int(get("WORKERS")))
        if get("TIMEOUT"):
            config.timeout = float(get("TIMEOUT"))
        if get("LOG_LEVEL"):
            level = logging.getLevelName(get("LOG_LEVEL").upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {get('LOG_LEVEL')}")
            config.log_level = level
        config.log_file = get("LOG_FILE")
        config.trace_file = get("TRACE_FILE")
        return config
