"""
로깅 설정

pane_browser 네임스페이스 로거에 콘솔(stdout) 핸들러와 선택적 파일 핸들러를 붙임
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    pane_browser 로거 설정

    Args:
        level: 로그 레벨 (logging.DEBUG, logging.INFO 등)
        log_file: 로그를 함께 저장할 파일 경로 (선택)
    """
    logger = logging.getLogger("pane_browser")
    logger.setLevel(level)

    # 재실행 시 로그가 중복되지 않도록 기존 핸들러 제거
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
