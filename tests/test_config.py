import logging

import pytest

from pane_browser.common.config import BrowserConfig
from pane_browser.logging_config import setup_logging


def test_defaults_without_environment():
    config = BrowserConfig.from_env({})
    assert config == BrowserConfig()
    assert config.landing_page == "Main Page"
    assert config.default_pane_width == 720
    assert config.min_pane_width == 200


def test_environment_overrides():
    config = BrowserConfig.from_env({
        "PANE_BROWSER_API_URL": "http://localhost:8080/w/api.php",
        "PANE_BROWSER_LANDING_PAGE": "Cat",
        "PANE_BROWSER_WORKERS": "0",
        "PANE_BROWSER_TIMEOUT": "2.5",
        "PANE_BROWSER_LOG_LEVEL": "debug",
        "PANE_BROWSER_TRACE_FILE": "trace.json",
    })
    assert config.api_url == "http://localhost:8080/w/api.php"
    assert config.landing_page == "Cat"
    assert config.max_workers == 1
    assert config.timeout == 2.5
    assert config.log_level == logging.DEBUG
    assert config.trace_file == "trace.json"
    assert config.log_file is None


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError):
        BrowserConfig.from_env({"PANE_BROWSER_LOG_LEVEL": "chatty"})


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "browser.log"
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "pane_browser"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("pane_browser.core.session").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
