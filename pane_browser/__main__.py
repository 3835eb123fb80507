"""Command-line interface."""
import sys

from .common.config import BrowserConfig
from .logging_config import setup_logging
from .profiling import Tracer


def main(argv=None):
    """python -m pane_browser [문서 제목]

    제목을 주면 그 문서를 검색하고, 없으면 시작 문서(Main Page)를 띄움
    """
    argv = sys.argv[1:] if argv is None else argv

    config = BrowserConfig.from_env()
    setup_logging(config.log_level, config.log_file)
    if config.trace_file:
        Tracer.get().start(config.trace_file)

    # SDL/Skia 는 창을 띄울 때만 로드
    from .core.browser import Browser

    browser = Browser(config)
    if argv:
        browser.session.search(" ".join(argv))
    else:
        browser.session.open_landing_page()
    browser.run()


if __name__ == "__main__":
    main()
