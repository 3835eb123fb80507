"""
StylesheetProvider - 창이 열려 있는 동안 쓰는 표시용 테마

창을 열 때 acquire, 닫을 때 release (with 문으로 사용)
"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    text_color: str = "#202122"
    link_color: str = "#3366cc"
    visited_link_color: str = "#795cb2"
    background: str = "white"

    chrome_background: str = "#f3f4f6"
    input_border: str = "#d1d5db"
    button_color: str = "#3b82f6"
    button_text: str = "white"
    error_color: str = "#dc2626"

    title_bar: str = "#f3f4f6"
    pane_border: str = "#e5e7eb"
    focus_outline: str = "#3b82f6"
    resizer_color: str = "#d1d5db"
    placeholder_color: str = "#6b7280"


class StylesheetProvider:
    def __init__(self, theme: Optional[Theme] = None):
        self._template = theme or Theme()
        self.theme: Optional[Theme] = None

    @property
    def active(self) -> bool:
        return self.theme is not None

    def acquire(self) -> Theme:
        if self.theme is None:
            self.theme = self._template
            logger.debug("Stylesheet attached")
        return self.theme

    def release(self):
        if self.theme is not None:
            self.theme = None
            logger.debug("Stylesheet removed")

    def __enter__(self) -> Theme:
        return self.acquire()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False
