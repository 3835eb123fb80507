"""Pane - 가로 스트립에 열려 있는 문서 하나"""
from dataclasses import dataclass, replace

from ..common.constants import DEFAULT_PANE_WIDTH


@dataclass(frozen=True)
class Pane:
    """열린 문서 뷰

    content는 생성 후 바뀌지 않음. 폭 변경은 with_width()로 새 Pane을 만듦
    """

    title: str
    content: str
    is_search_result: bool = False
    width: int = DEFAULT_PANE_WIDTH

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Pane width must be positive: {self.width}")

    def with_width(self, width: int) -> "Pane":
        return replace(self, width=width)
