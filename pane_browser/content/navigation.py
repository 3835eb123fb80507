"""
NavigationController - 페인 시퀀스와 활성 페인 커서 관리

상태는 (panes, active_index) 한 쌍뿐:
- panes가 비어 있으면 active_index는 None
- 비어 있지 않으면 0 <= active_index < len(panes)

모든 연산은 유효한 상태에서 유효한 상태로 가는 전체 함수.
현재 시퀀스 밖의 인덱스는 호출자 계약 위반이므로 IndexError (상태는 그대로)
"""
import logging
from typing import List, Optional, Tuple

from ..common.constants import MIN_PANE_WIDTH
from .pane import Pane

logger = logging.getLogger(__name__)


class NavigationController:
    def __init__(self, min_width: int = MIN_PANE_WIDTH):
        self._panes: List[Pane] = []
        self._active_index: Optional[int] = None
        self.min_width = min_width

    @property
    def panes(self) -> Tuple[Pane, ...]:
        """현재 시퀀스의 스냅샷"""
        return tuple(self._panes)

    @property
    def active_index(self) -> Optional[int]:
        return self._active_index

    @property
    def active_pane(self) -> Optional[Pane]:
        if self._active_index is None:
            return None
        return self._panes[self._active_index]

    def __len__(self):
        return len(self._panes)

    def _check_index(self, index: int):
        # 음수 인덱스도 계약 위반으로 취급
        if not 0 <= index < len(self._panes):
            raise IndexError(f"pane index {index} out of range (0..{len(self._panes) - 1})")

    def navigate(self, pane: Pane, is_search_result: bool):
        """새 페인으로 이동

        - 시퀀스가 비었거나 검색이면: [pane] 으로 교체 (reset)
        - 링크 클릭이면: [0, active] 까지만 남기고 pane 추가 (branch truncation)
        """
        if not self._panes or is_search_result:
            self._panes = [pane]
            self._active_index = 0
            logger.debug("navigate(reset): %s", pane.title)
            return

        keep = self._active_index + 1
        dropped = len(self._panes) - keep
        self._panes = self._panes[:keep] + [pane]
        self._active_index = keep
        logger.debug("navigate(branch): %s at %d, dropped %d", pane.title, keep, dropped)

    def close(self, index: int):
        """index 위치 페인 제거 후 활성 커서 재계산"""
        self._check_index(index)
        del self._panes[index]

        if not self._panes:
            self._active_index = None
        elif self._active_index > index:
            self._active_index -= 1
        elif self._active_index == index:
            # 닫힌 페인의 왼쪽 이웃으로 (없으면 0)
            self._active_index = max(0, index - 1)

    def resize(self, index: int, delta: int):
        """index 페인 폭을 delta만큼, 오른쪽 이웃은 -delta만큼 조정

        두 페인 모두 min_width 아래로 내려가지 않도록 각자 클램프.
        이웃은 클램프와 무관하게 항상 -delta 전체를 받음
        """
        self._check_index(index)
        pane = self._panes[index]
        self._panes[index] = pane.with_width(max(self.min_width, pane.width + delta))

        if index + 1 < len(self._panes):
            neighbor = self._panes[index + 1]
            self._panes[index + 1] = neighbor.with_width(max(self.min_width, neighbor.width - delta))

    def focus(self, index: int):
        self._check_index(index)
        self._active_index = index
