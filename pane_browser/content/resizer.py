"""
PaneResizer - 포인터 드래그를 페인 폭 변화량으로 변환

드래그 시작 시 포인터 move/up 이벤트를 구독하고, 이동할 때마다
직전 위치 대비 변화량(시작점 대비가 아님)을 on_resize(index, delta)로 전달.
버튼을 놓으면 구독을 해제하고 이후로는 아무것도 보내지 않음.
포인터는 하나라고 가정: 드래그 중에 들어온 새 드래그 시작은 무시
"""
import logging
from typing import Callable, Optional

from .pointer import PointerEvents, PointerSubscription

logger = logging.getLogger(__name__)


class DragGesture:
    """진행 중인 드래그 하나"""

    def __init__(self, resizer: "PaneResizer", index: int, start_x: int):
        self.resizer = resizer
        self.index = index
        self.last_x = start_x
        self.subscription: Optional[PointerSubscription] = None

    @property
    def active(self) -> bool:
        return self.subscription is not None and self.subscription.active

    def on_move(self, x: int, y: int):
        delta = x - self.last_x
        self.last_x = x
        if not delta:
            return
        try:
            self.resizer.on_resize(self.index, delta)
        except Exception:
            # 예외로 빠져나가도 구독은 반드시 해제
            self.resizer._finish(self)
            raise

    def on_up(self, x: int, y: int):
        self.resizer._finish(self)

    def release(self):
        if self.subscription:
            self.subscription.release()


class PaneResizer:
    def __init__(self, pointer: PointerEvents, on_resize: Callable[[int, int], None]):
        self.pointer = pointer
        self.on_resize = on_resize
        self.gesture: Optional[DragGesture] = None

    @property
    def dragging(self) -> bool:
        return self.gesture is not None

    def start_drag(self, index: int, x: int) -> Optional[DragGesture]:
        """index 페인의 리사이즈 핸들에서 드래그 시작"""
        if self.gesture is not None:
            logger.warning("Drag on pane %d ignored: pane %d is already being resized",
                           index, self.gesture.index)
            return None

        gesture = DragGesture(self, index, x)
        gesture.subscription = self.pointer.subscribe(gesture.on_move, gesture.on_up)
        self.gesture = gesture
        logger.debug("Resize drag started on pane %d at x=%d", index, x)
        return gesture

    def _finish(self, gesture: DragGesture):
        gesture.release()
        if self.gesture is gesture:
            self.gesture = None
            logger.debug("Resize drag on pane %d ended", gesture.index)

    def cancel(self):
        """진행 중인 드래그 중단 (구독 해제)"""
        if self.gesture is not None:
            self._finish(self.gesture)

    def close(self):
        self.cancel()
