"""
PointerEvents - 포인터 입력 소스 (PointerInputSource)

창의 이벤트 루프가 마우스 이동/버튼 해제를 dispatch_* 로 넘겨주면
현재 구독 중인 핸들러들에게 전달함.
드래그 동안만 구독하고, 끝나면 PointerSubscription.release()로 해제
"""
import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

PointerHandler = Callable[[int, int], None]


class PointerSubscription:
    """move/up 핸들러 구독. release()는 여러 번 불러도 안전"""

    def __init__(self, source: "PointerEvents", on_move: PointerHandler, on_up: PointerHandler):
        self.source = source
        self.on_move = on_move
        self.on_up = on_up
        self.active = True

    def release(self):
        if not self.active:
            return
        self.active = False
        self.source._remove(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


class PointerEvents:
    def __init__(self):
        self._subscriptions: List[PointerSubscription] = []
        self._lock = threading.Lock()

    def subscribe(self, on_move: PointerHandler, on_up: PointerHandler) -> PointerSubscription:
        subscription = PointerSubscription(self, on_move, on_up)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: PointerSubscription):
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _snapshot(self) -> List[PointerSubscription]:
        # 핸들러 안에서 release()가 불려도 순회가 깨지지 않도록 복사
        with self._lock:
            return list(self._subscriptions)

    def dispatch_move(self, x: int, y: int):
        for subscription in self._snapshot():
            if subscription.active:
                subscription.on_move(x, y)

    def dispatch_up(self, x: int, y: int):
        for subscription in self._snapshot():
            if subscription.active:
                subscription.on_up(x, y)
