"""
BrowserSession - 페인 브라우저의 최상위 상태와 동작

- 검색/링크 이동 요청을 NetworkThread로 보내고, 완료 응답은
  process_completions()에서 세션 스레드가 적용
- 닫기/리사이즈/포커스는 동기 처리 (조회가 진행 중이어도 가능)
- 모든 상태 변경은 하나의 RLock 안에서 일어남

여러 조회가 동시에 진행되면 각 응답은 "도착한 시점"의 상태에 navigate를 적용함.
즉 나중에 도착한 응답이 최종 상태를 결정 (요청 순서와 다를 수 있음, 취소 없음)
"""
import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple

from ..common.config import BrowserConfig
from ..content import (
    DragGesture,
    LinkVisitTracker,
    NavigationController,
    Pane,
    PaneResizer,
    PointerEvents,
)
from ..networking import (
    ContentResolver,
    NetworkResponse,
    NetworkThread,
    RequestType,
    WikipediaResolver,
)
from ..profiling import MeasureTime, trace_instant

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error fetching Wikipedia content: {title}"


class BrowserSession:
    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        resolver: Optional[ContentResolver] = None,
        network=None,
        pointer: Optional[PointerEvents] = None,
    ):
        self.config = config or BrowserConfig()
        self.resolver = resolver or WikipediaResolver(self.config)

        # network를 넘겨받지 않았으면 세션이 직접 만들고 close()에서 정리
        self._owns_network = network is None
        self.network = network or NetworkThread(self.resolver, self.config.max_workers)

        self.navigation = NavigationController(self.config.min_pane_width)
        self.visited_links = LinkVisitTracker()
        self.pointer = pointer or PointerEvents()
        self.resizer = PaneResizer(self.pointer, self.resize_pane)

        self._lock = threading.RLock()
        self._loading = False
        self.notification: Optional[str] = None

        # request_id -> 검색 여부
        self._requests: Dict[int, bool] = {}
        self._listeners: List[Callable[[], None]] = []

    # === 읽기 전용 상태 ===

    @property
    def panes(self) -> Tuple[Pane, ...]:
        with self._lock:
            return self.navigation.panes

    @property
    def active_index(self) -> Optional[int]:
        with self._lock:
            return self.navigation.active_index

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._loading

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._requests)

    def snapshot(self):
        """(panes, active_index, is_loading) 를 한 번에 읽기"""
        with self._lock:
            return self.navigation.panes, self.navigation.active_index, self._loading

    # === 변경 알림 ===

    def add_listener(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback()

    # === 이동 요청 ===

    def _request(self, title: str, request_type: RequestType, is_search_result: bool) -> int:
        with self._lock:
            # 요청이 접수된 뒤에만 로딩 표시
            request_id = self.network.request(title, request_type)
            self._requests[request_id] = is_search_result
            self._loading = True
        logger.info("Requesting %r (%s, id=%d)", title, request_type.name.lower(), request_id)
        self._notify()
        return request_id

    def open_landing_page(self) -> int:
        """시작 문서 로드 (링크 이동과 같은 규칙, 빈 시퀀스이므로 reset)"""
        return self._request(self.config.landing_page, RequestType.LANDING, False)

    def search(self, term: str) -> Optional[int]:
        """검색: 결과가 오면 페인 시퀀스 전체를 교체. 빈 검색어는 무시"""
        term = term.strip()
        if not term:
            return None
        return self._request(term, RequestType.SEARCH, True)

    def activate_link(self, pane_index: int, href: str, title: str) -> Optional[int]:
        """pane_index 페인 안의 링크 클릭

        href는 방문 기록에 남기고, title로 문서를 조회함.
        응답이 오면 그 시점의 활성 페인 뒤를 잘라내고 새 페인을 붙임
        """
        if not title:
            return None
        with self._lock:
            self.navigation.focus(pane_index)
            self.visited_links.record(href)
        return self._request(title, RequestType.LINK, False)

    def process_completions(self) -> int:
        """도착한 조회 응답 적용 (세션 스레드에서 호출). 적용한 개수 반환"""
        responses = self.network.poll_responses()
        applied = 0
        for response in responses:
            if self._apply(response):
                applied += 1
        if applied:
            self._notify()
        return applied

    def _apply(self, response: NetworkResponse) -> bool:
        with self._lock:
            if response.request_id not in self._requests:
                logger.warning("Ignoring response for unknown request %d", response.request_id)
                return False
            is_search_result = self._requests.pop(response.request_id)

            if response.ok:
                resolved = response.content
                pane = Pane(
                    title=resolved.title,
                    content=resolved.content,
                    is_search_result=is_search_result,
                    width=self.config.default_pane_width,
                )
                with MeasureTime("navigate", "session", {"title": pane.title}):
                    # 인덱스가 바뀌므로 진행 중인 리사이즈 드래그는 끝냄
                    self.resizer.cancel()
                    self.navigation.navigate(pane, is_search_result)
                self.notification = None
                logger.info("Opened %r (pane %d of %d)", pane.title,
                            self.navigation.active_index + 1, len(self.navigation))
            else:
                logger.error("Error fetching Wikipedia content for %r: %s", response.title, response.error)
                self.notification = ERROR_MESSAGE.format(title=response.title)
                trace_instant("resolution_failed", "session", {"title": response.title})

            # 페인 변경과 로딩 해제는 같은 잠금 구간에서
            self._loading = False
        return True

    def dismiss_notification(self):
        with self._lock:
            self.notification = None
        self._notify()

    # === 동기 동작 ===

    def close_pane(self, index: int):
        with self._lock:
            self.resizer.cancel()
            self.navigation.close(index)
        self._notify()

    def resize_pane(self, index: int, delta: int):
        with self._lock:
            self.navigation.resize(index, delta)
        self._notify()

    def focus_pane(self, index: int):
        with self._lock:
            self.navigation.focus(index)
        self._notify()

    def start_resize(self, index: int, x: int) -> Optional[DragGesture]:
        """index 페인 오른쪽 핸들에서 드래그 시작"""
        with self._lock:
            if not 0 <= index < len(self.navigation):
                raise IndexError(f"pane index {index} out of range")
            return self.resizer.start_drag(index, x)

    def is_visited(self, href: str) -> bool:
        with self._lock:
            return self.visited_links.is_visited(href)

    # === 정리 ===

    def close(self):
        self.resizer.close()
        if self._owns_network:
            self.network.stop()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
