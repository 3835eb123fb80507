"""
NetworkThread - 문서 조회 요청을 워커 스레드에서 처리

세션 스레드(SDL 루프)가 막히지 않도록 ContentResolver 호출은 ThreadPoolExecutor에서 실행.
완료 응답은 response_queue(poll_responses) 또는 callback으로 전달.
callback은 워커 스레드에서 불리므로 세션 상태를 직접 바꾸면 안 됨
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum, auto
from queue import Empty, Queue
from typing import Callable, Dict, List, Optional

from ..errors import BrowserError, ResolutionFailure
from ..profiling import MeasureTime, set_thread_name
from .resolver import ContentResolver, ResolvedContent

logger = logging.getLogger(__name__)


class RequestType(Enum):
    """요청 종류"""
    SEARCH = auto()     # 검색창에서 직접 입력
    LINK = auto()       # 페인 안 링크 클릭
    LANDING = auto()    # 시작 문서


@dataclass
class NetworkRequest:
    request_id: int
    title: str
    request_type: RequestType
    callback: Optional[Callable[["NetworkResponse"], None]] = None


@dataclass
class NetworkResponse:
    request_id: int
    request_type: RequestType
    title: str
    content: Optional[ResolvedContent] = None
    error: Optional[BrowserError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class NetworkThread:
    """
    문서 조회 스레드 풀

    - 요청마다 request_id 발급
    - 완료 응답은 callback이 있으면 callback으로, 없으면 response_queue로 전달
    - 취소는 지원하지 않음: 한 번 보낸 요청은 끝까지 실행됨
    """

    def __init__(self, resolver: ContentResolver, max_workers: int = 4):
        self.resolver = resolver
        self.max_workers = max_workers
        self.executor: Optional[ThreadPoolExecutor] = None
        self.response_queue: Queue[NetworkResponse] = Queue()

        self._request_id_counter = 0
        self._lock = threading.Lock()

        # 진행 중인 요청 추적
        self.pending_requests: Dict[int, NetworkRequest] = {}

    @property
    def running(self) -> bool:
        return self.executor is not None

    def start(self):
        if self.executor is None:
            self.executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="NetworkWorker",
            )

    def stop(self):
        if self.executor is not None:
            self.executor.shutdown(wait=False)
            self.executor = None

    def _get_next_request_id(self) -> int:
        with self._lock:
            self._request_id_counter += 1
            return self._request_id_counter

    def _do_request(self, request: NetworkRequest):
        """실제 조회 수행 (워커 스레드)"""
        set_thread_name(threading.current_thread().name)
        with MeasureTime(f"network_{request.request_type.name}", "network"):
            try:
                content = self.resolver.resolve(request.title)
                response = NetworkResponse(
                    request_id=request.request_id,
                    request_type=request.request_type,
                    title=request.title,
                    content=content,
                )
            except BrowserError as e:
                logger.warning("Resolving %r failed: %s", request.title, e)
                response = NetworkResponse(
                    request_id=request.request_id,
                    request_type=request.request_type,
                    title=request.title,
                    error=e,
                )
            except Exception as e:
                logger.exception("Unexpected error while resolving %r", request.title)
                response = NetworkResponse(
                    request_id=request.request_id,
                    request_type=request.request_type,
                    title=request.title,
                    error=ResolutionFailure(request.title, str(e)),
                )

        with self._lock:
            self.pending_requests.pop(request.request_id, None)
        # callback이 없으면 poll_responses()로 가져가도록 큐에 적재
        if request.callback:
            request.callback(response)
        else:
            self.response_queue.put(response)

    def request(
        self,
        title: str,
        request_type: RequestType = RequestType.LINK,
        callback: Optional[Callable[[NetworkResponse], None]] = None,
    ) -> int:
        """비동기 조회 요청. request_id 반환"""
        if self.executor is None:
            self.start()

        request = NetworkRequest(
            request_id=self._get_next_request_id(),
            title=title,
            request_type=request_type,
            callback=callback,
        )
        with self._lock:
            self.pending_requests[request.request_id] = request
        self.executor.submit(self._do_request, request)
        return request.request_id

    def request_sync(self, title: str, request_type: RequestType = RequestType.LINK) -> NetworkResponse:
        """동기 조회 (블로킹)"""
        event = threading.Event()
        result: List[NetworkResponse] = []

        def on_complete(response: NetworkResponse):
            result.append(response)
            event.set()

        self.request(title, request_type, callback=on_complete)
        event.wait()
        return result[0]

    def get_pending_count(self) -> int:
        with self._lock:
            return len(self.pending_requests)

    def poll_responses(self) -> List[NetworkResponse]:
        """완료된 응답들 (non-blocking)"""
        responses = []
        while True:
            try:
                responses.append(self.response_queue.get_nowait())
            except Empty:
                break
        return responses
