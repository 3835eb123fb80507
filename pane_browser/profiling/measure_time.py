"""
Chrome Tracing Format 프로파일러

기본은 꺼져 있음. 트레이스 파일을 지정하면 수집 시작:

    Tracer.get().start("trace.json")

    with MeasureTime("navigate", "session"):
        ...

    @MeasureTime.trace("layout")
    def do_layout():
        pass

    Tracer.get().finish()   # JSON 저장, chrome://tracing 에서 열기
"""
import json
import logging
import threading
import time
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Tracer:
    """싱글톤 트레이서 - 모든 스레드의 이벤트를 수집"""

    _instance: Optional["Tracer"] = None
    _lock = threading.Lock()

    def __init__(self):
        self.events: List[Dict[str, Any]] = []
        self.lock = threading.Lock()
        self.enabled = False
        self.start_time = time.perf_counter()
        self.output_file: Optional[str] = None
        self.thread_names: Dict[int, str] = {}
        self.process_name = "PaneBrowser"
        self.process_id = 1

    @classmethod
    def get(cls) -> "Tracer":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = Tracer()
        return cls._instance

    def start(self, output_file: str):
        """수집 시작"""
        with self.lock:
            self.events.clear()
            self.output_file = output_file
            self.start_time = time.perf_counter()
            self.enabled = True
        logger.info("Tracing to %s", output_file)

    def set_thread_name(self, name: str, thread_id: Optional[int] = None):
        if thread_id is None:
            thread_id = threading.get_ident()
        self.thread_names[thread_id] = name

    def get_timestamp(self) -> float:
        """시작 시점 기준 마이크로초"""
        return (time.perf_counter() - self.start_time) * 1_000_000

    def _add(self, name: str, category: str, phase: str, args: Optional[Dict] = None, **extra):
        if not self.enabled:
            return
        event = {
            "name": name,
            "cat": category,
            "ph": phase,  # 'B' = begin, 'E' = end, 'i' = instant
            "ts": self.get_timestamp(),
            "tid": threading.get_ident(),
            "pid": self.process_id,
        }
        if args:
            event["args"] = args
        event.update(extra)
        with self.lock:
            self.events.append(event)

    def begin(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self._add(name, category, "B", args)

    def end(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self._add(name, category, "E", args)

    def instant(self, name: str, category: str = "instant", scope: str = "t", args: Optional[Dict] = None):
        """scope: 't' = thread, 'p' = process, 'g' = global"""
        self._add(name, category, "i", args, s=scope)

    def _metadata_events(self) -> List[Dict]:
        metadata = [{
            "name": "process_name",
            "ph": "M",
            "pid": self.process_id,
            "args": {"name": self.process_name},
        }]
        for tid, name in self.thread_names.items():
            metadata.append({
                "name": "thread_name",
                "ph": "M",
                "pid": self.process_id,
                "tid": tid,
                "args": {"name": name},
            })
        return metadata

    def finish(self):
        """수집 종료 및 JSON 파일 저장"""
        if not self.enabled:
            return
        self.enabled = False

        with self.lock:
            trace_data = {
                "traceEvents": self._metadata_events() + list(self.events),
                "displayTimeUnit": "ms",
            }
            with open(self.output_file, "w") as f:
                json.dump(trace_data, f)

        logger.info("Trace saved to %s (open it in chrome://tracing)", self.output_file)


class MeasureTime:
    """시간 측정 컨텍스트 매니저 / 데코레이터"""

    def __init__(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.name = name
        self.category = category
        self.args = args
        self.tracer = Tracer.get()

    def __enter__(self):
        self.tracer.begin(self.name, self.category, self.args)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracer.end(self.name, self.category)
        return False

    @staticmethod
    def trace(name: str, category: str = "function") -> Callable:
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                with MeasureTime(name, category):
                    return func(*args, **kwargs)
            return wrapper
        return decorator


def trace_instant(name: str, category: str = "instant", args: Optional[Dict] = None):
    Tracer.get().instant(name, category, args=args)


def set_thread_name(name: str):
    """현재 스레드 이름 설정 (트레이스에 표시됨)"""
    Tracer.get().set_thread_name(name)
