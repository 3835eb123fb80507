"""Base URL class"""
import threading
from abc import ABC, abstractmethod

from fake_useragent import UserAgent

_user_agent = None
_user_agent_lock = threading.Lock()


def get_user_agent() -> str:
    """User-Agent 문자열 (UserAgent 데이터는 한 번만 로드)"""
    global _user_agent
    with _user_agent_lock:
        if _user_agent is None:
            _user_agent = UserAgent()
    return _user_agent.random


class URL(ABC):
    default_port = None

    def __init__(self, raw_schema, raw_url):
        self.schema = raw_schema
        self.raw_url = raw_url
        self.host = None
        self.path = "/"
        self.port = None

        self._parse_host_and_path(raw_url)
        if self.port is None:
            self.port = self.default_port

    def __str__(self):
        if self.port == self.default_port:
            return f"{self.schema}://{self.host}{self.path}"
        return f"{self.schema}://{self.host}:{self.port}{self.path}"

    def __repr__(self):
        return f"<{self.__class__.__name__} {self}>"

    def _parse_host_and_path(self, raw):
        # host / path 분리
        if "/" not in raw:
            raw += "/"

        self.host, path = raw.split("/", 1)
        self.path = "/" + path

        # Optional port
        if ":" in self.host:
            self.host, port = self.host.split(":", 1)
            self.port = int(port)

    def origin(self):
        return f"{self.schema}://{self.host}:{self.port}"

    @property
    def user_agent(self):
        return get_user_agent()

    @abstractmethod
    def request(self, timeout=None):
        """GET 요청. (status, headers, body) 반환"""
