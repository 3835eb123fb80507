"""
ContentResolver - 문서 제목을 (정식 제목, 렌더링된 HTML) 로 변환

WikipediaResolver는 MediaWiki parse API를 사용:

    GET /w/api.php?action=parse&format=json&page=<title>&prop=text&formatversion=2

응답의 parse.title / parse.text 를 사용하고, parse가 없거나(error 응답)
HTTP/소켓/JSON 오류가 나면 ResolutionFailure를 던짐
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote, urlencode

from ..common.config import BrowserConfig
from ..errors import ResolutionFailure
from ..profiling import MeasureTime
from .url_factory import URLFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedContent:
    title: str
    content: str


class ContentResolver(Protocol):
    def resolve(self, title: str) -> ResolvedContent:
        ...


class WikipediaResolver:
    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()

    def api_url(self, title: str) -> str:
        query = urlencode({
            "action": "parse",
            "format": "json",
            "page": title,
            "prop": "text",
            "formatversion": "2",
        })
        return f"{self.config.api_url}?{query}"

    def article_url(self, title: str) -> str:
        """문서 제목에 대응하는 위키 문서 주소 (페인 안 상대 링크의 기준)"""
        return self.config.article_url + quote(title.replace(" ", "_"))

    def resolve(self, title: str) -> ResolvedContent:
        with MeasureTime("resolve", "network", {"title": title}):
            url = URLFactory.parse(self.api_url(title))
            try:
                status, headers, body = url.request(timeout=self.config.timeout)
            except (OSError, ValueError) as e:
                raise ResolutionFailure(title, f"request failed: {e}") from e

            if not 200 <= status < 300:
                raise ResolutionFailure(title, f"HTTP {status}")

            return self.parse_response(title, body)

    @staticmethod
    def parse_response(title: str, body: str) -> ResolvedContent:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ResolutionFailure(title, f"malformed response: {e}") from e

        parsed = data.get("parse") if isinstance(data, dict) else None
        if not parsed:
            error = data.get("error", {}) if isinstance(data, dict) else {}
            reason = error.get("info") or error.get("code") or "no parse result"
            raise ResolutionFailure(title, reason)

        text = parsed.get("text")
        # formatversion=1 응답은 {"text": {"*": "..."}}
        if isinstance(text, dict):
            text = text.get("*")
        if not isinstance(text, str):
            raise ResolutionFailure(title, "response has no text")

        return ResolvedContent(parsed.get("title") or title, text)
