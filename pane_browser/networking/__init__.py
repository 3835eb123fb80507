"""
Networking package

- protocols: URL 기본 클래스
- http_base / http_url / https_url: 소켓 기반 HTTP(S) 클라이언트
- resolver: 문서 제목 -> 렌더링된 HTML (Wikipedia parse API)
- network_thread: 조회 요청을 워커 스레드에서 실행
"""
from .protocols import URL, get_user_agent
from .http_base import HTTPBase
from .http_url import HTTPURL
from .https_url import HTTPSURL
from .url_factory import URLFactory

# Cache manager (not in subpackage as it's commonly used)
from .cache_manager import CacheManager, cache_manager

from .resolver import ContentResolver, ResolvedContent, WikipediaResolver

# Network thread
from .network_thread import (
    NetworkThread,
    NetworkRequest,
    NetworkResponse,
    RequestType,
)

__all__ = [
    # Protocols
    'URL',
    'get_user_agent',
    'HTTPBase',
    'HTTPURL',
    'HTTPSURL',
    'URLFactory',
    # Cache
    'CacheManager',
    'cache_manager',
    # Resolver
    'ContentResolver',
    'ResolvedContent',
    'WikipediaResolver',
    # Network thread
    'NetworkThread',
    'NetworkRequest',
    'NetworkResponse',
    'RequestType',
]
