import gzip
import logging
import socket

from .protocols.base_url import URL
from .cache_manager import cache_manager

logger = logging.getLogger(__name__)


class HTTPBase(URL):
    """HTTP/HTTPS 공통 요청/응답 처리

    워커 스레드 여러 개가 동시에 요청하므로 소켓은 요청마다 새로 열고 닫음
    (Connection: close)
    """

    def _open_socket(self, timeout=None):
        s = socket.socket(
            family=socket.AF_INET,
            type=socket.SOCK_STREAM,
            proto=socket.IPPROTO_TCP,
        )
        s.settimeout(timeout)
        return s

    def _wrap_socket(self, s):
        """HTTPS에서 TLS 래핑"""
        return s

    def request(self, timeout=None):
        url_str = str(self)

        cached = cache_manager.get(url_str)
        if cached:
            logger.debug("Cache hit: %s", url_str)
            return cached

        s = self._open_socket(timeout)
        try:
            s = self._wrap_socket(s)
            s.connect((self.host, self.port))
            self._send_http_request(s)
            status, headers, body = self._read_http_response(s)
        finally:
            s.close()

        cache_manager.set(url_str, status, headers, body)
        return status, headers, body

    def _build_request(self):
        return (
            f"GET {self.path} HTTP/1.1\r\n"
            f"Host: {self.host}\r\n"
            f"User-Agent: {self.user_agent}\r\n"
            f"Connection: close\r\n"
            f"Accept-Encoding: gzip\r\n"
            f"\r\n"
        )

    def _send_http_request(self, s):
        s.sendall(self._build_request().encode("utf-8"))

    def _read_http_response(self, s):
        response = s.makefile("rb")
        try:
            return self._parse_response(response)
        finally:
            response.close()

    @staticmethod
    def _parse_response(response):
        """바이너리 스트림에서 (status, headers, body) 파싱"""
        status_line = response.readline().decode("utf-8")
        status_parts = status_line.split(" ", 2)
        if len(status_parts) < 2:
            raise ValueError(f"Invalid HTTP status line: {repr(status_line)}")
        version, status = status_parts[0], status_parts[1]

        headers = {}
        while True:
            line = response.readline().decode("utf-8")
            if line in ("\r\n", "\n", ""):
                break
            h, v = line.split(":", 1)
            headers[h.casefold()] = v.strip()

        if headers.get("transfer-encoding", "").lower() == "chunked":
            body = b""
            while True:
                chunk_size_line = response.readline().decode("utf-8").strip()
                # chunk extension(;...) 은 무시
                chunk_size = int(chunk_size_line.split(";", 1)[0], 16)
                if chunk_size == 0:
                    response.readline()
                    break
                body += response.read(chunk_size)
                response.readline()
        elif "content-length" in headers:
            body = response.read(int(headers["content-length"]))
        else:
            body = response.read()

        if headers.get("content-encoding", "").lower() == "gzip":
            body = gzip.decompress(body)

        return int(status), headers, body.decode("utf-8", errors="replace")
