import threading
import time


class CacheManager:
    """Cache-Control: max-age 를 따르는 GET 응답 캐시"""

    def __init__(self):
        self._cache = {}
        self._lock = threading.Lock()

    def get(self, url_str):
        with self._lock:
            if url_str not in self._cache:
                return None

            status, headers, body, expires_at = self._cache[url_str]

            # 만료 체크
            if time.time() >= expires_at:
                del self._cache[url_str]
                return None

            return status, headers, body

    def set(self, url_str, status, headers, body):
        if status != 200:
            return

        cache_control = headers.get("cache-control", "").lower()

        # no-store, private 는 저장 안 함
        if "no-store" in cache_control or "private" in cache_control:
            return

        max_age = None
        for directive in cache_control.split(","):
            directive = directive.strip()
            if directive.startswith("max-age="):
                try:
                    max_age = int(directive.split("=", 1)[1])
                except ValueError:
                    return
                break

        if not max_age or max_age <= 0:
            return

        now = time.time()
        with self._lock:
            self._purge_expired(now)
            self._cache[url_str] = (status, headers, body, now + max_age)

    def _purge_expired(self, now):
        # 다시 조회되지 않는 만료 항목이 쌓이지 않도록 저장할 때 정리
        for key in [k for k, entry in self._cache.items() if now >= entry[3]]:
            del self._cache[key]

    def clear(self):
        with self._lock:
            self._cache.clear()

    def __len__(self):
        return len(self._cache)


# 전역 캐시 매니저
cache_manager = CacheManager()
