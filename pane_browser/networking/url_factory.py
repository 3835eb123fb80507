from typing import Union

from .protocols.base_url import URL
from .http_url import HTTPURL
from .https_url import HTTPSURL


class URLFactory:
    SCHEMAS = {
        "http": HTTPURL,
        "https": HTTPSURL,
    }

    @staticmethod
    def parse(url: str) -> URL:
        if "://" not in url:
            raise ValueError(f"Not an absolute URL: {url}")

        schema, rest = url.split("://", 1)
        url_class = URLFactory.SCHEMAS.get(schema.lower())
        if url_class is None:
            raise ValueError(f"Unsupported schema: {schema}")
        return url_class(schema.lower(), rest)

    @staticmethod
    def resolve_str(current_url: Union[URL, str], url: str) -> str:
        """href(상대 경로 포함)를 current_url 기준 절대 URL 문자열로 변환"""
        # 절대 URL은 그대로
        if "://" in url:
            return url

        if isinstance(current_url, str):
            current_url = URLFactory.parse(current_url)

        # 스킴 생략 URL (//host/path)
        if url.startswith("//"):
            return current_url.schema + ":" + url

        # 같은 문서 안의 앵커
        if url.startswith("#"):
            return str(current_url).split("#", 1)[0] + url

        if not url.startswith("/"):
            path = current_url.path.split("#", 1)[0].split("?", 1)[0]
            dir, _ = path.rsplit("/", 1)
            if url.startswith("./"):
                url = url[2:]
            while url.startswith("../"):
                _, url = url.split("/", 1)
                if "/" in dir:
                    dir, _ = dir.rsplit("/", 1)
            url = dir + "/" + url

        # 기본 포트는 생략 (HTTP: 80, HTTPS: 443)
        if current_url.port == current_url.default_port:
            return current_url.schema + "://" + current_url.host + url
        return current_url.schema + "://" + current_url.host + ":" + str(current_url.port) + url
