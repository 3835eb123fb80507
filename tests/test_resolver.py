import json
from urllib.parse import parse_qs, urlparse

import pytest

from pane_browser.common.config import BrowserConfig
from pane_browser.errors import ResolutionFailure
from pane_browser.networking import URLFactory, WikipediaResolver


class StubURL:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.timeouts = []

    def request(self, timeout=None):
        self.timeouts.append(timeout)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def resolver():
    return WikipediaResolver(BrowserConfig(timeout=3.0))


def stub_parse(monkeypatch, stub):
    requested = []

    def parse(url):
        requested.append(url)
        return stub

    monkeypatch.setattr(URLFactory, "parse", staticmethod(parse))
    return requested


def test_api_url_queries_parse_endpoint(resolver):
    url = urlparse(resolver.api_url("Albert Einstein"))
    assert url.netloc == "en.wikipedia.org"
    assert url.path == "/w/api.php"
    assert parse_qs(url.query) == {
        "action": ["parse"],
        "format": ["json"],
        "page": ["Albert Einstein"],
        "prop": ["text"],
        "formatversion": ["2"],
    }


def test_article_url_uses_underscores(resolver):
    assert resolver.article_url("Albert Einstein") == "https://en.wikipedia.org/wiki/Albert_Einstein"


def test_parse_response_success():
    body = json.dumps({"parse": {"title": "Cat", "pageid": 6678, "text": "<p>The cat</p>"}})
    content = WikipediaResolver.parse_response("cat", body)
    assert content.title == "Cat"
    assert content.content == "<p>The cat</p>"


def test_parse_response_legacy_text_shape():
    body = json.dumps({"parse": {"title": "Cat", "text": {"*": "<p>old</p>"}}})
    assert WikipediaResolver.parse_response("Cat", body).content == "<p>old</p>"


def test_parse_response_error_payload():
    body = json.dumps({"error": {"code": "missingtitle", "info": "The page you specified doesn't exist."}})
    with pytest.raises(ResolutionFailure) as excinfo:
        WikipediaResolver.parse_response("Nonexistent", body)
    assert excinfo.value.title == "Nonexistent"
    assert "doesn't exist" in excinfo.value.reason


@pytest.mark.parametrize("body", ["<html>oops</html>", json.dumps({"parse": {"title": "Cat"}}), "[]"])
def test_parse_response_rejects_malformed(body):
    with pytest.raises(ResolutionFailure):
        WikipediaResolver.parse_response("Cat", body)


def test_resolve_fetches_and_parses(monkeypatch, resolver):
    body = json.dumps({"parse": {"title": "Dog", "text": "<p>dog</p>"}})
    stub = StubURL(result=(200, {}, body))
    requested = stub_parse(monkeypatch, stub)

    content = resolver.resolve("Dog")

    assert content.title == "Dog"
    assert requested == [resolver.api_url("Dog")]
    assert stub.timeouts == [3.0]


def test_resolve_wraps_socket_errors(monkeypatch, resolver):
    stub_parse(monkeypatch, StubURL(error=ConnectionRefusedError("refused")))
    with pytest.raises(ResolutionFailure) as excinfo:
        resolver.resolve("Dog")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_resolve_rejects_http_errors(monkeypatch, resolver):
    stub_parse(monkeypatch, StubURL(result=(503, {}, "")))
    with pytest.raises(ResolutionFailure, match="HTTP 503"):
        resolver.resolve("Dog")
