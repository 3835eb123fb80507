"""Shared fixtures: a fake resolver and a network double whose completions the test drives."""
import pytest

from pane_browser.common.config import BrowserConfig
from pane_browser.core.session import BrowserSession
from pane_browser.errors import ResolutionFailure
from pane_browser.networking import NetworkResponse, ResolvedContent


class FakeResolver:
    """Resolves every title to a small article, except the ones marked missing."""

    def __init__(self, missing=()):
        self.missing = set(missing)
        self.calls = []

    def resolve(self, title):
        self.calls.append(title)
        if title in self.missing:
            raise ResolutionFailure(title, "missingtitle")
        return ResolvedContent(title, f"<p>{title} article</p>")

    def article_url(self, title):
        return "https://en.wikipedia.org/wiki/" + title.replace(" ", "_")


class ManualNetwork:
    """NetworkThread stand-in: requests stay pending until the test completes them."""

    def __init__(self, resolver):
        self.resolver = resolver
        self.pending = {}
        self.completed = []
        self._next_id = 0

    def request(self, title, request_type):
        self._next_id += 1
        self.pending[self._next_id] = (title, request_type)
        return self._next_id

    def complete(self, request_id):
        title, request_type = self.pending.pop(request_id)
        try:
            response = NetworkResponse(request_id, request_type, title,
                                       content=self.resolver.resolve(title))
        except ResolutionFailure as e:
            response = NetworkResponse(request_id, request_type, title, error=e)
        self.completed.append(response)

    def complete_all(self):
        for request_id in sorted(self.pending):
            self.complete(request_id)

    def poll_responses(self):
        responses, self.completed = self.completed, []
        return responses

    def stop(self):
        pass


@pytest.fixture
def resolver():
    return FakeResolver(missing={"Nonexistent"})


@pytest.fixture
def network(resolver):
    return ManualNetwork(resolver)


@pytest.fixture
def session(resolver, network):
    s = BrowserSession(BrowserConfig(), resolver=resolver, network=network)
    yield s
    s.close()
