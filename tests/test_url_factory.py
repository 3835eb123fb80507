import pytest

from pane_browser.networking import HTTPSURL, HTTPURL, URLFactory

ARTICLE = "https://en.wikipedia.org/wiki/Cat"


def test_parse_picks_class_by_schema():
    url = URLFactory.parse(ARTICLE)
    assert isinstance(url, HTTPSURL)
    assert (url.host, url.port, url.path) == ("en.wikipedia.org", 443, "/wiki/Cat")
    assert str(url) == ARTICLE

    plain = URLFactory.parse("http://localhost:8000/w/api.php")
    assert isinstance(plain, HTTPURL)
    assert plain.port == 8000
    assert str(plain) == "http://localhost:8000/w/api.php"


def test_parse_host_without_path():
    url = URLFactory.parse("http://example.org")
    assert url.path == "/"
    assert url.origin() == "http://example.org:80"


@pytest.mark.parametrize("raw", ["ftp://example.org/", "en.wikipedia.org/wiki/Cat"])
def test_parse_rejects_unsupported(raw):
    with pytest.raises(ValueError):
        URLFactory.parse(raw)


@pytest.mark.parametrize("href, expected", [
    ("https://de.wikipedia.org/wiki/Katze", "https://de.wikipedia.org/wiki/Katze"),
    ("/wiki/Dog", "https://en.wikipedia.org/wiki/Dog"),
    ("./Dog", "https://en.wikipedia.org/wiki/Dog"),
    ("Dog", "https://en.wikipedia.org/wiki/Dog"),
    ("#History", "https://en.wikipedia.org/wiki/Cat#History"),
    ("//upload.wikimedia.org/cat.png", "https://upload.wikimedia.org/cat.png"),
])
def test_resolve_against_article(href, expected):
    assert URLFactory.resolve_str(ARTICLE, href) == expected


def test_resolve_parent_directory():
    base = "https://en.wikipedia.org/wiki/Talk/Cat"
    assert URLFactory.resolve_str(base, "../Dog") == "https://en.wikipedia.org/wiki/Dog"


def test_resolve_keeps_explicit_port():
    base = URLFactory.parse("http://localhost:8000/wiki/Cat")
    assert URLFactory.resolve_str(base, "/wiki/Dog") == "http://localhost:8000/wiki/Dog"
