import pytest

pytest.importorskip("skia")

from pane_browser.layout import PaneLayout  # noqa: E402
from pane_browser.ui.stylesheet import StylesheetProvider, Theme  # noqa: E402

BASE = "https://en.wikipedia.org/wiki/Cat"
CONTENT = (
    '<h2>Behaviour<span class="mw-editsection">[edit]</span></h2>'
    '<p>Cats chase <a href="/wiki/Mouse" title="Mouse">mice</a>'
    '<sup class="reference"><a href="#cite_note-1">[1]</a></sup> and '
    '<a href="https://example.org/">toys</a>.</p>'
)


@pytest.fixture
def layout():
    return PaneLayout(CONTENT, 720, BASE)


def test_only_titled_links_are_clickable(layout):
    assert [(box.href, box.title) for box in layout.link_boxes] == [
        ("https://en.wikipedia.org/wiki/Mouse", "Mouse"),
    ]


def test_skipped_elements_are_not_laid_out(layout):
    words = [word.word for word in layout.words]
    assert "[edit]" not in words
    assert "[1]" not in words
    assert words[:3] == ["Behaviour", "Cats", "chase"]


def test_hit_test_finds_link_under_point(layout):
    box = layout.link_boxes[0]
    center_x = (box.rect.left + box.rect.right) / 2
    center_y = (box.rect.top + box.rect.bottom) / 2
    assert layout.hit_test(center_x, center_y) is box
    assert layout.hit_test(0, 0) is None


def test_paint_colors_visited_links(layout):
    theme = Theme()
    visited = {"https://en.wikipedia.org/wiki/Mouse"}
    colors = {cmd.text: cmd.color for cmd in layout.paint(theme, visited.__contains__)}
    assert colors["mice"] == theme.visited_link_color
    assert colors["toys"] == theme.link_color
    assert colors["Cats"] == theme.text_color

    colors = {cmd.text: cmd.color for cmd in layout.paint(theme, lambda href: False)}
    assert colors["mice"] == theme.link_color


def test_narrow_pane_wraps_lines():
    wide = PaneLayout(CONTENT, 720, BASE)
    narrow = PaneLayout(CONTENT, 80, BASE)
    assert narrow.height > wide.height


def test_stylesheet_lifecycle():
    provider = StylesheetProvider()
    assert not provider.active
    with provider as theme:
        assert provider.active
        assert provider.acquire() is theme
    assert not provider.active
    provider.release()
