"""
페인 콘텐츠 레이아웃

Document -> Block -> Line -> Text 순서의 레이아웃 트리.
CSS 없이 태그만 보고 글꼴(제목 크기, 굵게, 기울임)과 링크 여부를 정함.
링크 단어는 link_boxes 에 (영역, 절대 href, title) 로 모아서 클릭 판정에 씀
"""
from dataclasses import dataclass
from typing import List, Optional

from ..common.constants import HSTEP, VSTEP
from ..dom import Element, HTMLParser, Text, enclosing_link
from ..networking import URLFactory
from ..rendering import DrawText, Rect, get_font

BASE_FONT_SIZE = 14

HEADING_SIZES = {"h1": 24, "h2": 20, "h3": 17, "h4": 15, "h5": 14, "h6": 14}
BOLD_TAGS = ["b", "strong", "th", "dt"] + list(HEADING_SIZES)
ITALIC_TAGS = ["i", "em", "cite", "var"]

# 화면에 그리지 않는 요소
SKIP_TAGS = ["head", "style", "script", "noscript", "link", "meta", "img", "figure"]
SKIP_CLASSES = ["mw-editsection", "reference", "mw-empty-elt", "noprint"]


@dataclass
class LinkBox:
    rect: Rect
    href: str
    title: str


def is_skipped(node) -> bool:
    if not isinstance(node, Element):
        return False
    if node.tag in SKIP_TAGS:
        return True
    classes = node.attributes.get("class", "").split()
    return any(c in SKIP_CLASSES for c in classes)


def text_font(node):
    """조상 태그를 보고 글꼴 결정"""
    size = BASE_FONT_SIZE
    weight = "normal"
    style = "roman"
    elt = node.parent
    while elt is not None:
        if elt.tag in HEADING_SIZES:
            size = max(size, HEADING_SIZES[elt.tag])
        if elt.tag in BOLD_TAGS:
            weight = "bold"
        if elt.tag in ITALIC_TAGS:
            style = "italic"
        elt = elt.parent
    return get_font(size, weight, style)


class TextLayout:
    def __init__(self, node, word, parent, previous, font, link):
        self.node = node
        self.word = word
        self.parent = parent
        self.previous = previous
        self.font = font
        self.link = link
        self.width = font.measure(word)
        self.height = font.metrics("linespace")

        if previous:
            self.x = previous.x + previous.width + font.measure(" ")
        else:
            self.x = parent.x
        self.y = None

    def rect(self):
        return Rect(self.x, self.y, self.x + self.width, self.y + self.height)


class LineLayout:
    def __init__(self, parent, previous):
        self.parent = parent
        self.previous = previous
        self.children: List[TextLayout] = []
        self.x = parent.x
        self.width = parent.width
        self.y = None
        self.height = None

    def layout(self, y):
        self.y = y
        if not self.children:
            self.height = 0
            return

        # 단어들을 공통 baseline에 맞춤
        max_ascent = max(word.font.metrics("ascent") for word in self.children)
        baseline = self.y + 1.25 * max_ascent
        for word in self.children:
            word.y = baseline - word.font.metrics("ascent")

        max_descent = max(word.font.metrics("descent") for word in self.children)
        self.height = 1.25 * (max_ascent + max_descent)


class BlockLayout:
    BLOCK_ELEMENTS = [
        "html", "body", "article", "section", "nav", "aside",
        "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "header",
        "footer", "address", "p", "hr", "pre", "blockquote",
        "ol", "ul", "menu", "li", "dl", "dt", "dd", "figure",
        "figcaption", "main", "div", "table", "tbody", "thead",
        "tr", "td", "th", "caption", "form", "fieldset",
        "legend", "details", "summary"
    ]
    INDENT_TAGS = ["li", "dd", "blockquote"]

    def __init__(self, node, parent):
        self.node = node
        self.parent = parent
        self.children = []
        indent = HSTEP if isinstance(node, Element) and node.tag in self.INDENT_TAGS else 0
        self.x = parent.x + indent
        self.width = parent.width - indent
        self.y = None
        self.height = None

    def layout_mode(self):
        if isinstance(self.node, Text):
            return "inline"
        if any(isinstance(child, Element) and child.tag in self.BLOCK_ELEMENTS
               for child in self.node.children if not is_skipped(child)):
            return "block"
        return "inline"

    def layout(self, y):
        self.y = y
        if self.layout_mode() == "block":
            cursor_y = y
            for child in self.node.children:
                if is_skipped(child):
                    continue
                if isinstance(child, Text) and child.text.isspace():
                    continue
                block = BlockLayout(child, self)
                block.layout(cursor_y)
                self.children.append(block)
                cursor_y += block.height
            self.height = cursor_y - y
        else:
            self.new_line()
            self.recurse(self.node)
            cursor_y = y
            for line in self.children:
                line.layout(cursor_y)
                cursor_y += line.height
            self.height = cursor_y - y

        # 문단/제목 뒤 여백
        if isinstance(self.node, Element) and self.node.tag in ["p", "h1", "h2", "h3", "ul", "ol", "table"]:
            self.height += VSTEP / 2

    def recurse(self, node):
        if is_skipped(node):
            return
        if isinstance(node, Text):
            font = text_font(node)
            link = enclosing_link(node)
            for word in node.text.split():
                self.word(node, word, font, link)
        elif node.tag == "br":
            self.new_line()
        else:
            for child in node.children:
                self.recurse(child)

    def word(self, node, word, font, link):
        line = self.children[-1]
        previous = line.children[-1] if line.children else None
        text = TextLayout(node, word, line, previous, font, link)

        # 줄을 넘어가면 새 줄 (줄의 첫 단어는 넘쳐도 그대로 둠)
        if previous and text.x + text.width > line.x + line.width:
            self.new_line()
            line = self.children[-1]
            text = TextLayout(node, word, line, None, font, link)
        line.children.append(text)

    def new_line(self):
        previous = self.children[-1] if self.children else None
        self.children.append(LineLayout(self, previous))

    def words(self):
        for child in self.children:
            if isinstance(child, LineLayout):
                yield from child.children
            else:
                yield from child.words()


class DocumentLayout:
    def __init__(self, node, width):
        self.node = node
        self.x = HSTEP
        self.y = VSTEP
        self.width = width - 2 * HSTEP
        self.height = 0
        self.child: Optional[BlockLayout] = None

    def layout(self):
        self.child = BlockLayout(self.node, self)
        self.child.layout(self.y)
        self.height = self.child.height + 2 * VSTEP

    def words(self):
        return self.child.words() if self.child else iter(())


class PaneLayout:
    """한 페인의 콘텐츠를 width 폭으로 배치한 결과"""

    def __init__(self, content: str, width: int, base_url: str):
        self.width = width
        self.base_url = base_url
        self.nodes = HTMLParser(content).parse()
        self.document = DocumentLayout(self.nodes, width)
        self.document.layout()
        self.words = list(self.document.words())
        self.link_boxes: List[LinkBox] = []
        self._word_hrefs = {}

        for word in self.words:
            if word.link is None:
                continue
            title = word.link.attributes.get("title", "")
            href = URLFactory.resolve_str(base_url, word.link.attributes["href"])
            self._word_hrefs[id(word)] = href
            # title 없는 링크(각주, 외부 링크)는 페인 이동 대상이 아님
            if title:
                self.link_boxes.append(LinkBox(word.rect(), href, title))

    @property
    def height(self):
        return self.document.height

    def hit_test(self, x, y) -> Optional[LinkBox]:
        for box in self.link_boxes:
            if box.rect.containsPoint(x, y):
                return box
        return None

    def paint(self, theme, is_visited) -> List[DrawText]:
        """is_visited(href) 로 방문한 링크 색을 구분"""
        cmds = []
        for word in self.words:
            color = theme.text_color
            href = self._word_hrefs.get(id(word))
            if href is not None:
                color = theme.visited_link_color if is_visited(href) else theme.link_color
            cmds.append(DrawText(word.x, word.y, word.word, word.font, color))
        return cmds
