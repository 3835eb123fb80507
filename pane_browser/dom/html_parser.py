import html
import re
from typing import List

from .nodes import Element, Text


class HTMLParser:
    """관대한 HTML 파서

    위키 parse API가 주는 조각(html/body 없음)도 받아서
    html > body 아래로 트리를 만듦. 주석은 버리고, style/script 내용은 텍스트로 만들지 않음
    """

    SELF_CLOSING_TAGS = [
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr"
    ]
    HEAD_TAGS = [
        "base", "basefont", "bgsound", "noscript",
        "link", "meta", "title", "style", "script",
    ]
    RAW_TEXT_TAGS = ["style", "script"]
    # 대소문자 무시, 현재 위치부터만 검색 (문서 전체를 다시 변환하지 않음)
    RAW_TEXT_END = {name: re.compile(f"</{name}", re.IGNORECASE) for name in RAW_TEXT_TAGS}

    def __init__(self, body):
        self.body = body
        self.unfinished: List[Element] = []

    def parse(self):
        body = self.body
        i = 0
        text = ""
        while i < len(body):
            c = body[i]
            if c != "<":
                text += c
                i += 1
                continue

            if text:
                self.add_text(text)
                text = ""

            # <!-- 주석 -->
            if body.startswith("<!--", i):
                end = body.find("-->", i + 4)
                i = len(body) if end == -1 else end + 3
                continue

            end = body.find(">", i + 1)
            if end == -1:
                # 닫히지 않은 태그는 텍스트로 취급
                text = body[i:]
                break
            tag = body[i + 1:end]
            i = end + 1
            self.add_tag(tag)

            # style/script 내용은 닫는 태그까지 건너뜀
            name = tag.split(None, 1)[0].casefold() if tag.strip() else ""
            if name in self.RAW_TEXT_TAGS and not tag.rstrip().endswith("/"):
                close = self.RAW_TEXT_END[name].search(body, i)
                i = len(body) if close is None else close.start()

        if text:
            self.add_text(text)
        return self.finish()

    def implicit_tags(self, tag):
        while True:
            open_tags = [node.tag for node in self.unfinished]

            if open_tags == [] and tag != "html":
                self.add_tag("html")

            elif open_tags == ["html"] \
                    and tag not in ["head", "body", "/html"]:
                if tag in self.HEAD_TAGS:
                    self.add_tag("head")
                else:
                    self.add_tag("body")

            elif open_tags == ["html", "head"] and \
                    tag not in ["/head"] + self.HEAD_TAGS:
                self.add_tag("/head")

            else:
                break

    def add_text(self, text: str):
        if text.isspace():
            return
        self.implicit_tags(None)
        parent = self.unfinished[-1]
        node = Text(html.unescape(text), parent)
        parent.children.append(node)

    def add_tag(self, tag: str):
        tag, attributes = self.get_attributes(tag)
        if not tag or tag.startswith("!") or tag.startswith("?"):
            return

        self.implicit_tags(tag)
        if tag.startswith("/"):
            name = tag[1:]
            open_tags = [node.tag for node in self.unfinished]
            # 열린 적 없는 닫는 태그는 무시
            if len(self.unfinished) == 1 or name not in open_tags[1:]:
                return
            # 중간에 안 닫힌 태그들은 같이 닫음
            while True:
                node = self.unfinished.pop()
                parent = self.unfinished[-1]
                parent.children.append(node)
                if node.tag == name:
                    break

        elif tag in self.SELF_CLOSING_TAGS or tag.endswith("/"):
            tag = tag.rstrip("/")
            parent = self.unfinished[-1]
            node = Element(tag, attributes, parent)
            parent.children.append(node)

        else:
            parent = self.unfinished[-1] if self.unfinished else None
            node = Element(tag, attributes, parent)
            self.unfinished.append(node)

    def finish(self):
        if not self.unfinished:
            self.implicit_tags(None)

        while len(self.unfinished) > 1:
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)
        return self.unfinished.pop()

    def get_attributes(self, text: str):
        text = text.strip()
        # <br/> 처럼 붙어 있는 self-closing 표시
        self_closing = text.endswith("/")
        if self_closing:
            text = text[:-1]

        parts = text.split(None, 1)
        tag = parts[0].casefold() if parts else ""
        if self_closing and tag:
            tag += "/"
        attributes = {}

        if len(parts) > 1:
            rest = parts[1]
            i = 0
            while i < len(rest):
                while i < len(rest) and rest[i].isspace():
                    i += 1
                if i >= len(rest):
                    break

                # 속성 이름
                key_start = i
                while i < len(rest) and rest[i] != "=" and not rest[i].isspace():
                    i += 1
                key = rest[key_start:i]
                if not key:
                    break

                while i < len(rest) and rest[i].isspace():
                    i += 1

                if i >= len(rest) or rest[i] != "=":
                    attributes[key.casefold()] = ""
                    continue

                i += 1  # '='
                while i < len(rest) and rest[i].isspace():
                    i += 1

                if i >= len(rest):
                    attributes[key.casefold()] = ""
                    break

                # 값 (따옴표 처리)
                if rest[i] in ["'", "\""]:
                    quote = rest[i]
                    i += 1
                    value_start = i
                    while i < len(rest) and rest[i] != quote:
                        i += 1
                    value = rest[value_start:i]
                    if i < len(rest):
                        i += 1
                else:
                    value_start = i
                    while i < len(rest) and not rest[i].isspace():
                        i += 1
                    value = rest[value_start:i]

                attributes[key.casefold()] = html.unescape(value)

        return tag, attributes
