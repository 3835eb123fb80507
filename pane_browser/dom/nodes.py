"""DOM 노드 (Element, Text)"""
from typing import Dict, List, Optional


class Node:
    def __init__(self, parent: Optional["Element"]):
        self.parent = parent
        self.children: List["Node"] = []


class Element(Node):
    def __init__(self, tag: str, attributes: Dict[str, str], parent: Optional["Element"]):
        super().__init__(parent)
        self.tag = tag
        self.attributes = attributes

    def __repr__(self) -> str:
        return f"<{self.tag}>"


class Text(Node):
    """텍스트 노드 (엔티티는 파싱 시점에 풀려 있음)"""

    def __init__(self, text: str, parent: Optional[Element]):
        super().__init__(parent)
        self.text = text

    def __repr__(self) -> str:
        return repr(self.text)
