"""DOM Tree utilities"""
from typing import Optional

from .nodes import Element


def tree_to_list(tree, result_list):
    """DOM 트리를 flat list로 변환"""
    result_list.append(tree)
    for child in tree.children:
        tree_to_list(child, result_list)
    return result_list


def enclosing_link(node) -> Optional[Element]:
    """node를 감싸는 가장 가까운 <a href> 요소"""
    while node is not None:
        if isinstance(node, Element) and node.tag == "a" and "href" in node.attributes:
            return node
        node = node.parent
    return None

