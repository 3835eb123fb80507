# DOM (Document Object Model) components
from .nodes import Element, Node, Text
from .html_parser import HTMLParser
from .tree_utils import enclosing_link, tree_to_list

__all__ = [
    'Element',
    'Node',
    'Text',
    'HTMLParser',
    'enclosing_link',
    'tree_to_list',
]
