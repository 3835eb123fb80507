# Layout components
from .pane_layout import (
    BlockLayout,
    DocumentLayout,
    LineLayout,
    LinkBox,
    PaneLayout,
    TextLayout,
)

__all__ = [
    'BlockLayout',
    'DocumentLayout',
    'LineLayout',
    'LinkBox',
    'PaneLayout',
    'TextLayout',
]
