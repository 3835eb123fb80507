# Rendering components
from .display_list import (
    DrawClip,
    DrawLine,
    DrawOutline,
    DrawRect,
    DrawText,
    PaintCommand,
    parse_color,
)
from .geometry import Rect
from .font import get_font

__all__ = [
    'DrawText',
    'DrawRect',
    'DrawOutline',
    'DrawLine',
    'DrawClip',
    'PaintCommand',
    'Rect',
    'get_font',
    'parse_color',
]
