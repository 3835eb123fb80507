# Pane navigation state (panes, active cursor, resize, visited links)
from .pane import Pane
from .navigation import NavigationController
from .visited_links import LinkVisitTracker
from .pointer import PointerEvents, PointerSubscription
from .resizer import PaneResizer, DragGesture

__all__ = [
    'Pane',
    'NavigationController',
    'LinkVisitTracker',
    'PointerEvents',
    'PointerSubscription',
    'PaneResizer',
    'DragGesture',
]
