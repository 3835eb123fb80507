# Pane Browser Package
# Wikipedia를 가로로 이어지는 페인들로 탐색하는 브라우저

__version__ = "1.0.0"

# Re-export main classes for convenience
from .content import LinkVisitTracker, NavigationController, Pane, PaneResizer
from .core import BrowserSession
from .errors import BrowserError, ResolutionFailure

__all__ = [
    'BrowserSession',
    'NavigationController',
    'LinkVisitTracker',
    'PaneResizer',
    'Pane',
    'BrowserError',
    'ResolutionFailure',
]
