# Common utilities and constants shared across packages
from .constants import *
from .config import BrowserConfig

__all__ = [
    'HSTEP', 'VSTEP',
    'WIDTH', 'HEIGHT',
    'SCROLL_STEP',
    'MIN_PANE_WIDTH', 'DEFAULT_PANE_WIDTH', 'RESIZER_WIDTH',
    'LANDING_PAGE',
    'WIKI_HOST', 'WIKI_API_URL', 'WIKI_ARTICLE_URL',
    'BrowserConfig',
]
