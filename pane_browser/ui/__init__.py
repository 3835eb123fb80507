# UI components
from .stylesheet import StylesheetProvider, Theme
from .chrome import Chrome
from .pane_strip import PaneStrip

__all__ = ['Chrome', 'PaneStrip', 'StylesheetProvider', 'Theme']
