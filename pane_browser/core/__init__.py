# Core browser state
# (SDL 창은 pane_browser.core.browser 에서 직접 import: sdl2/skia 로드가 필요함)
from .session import BrowserSession

__all__ = ['BrowserSession']
