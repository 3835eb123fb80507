import ctypes
import logging
from typing import Optional

import sdl2

from ..common.config import BrowserConfig
from ..profiling import MeasureTime, Tracer, set_thread_name
from ..threads import CompositorData, CompositorThread
from ..ui import Chrome, PaneStrip, StylesheetProvider
from .session import BrowserSession

logger = logging.getLogger(__name__)


class ClickEvent:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Browser:
    """SDL 창 - 사용자 입력을 BrowserSession 동작으로 전달

    창 스레드에서 실행:
    - SDL 이벤트 루프
    - 매 프레임 session.process_completions() 로 조회 결과 적용
    - 그리기는 CompositorThread에 위임
    """

    def __init__(self, config: Optional[BrowserConfig] = None, session: Optional[BrowserSession] = None):
        self.config = config or BrowserConfig()
        self.session = session or BrowserSession(self.config)
        self.session.add_listener(self.set_needs_draw)

        self.stylesheet = StylesheetProvider()
        self.theme = self.stylesheet.acquire()

        self.width = self.config.width
        self.height = self.config.height
        self.needs_draw = True

        sdl2.SDL_Init(sdl2.SDL_INIT_VIDEO)
        self.window = sdl2.SDL_CreateWindow(
            b"Wikipedia Panes",
            sdl2.SDL_WINDOWPOS_CENTERED,
            sdl2.SDL_WINDOWPOS_CENTERED,
            self.width,
            self.height,
            sdl2.SDL_WINDOW_RESIZABLE,
        )
        self.renderer = sdl2.SDL_CreateRenderer(
            self.window, -1,
            sdl2.SDL_RENDERER_ACCELERATED | sdl2.SDL_RENDERER_PRESENTVSYNC
        )

        self.chrome = Chrome(self)
        self.strip = PaneStrip(self)

        self.compositor = CompositorThread(self.renderer, self.width, self.height)
        self.compositor.start()

        set_thread_name("BrowserThread")
        sdl2.SDL_StartTextInput()

    def set_needs_draw(self):
        self.needs_draw = True

    def submit_to_compositor(self):
        with MeasureTime("paint", "paint"):
            data = CompositorData(
                chrome_commands=self.chrome.paint(),
                strip_commands=self.strip.paint(),
                width=self.width,
                height=self.height,
            )
        self.compositor.submit(data)
        self.needs_draw = False

    # === 이벤트 핸들러 ===

    def handle_mouse_down(self, button_event):
        if button_event.button != sdl2.SDL_BUTTON_LEFT:
            return
        x, y = button_event.x, button_event.y
        if y < self.chrome.bottom:
            self.chrome.click(ClickEvent(x, y))
        else:
            self.chrome.blur()
            self.strip.mouse_down(x, y)
        self.set_needs_draw()

    def handle_mouse_motion(self, motion_event):
        self.session.pointer.dispatch_move(motion_event.x, motion_event.y)

    def handle_mouse_up(self, button_event):
        if button_event.button == sdl2.SDL_BUTTON_LEFT:
            self.session.pointer.dispatch_up(button_event.x, button_event.y)

    def handle_scroll(self, wheel_event):
        x, y = ctypes.c_int(0), ctypes.c_int(0)
        sdl2.SDL_GetMouseState(ctypes.byref(x), ctypes.byref(y))
        dx, dy = wheel_event.x, wheel_event.y
        # Shift + 휠은 가로 스크롤
        if sdl2.SDL_GetModState() & sdl2.KMOD_SHIFT:
            dx, dy = -dy, 0
        self.strip.scroll(x.value, y.value, dx, dy)
        self.set_needs_draw()

    def handle_keydown(self, key_event):
        sym = key_event.keysym.sym
        if sym == sdl2.SDLK_RETURN:
            self.chrome.enter()
        elif sym == sdl2.SDLK_BACKSPACE:
            self.chrome.backspace()
        elif sym == sdl2.SDLK_ESCAPE:
            self.session.resizer.cancel()
            self.chrome.blur()
        self.set_needs_draw()

    def handle_text_input(self, text_event):
        text = text_event.text.decode("utf-8")
        for char in text:
            if not char.isprintable():
                continue
            if self.chrome.keypress(char):
                self.set_needs_draw()

    def handle_resize(self, window_event):
        self.width = window_event.data1
        self.height = window_event.data2
        self.set_needs_draw()

    def run(self):
        """메인 이벤트 루프"""
        running = True
        try:
            while running:
                event = sdl2.SDL_Event()
                while sdl2.SDL_PollEvent(ctypes.byref(event)):
                    if event.type == sdl2.SDL_QUIT:
                        running = False
                    elif event.type == sdl2.SDL_KEYDOWN:
                        self.handle_keydown(event.key)
                    elif event.type == sdl2.SDL_TEXTINPUT:
                        self.handle_text_input(event.text)
                    elif event.type == sdl2.SDL_MOUSEBUTTONDOWN:
                        self.handle_mouse_down(event.button)
                    elif event.type == sdl2.SDL_MOUSEBUTTONUP:
                        self.handle_mouse_up(event.button)
                    elif event.type == sdl2.SDL_MOUSEMOTION:
                        self.handle_mouse_motion(event.motion)
                    elif event.type == sdl2.SDL_MOUSEWHEEL:
                        self.handle_scroll(event.wheel)
                    elif event.type == sdl2.SDL_WINDOWEVENT:
                        if event.window.event == sdl2.SDL_WINDOWEVENT_RESIZED:
                            self.handle_resize(event.window)

                # 워커 스레드에서 도착한 조회 결과 적용
                self.session.process_completions()

                if self.needs_draw:
                    self.submit_to_compositor()

                sdl2.SDL_Delay(16)  # ~60 FPS
        finally:
            self.cleanup()

    def cleanup(self):
        sdl2.SDL_StopTextInput()

        # 드래그 구독 해제, 네트워크 스레드 종료
        self.session.remove_listener(self.set_needs_draw)
        self.session.close()

        self.compositor.stop()
        self.compositor.join(timeout=1.0)
        self.compositor.cleanup()

        self.stylesheet.release()
        Tracer.get().finish()

        sdl2.SDL_DestroyRenderer(self.renderer)
        sdl2.SDL_DestroyWindow(self.window)
        sdl2.SDL_Quit()
