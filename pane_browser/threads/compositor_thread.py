"""
CompositorThread - Raster, Blit 담당 스레드

창 스레드는 매 변경마다 그리기 명령(chrome + pane strip)을 submit하고,
이 스레드가 Skia Surface에 래스터한 뒤 SDL 텍스처로 출력함
"""
import logging
import threading
import time
from dataclasses import dataclass, field
from queue import Empty, Queue
from typing import Any, List, Optional

import sdl2
import skia

from ..profiling import MeasureTime, set_thread_name

logger = logging.getLogger(__name__)


@dataclass
class CompositorData:
    """Compositor에 전달되는 프레임 데이터"""
    chrome_commands: List[Any] = field(default_factory=list)
    strip_commands: List[Any] = field(default_factory=list)
    width: int = 800
    height: int = 600


class CompositorThread(threading.Thread):
    def __init__(self, renderer, window_width: int, window_height: int):
        super().__init__(daemon=True, name="CompositorThread")
        self.renderer = renderer
        self.data_queue: Queue[CompositorData] = Queue()

        self.width = window_width
        self.height = window_height

        self.root_surface: Optional[skia.Surface] = None
        self.sdl_texture = None

        self.running = False
        self.lock = threading.Lock()

        # ~60fps
        self.frame_interval = 1.0 / 60.0

    def run(self):
        self.running = True
        set_thread_name("CompositorThread")
        self._init_surfaces()

        while self.running:
            started = time.perf_counter()

            data = self._latest_data()
            if data is not None:
                with MeasureTime("compositor_frame", "compositor"):
                    self._render_frame(data)

            elapsed = time.perf_counter() - started
            if elapsed < self.frame_interval:
                time.sleep(self.frame_interval - elapsed)

    def _init_surfaces(self):
        with self.lock:
            self.root_surface = skia.Surface(self.width, self.height)
            self.sdl_texture = sdl2.SDL_CreateTexture(
                self.renderer,
                sdl2.SDL_PIXELFORMAT_RGBA32,
                sdl2.SDL_TEXTUREACCESS_STREAMING,
                self.width,
                self.height,
            )

    def _latest_data(self) -> Optional[CompositorData]:
        """큐에 쌓인 것 중 최신 데이터만 사용 (이전 프레임 스킵)"""
        latest = None
        while True:
            try:
                latest = self.data_queue.get_nowait()
            except Empty:
                return latest

    def _resize_surfaces(self, width, height):
        self.width = width
        self.height = height
        if self.sdl_texture:
            sdl2.SDL_DestroyTexture(self.sdl_texture)
        self.root_surface = None
        self.sdl_texture = None
        self._init_surfaces()

    def _render_frame(self, data: CompositorData):
        if data.width != self.width or data.height != self.height:
            self._resize_surfaces(data.width, data.height)

        with self.lock:
            with MeasureTime("raster", "raster"):
                canvas = self.root_surface.getCanvas()
                canvas.clear(skia.ColorWHITE)
                # 페인 먼저, chrome은 그 위에
                for cmd in data.strip_commands:
                    cmd.execute(canvas)
                for cmd in data.chrome_commands:
                    cmd.execute(canvas)

            with MeasureTime("blit", "blit"):
                image = self.root_surface.makeImageSnapshot()
                pixels = image.tobytes()
                sdl2.SDL_UpdateTexture(self.sdl_texture, None, pixels, self.width * 4)
                sdl2.SDL_RenderClear(self.renderer)
                sdl2.SDL_RenderCopy(self.renderer, self.sdl_texture, None, None)
                sdl2.SDL_RenderPresent(self.renderer)

    def submit(self, data: CompositorData):
        self.data_queue.put(data)

    def stop(self):
        self.running = False

    def cleanup(self):
        with self.lock:
            if self.sdl_texture:
                sdl2.SDL_DestroyTexture(self.sdl_texture)
                self.sdl_texture = None
            self.root_surface = None
