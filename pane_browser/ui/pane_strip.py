"""
PaneStrip - 페인들을 가로로 이어 그리는 영역

각 페인: 제목 줄(제목 + 닫기 버튼), 콘텐츠(세로 스크롤), 오른쪽 끝 리사이즈 핸들.
활성 페인은 테두리로 표시하고, 활성 페인이 바뀌면 그 페인이 왼쪽 끝에 오도록 가로 스크롤.
로딩 중이면 마지막 페인 뒤에 자리표시 영역을 그림
"""
import logging
from typing import Dict, List, Optional, Tuple

from ..common.constants import DEFAULT_PANE_WIDTH, RESIZER_WIDTH, SCROLL_STEP
from ..layout import PaneLayout
from ..profiling import MeasureTime
from ..rendering import DrawClip, DrawLine, DrawOutline, DrawRect, DrawText, Rect, get_font

logger = logging.getLogger(__name__)


class PaneStrip:
    def __init__(self, browser):
        self.browser = browser
        self.font = get_font(13, "bold", "roman")
        self.padding = 6
        self.title_height = self.font.metrics("linespace") + 2 * self.padding

        # 가로 스크롤 위치
        self.scroll_x = 0
        # 캐시 키는 id(pane.content) (인덱스 이동, 폭 변경과 무관)
        # id(content) -> (content, width, PaneLayout)
        self._layouts: Dict[int, Tuple[str, int, PaneLayout]] = {}
        # id(content) -> (content, 세로 스크롤)
        self._scrolls: Dict[int, Tuple[str, float]] = {}
        self._last_active: Optional[int] = None

    @property
    def top(self):
        return self.browser.chrome.bottom

    @property
    def height(self):
        return self.browser.height - self.top

    @property
    def theme(self):
        return self.browser.theme

    # === 좌표 계산 ===

    def pane_rects(self, panes) -> List[Rect]:
        rects = []
        x = -self.scroll_x
        for pane in panes:
            rects.append(Rect(x, self.top, x + pane.width, self.browser.height))
            x += pane.width
        return rects

    def total_width(self, panes, loading) -> int:
        width = sum(pane.width for pane in panes)
        if loading:
            width += DEFAULT_PANE_WIDTH
        return width

    def close_rect(self, rect: Rect) -> Rect:
        size = self.title_height - 2 * self.padding
        right = rect.right - RESIZER_WIDTH - self.padding
        return Rect(right - size, rect.top + self.padding, right, rect.top + self.padding + size)

    def resizer_rect(self, rect: Rect) -> Rect:
        return Rect(rect.right - RESIZER_WIDTH, rect.top, rect.right, rect.bottom)

    def content_rect(self, rect: Rect) -> Rect:
        return Rect(rect.left, rect.top + self.title_height, rect.right - RESIZER_WIDTH, rect.bottom)

    def layout_for(self, pane) -> PaneLayout:
        cached = self._layouts.get(id(pane.content))
        if cached and cached[0] is pane.content and cached[1] == pane.width:
            return cached[2]

        with MeasureTime("layout_pane", "layout", {"title": pane.title}):
            layout = PaneLayout(
                pane.content,
                pane.width - RESIZER_WIDTH,
                self.browser.session.resolver.article_url(pane.title),
            )
        self._layouts[id(pane.content)] = (pane.content, pane.width, layout)
        return layout

    def scroll_of(self, pane) -> float:
        saved = self._scrolls.get(id(pane.content))
        if saved and saved[0] is pane.content:
            return saved[1]
        return 0

    def _clamp_scroll_x(self, panes, loading):
        max_scroll = max(0, self.total_width(panes, loading) - self.browser.width)
        self.scroll_x = max(0, min(self.scroll_x, max_scroll))

    def sync(self, panes, active_index, loading):
        """활성 페인이 바뀌면 보이도록 가로 스크롤 (왼쪽 정렬)"""
        if active_index != self._last_active and active_index is not None:
            self.scroll_x = sum(pane.width for pane in panes[:active_index])
        self._last_active = active_index
        self._clamp_scroll_x(panes, loading)

        # 사라진 페인의 캐시 정리
        live = {id(pane.content) for pane in panes}
        for cache in (self._layouts, self._scrolls):
            for key in [k for k in cache if k not in live]:
                del cache[key]

    # === 그리기 ===

    @MeasureTime.trace("paint_strip", "paint")
    def paint(self):
        session = self.browser.session
        panes, active_index, loading = session.snapshot()
        self.sync(panes, active_index, loading)
        theme = self.theme

        cmds = [DrawRect(0, self.top, self.browser.width, self.browser.height, theme.background)]
        rects = self.pane_rects(panes)
        for index, (pane, rect) in enumerate(zip(panes, rects)):
            if rect.right < 0 or rect.left > self.browser.width:
                continue
            cmds.extend(self.paint_pane(index, pane, rect, index == active_index))

        if loading:
            left = rects[-1].right if rects else -self.scroll_x
            cmds.extend(self.paint_placeholder(Rect(left, self.top, left + DEFAULT_PANE_WIDTH, self.browser.height)))
        return cmds

    def paint_pane(self, index, pane, rect, focused):
        theme = self.theme
        session = self.browser.session
        cmds = []

        # 콘텐츠 (페인 영역으로 자르고 세로 스크롤 적용)
        content = self.content_rect(rect)
        layout = self.layout_for(pane)
        scroll = self.scroll_of(pane)
        cmds.append(DrawClip(
            content,
            layout.paint(theme, session.is_visited),
            dx=content.left,
            dy=content.top - scroll,
        ))

        # 제목 줄
        cmds.append(DrawRect(rect.left, rect.top, rect.right, rect.top + self.title_height, theme.title_bar))
        title_clip = Rect(rect.left, rect.top, self.close_rect(rect).left - self.padding, rect.top + self.title_height)
        cmds.append(DrawClip(title_clip, [
            DrawText(rect.left + self.padding, rect.top + self.padding, pane.title, self.font, theme.text_color),
        ]))

        # 닫기 버튼 (x)
        close = self.close_rect(rect)
        inset = 3
        cmds.append(DrawLine(close.left + inset, close.top + inset, close.right - inset, close.bottom - inset,
                             theme.text_color, 1.5))
        cmds.append(DrawLine(close.left + inset, close.bottom - inset, close.right - inset, close.top + inset,
                             theme.text_color, 1.5))

        # 오른쪽 테두리 / 리사이즈 핸들
        handle = self.resizer_rect(rect)
        cmds.append(DrawRect(handle.left, handle.top, handle.right, handle.bottom, theme.resizer_color))

        if focused:
            cmds.append(DrawOutline(Rect(rect.left + 1, rect.top + 1, rect.right - RESIZER_WIDTH - 1, rect.bottom - 1),
                                    theme.focus_outline, 2))
        return cmds

    def paint_placeholder(self, rect):
        theme = self.theme
        text = "Loading..."
        x = rect.left + (rect.width - self.font.measure(text)) / 2
        y = rect.top + rect.height / 2
        return [
            DrawLine(rect.right, rect.top, rect.right, rect.bottom, theme.pane_border, 1),
            DrawText(x, y, text, self.font, theme.placeholder_color),
        ]

    # === 입력 ===

    def pane_at(self, x, y) -> Optional[Tuple[int, Rect]]:
        panes = self.browser.session.panes
        for index, rect in enumerate(self.pane_rects(panes)):
            if rect.containsPoint(x, y):
                return index, rect
        return None

    def mouse_down(self, x, y):
        """클릭 처리: 리사이즈 핸들 > 닫기 버튼 > 링크 > 포커스"""
        hit = self.pane_at(x, y)
        if hit is None:
            return
        index, rect = hit
        session = self.browser.session

        if self.resizer_rect(rect).containsPoint(x, y):
            session.start_resize(index, x)
            return

        if self.close_rect(rect).containsPoint(x, y):
            session.close_pane(index)
            return

        content = self.content_rect(rect)
        if content.containsPoint(x, y):
            pane = session.panes[index]
            layout = self.layout_for(pane)
            local_x = x - content.left
            local_y = y - content.top + self.scroll_of(pane)
            link = layout.hit_test(local_x, local_y)
            if link is not None:
                logger.debug("Link clicked in pane %d: %s", index, link.href)
                session.activate_link(index, link.href, link.title)
                return

        session.focus_pane(index)

    def scroll(self, x, y, dx, dy):
        """휠 스크롤: 세로는 커서 아래 페인, 가로는 스트립 전체"""
        session = self.browser.session
        panes, _, loading = session.snapshot()

        if dx:
            self.scroll_x += dx * SCROLL_STEP
            self._clamp_scroll_x(panes, loading)

        hit = self.pane_at(x, y)
        if dy and hit is not None:
            index, rect = hit
            pane = panes[index]
            layout = self.layout_for(pane)
            viewport = self.content_rect(rect).height
            max_scroll = max(0, layout.height - viewport)
            scroll = self.scroll_of(pane) - dy * SCROLL_STEP
            self._scrolls[id(pane.content)] = (pane.content, max(0, min(scroll, max_scroll)))
