"""
디스플레이 리스트 - 메인 스레드가 만들고 컴포지터 스레드가 실행하는 그리기 명령

명령은 좌표와 색만 들고 있는 값 객체라 스레드 사이로 넘겨도 안전함.
실제 Skia 호출은 execute(canvas) 에서만 일어남
"""
from functools import lru_cache

import skia

from .geometry import Rect

NAMED_COLORS = {
    "black": skia.ColorBLACK,
    "white": skia.ColorWHITE,
    "red": skia.ColorRED,
    "transparent": skia.ColorTRANSPARENT,
}


@lru_cache(maxsize=64)
def parse_color(color: str):
    """이름 또는 #RGB / #RRGGBB / #RRGGBBAA 를 Skia Color로 (모르는 값은 검정)"""
    color = color.lower().strip()
    if color in NAMED_COLORS:
        return NAMED_COLORS[color]

    digits = color[1:] if color.startswith("#") else ""
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        return skia.ColorBLACK
    try:
        r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    except ValueError:
        return skia.ColorBLACK
    return skia.Color(r, g, b, a)


def to_skia(rect: Rect):
    return skia.Rect.MakeLTRB(rect.left, rect.top, rect.right, rect.bottom)


class PaintCommand:
    def __init__(self, rect: Rect, color: str):
        self.rect = rect
        self.color = color

    def make_paint(self, stroke_width=None) -> skia.Paint:
        paint = skia.Paint(Color=parse_color(self.color), AntiAlias=True)
        if stroke_width is not None:
            paint.setStyle(skia.Paint.kStroke_Style)
            paint.setStrokeWidth(stroke_width)
        return paint

    def execute(self, canvas):
        raise NotImplementedError


class DrawText(PaintCommand):
    def __init__(self, x1, y1, text, font, color):
        super().__init__(Rect(x1, y1, x1 + font.measure(text), y1 + font.metrics("linespace")), color)
        self.text = text
        self.font = font

    def execute(self, canvas):
        # drawString 의 y는 baseline
        baseline = self.rect.top + self.font.metrics("ascent")
        canvas.drawString(self.text, self.rect.left, baseline, self.font.skia_font, self.make_paint())


class DrawRect(PaintCommand):
    def __init__(self, x1, y1, x2, y2, color):
        super().__init__(Rect(x1, y1, x2, y2), color)

    def execute(self, canvas):
        if self.color != "transparent":
            canvas.drawRect(to_skia(self.rect), self.make_paint())


class DrawOutline(PaintCommand):
    def __init__(self, rect, color, thickness):
        super().__init__(rect, color)
        self.thickness = thickness

    def execute(self, canvas):
        canvas.drawRect(to_skia(self.rect), self.make_paint(self.thickness))


class DrawLine(PaintCommand):
    def __init__(self, x1, y1, x2, y2, color, thickness):
        super().__init__(Rect(x1, y1, x2, y2), color)
        self.thickness = thickness

    def execute(self, canvas):
        r = self.rect
        canvas.drawLine(r.left, r.top, r.right, r.bottom, self.make_paint(self.thickness))


class DrawClip:
    """rect 영역으로 잘라서, (dx, dy) 만큼 옮긴 뒤 하위 명령 실행

    페인 콘텐츠를 페인 폭 안에 가두고 세로 스크롤을 적용할 때 사용
    """

    def __init__(self, rect, commands, dx=0, dy=0):
        self.rect = rect
        self.commands = commands
        self.dx = dx
        self.dy = dy

    def execute(self, canvas):
        canvas.save()
        canvas.clipRect(to_skia(self.rect))
        canvas.translate(self.dx, self.dy)
        for cmd in self.commands:
            cmd.execute(canvas)
        canvas.restore()
