"""Rect geometry"""


class Rect:
    def __init__(self, left, top, right, bottom):
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def containsPoint(self, x, y):
        return self.left <= x < self.right and self.top <= y < self.bottom

    def offset(self, dx, dy):
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def __eq__(self, other):
        return isinstance(other, Rect) and \
            (self.left, self.top, self.right, self.bottom) == \
            (other.left, other.top, other.right, other.bottom)

    def __repr__(self):
        return f"Rect({self.left}, {self.top}, {self.right}, {self.bottom})"
