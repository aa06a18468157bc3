import sys
from typing import List, Optional, Tuple

Rect = Tuple[int, int, int, int]  # (x, y, w, h)


class Region(tuple):
    """
    A class representing a (x,y,w,h) area on the screen.
    Used for laying out ui.
    """
    def __new__(cls, x: int = 0, y: int = 0, w: int = 0, h: int = 0):
        return super().__new__(cls, (int(x), int(y), max(0, int(w)), max(0, int(h))))

    def __repr__(self):
        return f"Region{super().__repr__()}"

    def shrink(self, left: int, top: Optional[int] = None, right: Optional[int] = None, bottom: Optional[int] = None) -> 'Region':
        top = top if top is not None else left
        right = right if right is not None else left
        bottom = bottom if bottom is not None else top
        return Region(
            self[0] + left,
            self[1] + top,
            self[2] - left - right,
            self[3] - top - bottom
        )


class ScreenBuffer:
    '''
    A w*h grid of cells, each with a char and optional style/colours.
    Writes outside the grid are ignored, so callers never have to clip.
    '''
    def __init__(self, w, h):
        self.w, self.h = w, h
        self.chars = [[' '] * w for _ in range(h)]
        self.styles: List[List[Optional[str]]] = [[None] * w for _ in range(h)]
        self.txt_colors: List[List[Optional[str]]] = [[None] * w for _ in range(h)]
        self.bg_colors: List[List[Optional[str]]] = [[None] * w for _ in range(h)]

    def put(self, x, y, char, style=None, txt_color=None, bg_color=None):
        if 0 <= x < self.w and 0 <= y < self.h:
            self.chars[y][x] = char
            self.styles[y][x] = style
            self.txt_colors[y][x] = txt_color
            self.bg_colors[y][x] = bg_color

    def puts(self, x, y, text, style=None, txt_color=None, bg_color=None):
        for i, c in enumerate(text):
            self.put(x + i, y, c, style, txt_color, bg_color)

    def fill(self, r: Rect, char=' ', style=None, txt_color=None, bg_color=None):
        x, y, w, h = r
        for row in range(y, y + h):
            for col in range(x, x + w):
                self.put(col, row, char, style, txt_color, bg_color)

    def row_text(self, y) -> str:
        return "".join(self.chars[y])

    def flush(self, term, stream=None):
        stream = stream or sys.stdout
        out = term.home
        for y in range(self.h):
            for x in range(self.w):
                c = self.chars[y][x]
                fg, s, bg = self.txt_colors[y][x], self.styles[y][x], self.bg_colors[y][x]
                parts = [p for p in [fg, s] if p]
                if bg: parts.append(f"on_{bg}")
                attr = "_".join(parts) if parts else None
                styled = getattr(term, attr, None) if attr else None
                out += styled(c) if styled else c
        stream.write(out)
        stream.flush()
