from dataclasses import dataclass
from typing import List, Optional

from .config import Theme
from .screen import Region, ScreenBuffer
from .state import AppState
from .wrap import wrap_text


@dataclass(frozen=True)
class Line:
    text: str = ""
    color: Optional[str] = None
    bold: bool = False


def wrap_width(width: int, theme: Theme) -> int:
    return width - 2 * theme.padding - len(theme.marker)


def clean(text: str) -> str:
    '''
    Make server text safe to put on screen: tabs become spaces and any
    other control character (ESC, BEL, ...) becomes a single space.
    Line breaks survive.
    '''
    text = text.replace('\r\n', '\n').replace('\r', '\n').expandtabs()
    return "".join(c if c == '\n' or c.isprintable() else ' ' for c in text)


def render_input(state: AppState, theme: Theme) -> Line:
    box = state.input
    if not box.value:
        return Line(theme.prompt + theme.cursor + theme.placeholder, theme.dim)
    text = box.value[:box.cursor] + theme.cursor + box.value[box.cursor:]
    if state.viewport.width > 0:
        # scroll so the cursor stays inside the padding
        room = max(1, state.viewport.width - 2 * theme.padding - len(theme.prompt))
        start = max(0, box.cursor - room + 1)
        text = text[start:start + room]
    return Line(theme.prompt + text)


def compose(state: AppState, theme: Theme) -> List[Line]:
    '''
    Build the screen as a list of lines, top to bottom.
    Only the first result is shown; the rest are ignored.
    '''
    width = wrap_width(state.viewport.width, theme)
    lines = [render_input(state, theme), Line()]

    if state.pending is not None:
        lines.append(Line(f'Looking up "{state.pending}"...', theme.accent))
        lines.append(Line())
    if state.error is not None:
        for text in wrap_text(clean(f"error: {state.error}"), width, theme.marker):
            lines.append(Line(text, theme.error, bold=True))
        lines.append(Line())

    entry = state.current
    if entry is None:
        return lines

    if entry.headword:
        lines.extend(Line(t, theme.accent, bold=True) for t in wrap_text(clean(entry.headword), width, theme.marker))
    lines.extend(Line(t) for t in wrap_text(clean(entry.definition), width, theme.marker))
    lines.append(Line())
    lines.extend(Line(t) for t in wrap_text(clean(entry.example), width, theme.marker))
    lines.append(Line())
    lines.append(Line(f"thumbs-up: {entry.thumbs_up}"))
    lines.append(Line(f"thumbs-down: {entry.thumbs_down}"))

    byline = []
    if entry.author: byline.append("by " + clean(entry.author).replace("\n", " "))
    if entry.written_on: byline.append(f"on {entry.written_on:%Y-%m-%d}")
    if byline:
        lines.append(Line())
        lines.append(Line(" ".join(byline), theme.dim))
    return lines


def paint(buf: ScreenBuffer, lines: List[Line], theme: Theme):
    buf.fill((0, 0, buf.w, buf.h), bg_color=theme.background)
    x, y, w, h = Region(0, 0, buf.w, buf.h).shrink(theme.padding, 1)
    for i, line in enumerate(lines[:h]):
        style = 'bold' if line.bold or theme.bold else None
        buf.puts(x, y + i, line.text, style=style,
                 txt_color=line.color or theme.foreground, bg_color=theme.background)
