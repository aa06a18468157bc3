from typing import List

MARKER = "-"


def wrap_line(text: str, width: int, marker: str = MARKER) -> List[str]:
    '''
    Break `text` into lines holding at most `width` characters of it.

    At each cut: if the next character is a space it is dropped and the
    line ends there; otherwise the line gets `marker` appended and the
    next line starts right at the cut. Repeats until what's left fits,
    so text of any length ends up fully wrapped.

    A line that ends in a real hyphen right before a dropped space looks
    the same as a marked cut ("abc- def" at 4 gives ['abc-', 'def']);
    pass a different `marker` if that matters.

    >>> wrap_line("abcdef ghi", 3)
    ['abc-', 'def', 'ghi']
    '''
    width = max(1, width)
    lines = []
    while len(text) > width:
        head, rest = text[:width], text[width:]
        if rest[0] == " ":
            lines.append(head)
            text = rest[1:]
        else:
            lines.append(head + marker)
            text = rest
    if text or not lines:
        lines.append(text)
    return lines


def wrap_text(text: str, width: int, marker: str = MARKER) -> List[str]:
    """Like wrap_line, but existing line breaks (\\n, \\r\\n, \\r) are kept."""
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    lines = []
    for paragraph in text.split('\n'):
        lines.extend(wrap_line(paragraph, width, marker))
    return lines
