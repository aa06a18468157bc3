from dataclasses import dataclass, replace


def prev_word(text, i):
    while i > 0 and not text[i-1].isalnum(): i -= 1
    while i > 0 and text[i-1].isalnum(): i -= 1
    return i

def next_word(text, i):
    while i < len(text) and text[i].isalnum(): i += 1
    while i < len(text) and not text[i].isalnum(): i += 1
    return i


@dataclass(frozen=True)
class TextInput:
    '''
    Single-line text box. Every edit returns a new TextInput:

        box = TextInput().handle(KeyPress("h")).handle(KeyPress("i"))
        box.value == "hi"

    Enter is left alone; whoever owns the box decides what submitting means.
    '''
    value: str = ""
    cursor: int = 0

    def insert(self, typed: str) -> 'TextInput':
        v, c = self.value, self.cursor
        return TextInput(v[:c] + typed + v[c:], c + len(typed))

    def handle(self, key) -> 'TextInput':
        text, cursor = self.value, self.cursor
        name = key.key_name

        if key.is_text:
            return self.insert(key.char)
        if name == 'KEY_LEFT' and cursor > 0: cursor -= 1
        elif name == 'KEY_RIGHT' and cursor < len(text): cursor += 1
        elif name == 'KEY_HOME': cursor = 0
        elif name == 'KEY_END': cursor = len(text)
        elif name == 'KEY_BACKSPACE' and cursor > 0:
            text = text[:cursor-1] + text[cursor:]
            cursor -= 1
        elif name == 'KEY_DELETE' and cursor < len(text):
            text = text[:cursor] + text[cursor+1:]
        elif name == 'KEY_CTRL_BACKSPACE' and cursor > 0:
            new_cursor = prev_word(text, cursor)
            text = text[:new_cursor] + text[cursor:]
            cursor = new_cursor
        elif name == 'KEY_CTRL_DELETE' and cursor < len(text):
            text = text[:cursor] + text[next_word(text, cursor):]
        elif name == 'KEY_CTRL_LEFT': cursor = prev_word(text, cursor)
        elif name == 'KEY_CTRL_RIGHT': cursor = next_word(text, cursor)
        else:
            return self

        return replace(self, value=text, cursor=cursor)
