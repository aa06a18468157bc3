'''
Messages flowing into `update` and commands flowing out of it.
'''
from dataclasses import dataclass
from typing import Optional, Union

from .errors import LookupFailed
from .models import ResultSet


# --- messages ---

@dataclass(frozen=True)
class KeyPress:
    char: str
    name: Optional[str] = None

    # terminals disagree on what these send
    KEY_ALIASES = {'\x17': 'KEY_CTRL_BACKSPACE', '\x1bd': 'KEY_CTRL_DELETE', '\x03': 'KEY_CTRL_C'}

    @classmethod
    def from_keystroke(cls, ks) -> 'KeyPress':
        '''Wrap a blessed Keystroke.'''
        return cls(str(ks), ks.name or None)

    @property
    def key_name(self) -> Optional[str]:
        return self.KEY_ALIASES.get(self.char, self.name)

    @property
    def is_text(self) -> bool:
        return self.key_name is None and len(self.char) == 1 and self.char.isprintable()

    @property
    def is_quit(self) -> bool:
        return self.key_name == 'KEY_CTRL_C'

    @property
    def is_submit(self) -> bool:
        return self.key_name == 'KEY_ENTER'


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    query: str
    results: ResultSet


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    query: str
    cause: LookupFailed


Event = Union[KeyPress, Resize, FetchSucceeded, FetchFailed]


# --- commands ---

@dataclass(frozen=True)
class Fetch:
    query: str
    generation: int


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[Fetch, Quit]
