from dataclasses import dataclass, field
from typing import Literal, Optional

from .errors import LookupFailed
from .models import ResultSet
from .textinput import TextInput


@dataclass(frozen=True)
class Viewport:
    width: int = 0
    height: int = 0


Phase = Literal["idle", "fetching", "displaying", "failed"]


@dataclass(frozen=True)
class AppState:
    '''
    One value per processed event. `update` builds the next one with
    `dataclasses.replace`; nothing mutates a published AppState.

    `generation` counts submitted lookups. A response is only accepted
    if it carries the current generation, so a slow answer to an old
    query can't overwrite a newer one.
    '''
    input: TextInput = field(default_factory=TextInput)
    results: ResultSet = ()
    viewport: Viewport = field(default_factory=Viewport)
    error: Optional[LookupFailed] = None
    generation: int = 0
    pending: Optional[str] = None

    @property
    def query(self) -> str:
        return self.input.value

    @property
    def current(self):
        '''The entry on screen. Only the first result is ever shown.'''
        return self.results[0] if self.results else None

    @property
    def phase(self) -> Phase:
        if self.pending is not None: return "fetching"
        if self.error is not None: return "failed"
        if self.results: return "displaying"
        return "idle"
