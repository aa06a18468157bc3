import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

API_URL = "https://api.urbandictionary.com/v0/define"
TIMEOUT = 5.0


@dataclass(frozen=True)
class Theme:
    '''Colours are blessed attribute names, e.g. "white", "on_darkolivegreen".'''
    background: str = "darkolivegreen"
    foreground: str = "white"
    accent: str = "bright_yellow"
    dim: str = "bright_black"
    error: str = "bright_red"
    bold: bool = True
    padding: int = 4
    marker: str = "-"
    prompt: str = "> "
    placeholder: str = "Search word index"
    cursor: str = "█"


@dataclass(frozen=True)
class Config:
    api_url: str = API_URL
    timeout: float = TIMEOUT
    log_file: Optional[str] = None
    theme: Theme = field(default_factory=Theme)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> 'Config':
        '''
        UDICT_API_URL   lookup endpoint (default: urbandictionary v0/define)
        UDICT_TIMEOUT   seconds before a lookup is given up on (default: 5)
        UDICT_LOG_FILE  write a JSON log here; nothing is logged otherwise
        '''
        timeout = environ.get("UDICT_TIMEOUT")
        if timeout is not None:
            try:
                timeout = float(timeout)
            except ValueError:
                raise ValueError(f"UDICT_TIMEOUT must be a number of seconds, got {timeout!r}") from None
            if timeout <= 0:
                raise ValueError(f"UDICT_TIMEOUT must be positive, got {timeout}")
        return cls(
            api_url=environ.get("UDICT_API_URL") or API_URL,
            timeout=TIMEOUT if timeout is None else timeout,
            log_file=environ.get("UDICT_LOG_FILE") or None,
        )
