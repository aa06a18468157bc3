from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from .errors import DecodeError


@dataclass(frozen=True)
class DefinitionEntry:
    headword: str = ""
    definition: str = ""
    example: str = ""
    permalink: str = ""
    author: str = ""
    thumbs_up: int = 0
    thumbs_down: int = 0
    written_on: Optional[datetime] = None
    vote_state: str = ""
    id: int = 0


ResultSet = Tuple[DefinitionEntry, ...]


# python name -> json key
_STR_FIELDS = {
    "headword": "word",
    "definition": "definition",
    "example": "example",
    "permalink": "permalink",
    "author": "author",
    "vote_state": "current_vote",
}
_INT_FIELDS = {
    "thumbs_up": "thumbs_up",
    "thumbs_down": "thumbs_down",
    "id": "defid",
}


def _parse_timestamp(value: str) -> datetime:
    # fromisoformat only learned about "Z" in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise DecodeError(f"bad written_on timestamp: {value!r}") from None


def decode_entry(item: Any) -> DefinitionEntry:
    if not isinstance(item, dict):
        raise DecodeError(f"expected a definition object, got {type(item).__name__}")

    kw = {}
    for name, key in _STR_FIELDS.items():
        v = item.get(key)
        if v is None: continue
        if not isinstance(v, str):
            raise DecodeError(f"'{key}' should be a string, got {type(v).__name__}")
        kw[name] = v
    for name, key in _INT_FIELDS.items():
        v = item.get(key)
        if v is None: continue
        # bool is an int subclass; json true is not a vote count
        if isinstance(v, bool) or not isinstance(v, int):
            raise DecodeError(f"'{key}' should be an integer, got {type(v).__name__}")
        kw[name] = v

    written = item.get("written_on")
    if written is not None:
        if not isinstance(written, str):
            raise DecodeError(f"'written_on' should be a string, got {type(written).__name__}")
        kw["written_on"] = _parse_timestamp(written)

    return DefinitionEntry(**kw)


def decode_results(body: Any) -> ResultSet:
    """
    Turn a decoded `/v0/define` body into a ResultSet, keeping server order.
    Missing fields default to empty/zero, wrongly-typed ones raise DecodeError.
    """
    if not isinstance(body, dict):
        raise DecodeError(f"expected a JSON object, got {type(body).__name__}")
    items = body.get("list")
    if items is None:
        return ()
    if not isinstance(items, list):
        raise DecodeError(f"'list' should be an array, got {type(items).__name__}")
    return tuple(decode_entry(item) for item in items)
