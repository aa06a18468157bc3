'''
Everything that can go wrong with a lookup.
None of these ever end the program; they are shown on screen instead.
'''


class LookupFailed(Exception):
    """Base class for a lookup that produced no result set."""


class RequestError(LookupFailed):
    """The request could not be built (bad url, bad scheme)."""


class TransportError(LookupFailed):
    """Network unreachable, connection reset, non-2xx status..."""


class FetchTimeout(TransportError):
    """The lookup did not finish before its deadline."""


class DecodeError(LookupFailed):
    """The body was not JSON, or not shaped like a definition list."""
