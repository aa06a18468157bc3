import logging
from dataclasses import replace
from typing import Optional, Tuple

from .events import Command, Event, Fetch, FetchFailed, FetchSucceeded, KeyPress, Quit, Resize
from .state import AppState, Viewport

logger = logging.getLogger(__name__)


def update(state: AppState, event: Event) -> Tuple[AppState, Optional[Command]]:
    '''
    The whole state machine. Returns the next state and at most one command
    for the driver to carry out (start a lookup, or quit).
    '''
    if isinstance(event, KeyPress):
        return _on_key(state, event)

    if isinstance(event, Resize):
        return replace(state, viewport=Viewport(event.width, event.height)), None

    if isinstance(event, (FetchSucceeded, FetchFailed)):
        if event.generation != state.generation:
            logger.info("dropping stale response for %r (generation %d, current %d)",
                        event.query, event.generation, state.generation)
            return state, None
        if isinstance(event, FetchSucceeded):
            logger.info("%d result(s) for %r", len(event.results), event.query)
            return replace(state, results=event.results, error=None, pending=None), None
        logger.warning("lookup for %r failed: %s", event.query, event.cause)
        # old results stay on screen
        return replace(state, error=event.cause, pending=None), None

    raise TypeError(f"unknown event: {event!r}")


def _on_key(state: AppState, key: KeyPress) -> Tuple[AppState, Optional[Command]]:
    if key.is_quit:
        return state, Quit()

    if key.is_submit:
        query = state.query
        if not query.strip():
            return state, None
        generation = state.generation + 1
        logger.info("submitting %r (generation %d)", query, generation)
        return replace(state, generation=generation, pending=query), Fetch(query, generation)

    edited = state.input.handle(key)
    if edited == state.input:
        return state, None
    return replace(state, input=edited), None
