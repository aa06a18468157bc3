from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_udict_logger():
    """setup_logging rewires the package logger; put it back after each test."""
    log = logging.getLogger("udict")
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    yield
    for h in list(log.handlers):
        if h not in handlers:
            log.removeHandler(h)
            h.close()
    log.handlers[:] = handlers
    log.setLevel(level)
    log.propagate = propagate
