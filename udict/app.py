import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

os.environ.setdefault('ESCDELAY', '25')  # reduce escape key delay (ms)

from blessed import Terminal

from .config import Config
from .events import KeyPress, Quit, Resize
from .fetch import FetchDispatcher, Mailbox
from .screen import ScreenBuffer
from .state import AppState
from .update import update
from .view import compose, paint

logger = logging.getLogger(__name__)

TICK = 0.011  # seconds to wait for a key before looking at the mailbox again


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(log_file=None) -> logging.Logger:
    '''
    The screen belongs to the UI, so logs only ever go to a file.
    Without a log file everything is dropped.
    '''
    root = logging.getLogger("udict")
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.propagate = False
    if not log_file:
        root.addHandler(logging.NullHandler())
        return root

    root.setLevel(logging.DEBUG)
    file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JsonFormatter())
    root.addHandler(file_handler)
    return root


def run(term, config: Config, dispatcher=None, mailbox=None, stream=None) -> AppState:
    '''
    Main loop: read keys, notice resizes, drain finished lookups, feed
    everything through `update` in arrival order, repaint when something
    changed. Returns the final state once the user quits.
    '''
    mailbox = mailbox or Mailbox()
    dispatcher = dispatcher or FetchDispatcher(mailbox.put, config.api_url, config.timeout)
    theme = config.theme

    state = AppState()
    size = (term.width, term.height)
    events = [Resize(*size)]
    buf = ScreenBuffer(*size)
    dirty = True

    try:
        with term.cbreak(), term.hidden_cursor(), term.fullscreen():
            while True:
                try:
                    key = term.inkey(timeout=TICK)
                except KeyboardInterrupt:
                    key = None
                    events.append(KeyPress('\x03'))
                if key:
                    events.append(KeyPress.from_keystroke(key))

                if (term.width, term.height) != size:
                    size = (term.width, term.height)
                    events.append(Resize(*size))
                    buf = ScreenBuffer(*size)

                dispatcher.expire()
                events.extend(mailbox.take())

                for event in events:
                    new_state, cmd = update(state, event)
                    if isinstance(cmd, Quit):
                        return state
                    if cmd is not None:
                        dispatcher.dispatch(cmd)
                    dirty = dirty or new_state is not state
                    state = new_state
                events = []

                if dirty:
                    paint(buf, compose(state, theme), theme)
                    buf.flush(term, stream)
                    dirty = False
    finally:
        dispatcher.shutdown()


def main() -> int:
    try:
        config = Config.from_env()
        setup_logging(config.log_file)
    except (ValueError, OSError) as exc:
        print(f"An error occurred starting the program: {exc}", file=sys.stderr)
        return 1

    try:
        term = Terminal()
        if not term.is_a_tty:
            raise OSError("standard output is not a terminal")
        state = run(term, config)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        logger.exception("could not start the terminal ui")
        print(f"An error occurred starting the program: {exc}", file=sys.stderr)
        return 1

    logger.info("quit with query %r", state.query)
    return 0
