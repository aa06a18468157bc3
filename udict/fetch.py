'''
The only part of the program that talks to the outside world.

Each lookup runs on its own daemon thread and reports back through a
Mailbox that the main loop drains once per tick:

    mailbox = Mailbox()
    dispatcher = FetchDispatcher(mailbox.put)
    dispatcher.dispatch(Fetch("yeet", 1))
    ...
    for event in mailbox.take(): ...
'''
import logging
import threading
import time
from typing import Callable, List, Optional
from urllib.parse import quote_plus

import requests

from .config import API_URL, TIMEOUT
from .errors import DecodeError, FetchTimeout, LookupFailed, RequestError, TransportError
from .events import Event, Fetch, FetchFailed, FetchSucceeded
from .models import ResultSet, decode_results

logger = logging.getLogger(__name__)


class Mailbox:
    def __init__(self):
        self._val = []
        self._lock = threading.Lock()
    def take(self) -> List[Event]:
        with self._lock:
            v = self._val
            self._val = []
            return v
    def put(self, x: Event):
        with self._lock:
            self._val.append(x)


def build_url(query: str, api_url: str = API_URL) -> str:
    return f"{api_url}?term={quote_plus(query)}"


_BAD_REQUEST = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
)


def fetch_definitions(query: str, session=None, api_url: str = API_URL, timeout: float = TIMEOUT) -> ResultSet:
    """
    GET the definitions of `query`. One attempt, no retries.
    Raises a LookupFailed subclass on anything but a decodable 2xx answer.
    """
    session = session or requests
    url = build_url(query, api_url)
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except _BAD_REQUEST as exc:
        raise RequestError(f"could not build request for {url}: {exc}") from exc
    except requests.Timeout as exc:
        raise FetchTimeout(f"no answer within {timeout:g}s") from exc
    except requests.RequestException as exc:
        raise TransportError(str(exc) or type(exc).__name__) from exc

    try:
        body = resp.json()
    except ValueError as exc:
        raise DecodeError(f"response is not JSON: {exc}") from exc
    return decode_results(body)


def fetch_event(cmd: Fetch, session=None, api_url: str = API_URL, timeout: float = TIMEOUT) -> Event:
    '''Run `cmd` and turn the outcome into exactly one event.'''
    try:
        results = fetch_definitions(cmd.query, session, api_url, timeout)
    except LookupFailed as exc:
        return FetchFailed(cmd.generation, cmd.query, exc)
    return FetchSucceeded(cmd.generation, cmd.query, results)


class FetchTask:
    '''
    One in-flight lookup. Cancelling closes its session (abandoning the
    connection if the request is still going) and guarantees it posts nothing.
    '''
    def __init__(self, cmd: Fetch, started: float, session=None):
        self.cmd = cmd
        self.started = started
        self.session = session if session is not None else requests.Session()
        self.thread: Optional[threading.Thread] = None
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self):
        if self.cancelled: return
        self._cancelled.set()
        self.session.close()

    def join(self, timeout: Optional[float] = None):
        if self.thread: self.thread.join(timeout)


class FetchDispatcher:
    '''
    Starts lookups off the main thread and enforces their deadline.

    Only the newest lookup matters: dispatching a new one cancels the one
    before it. `expire` must be called regularly (once per loop tick); it
    fails and cancels a lookup that has run past `timeout`.
    '''
    def __init__(self, post: Callable[[Event], None], api_url: str = API_URL, timeout: float = TIMEOUT,
                 fetch=fetch_event, clock=time.monotonic, session_factory=requests.Session):
        self.post = post
        self.api_url = api_url
        self.timeout = timeout
        self.fetch = fetch
        self.clock = clock
        self.session_factory = session_factory
        self.current: Optional[FetchTask] = None
        self._lock = threading.Lock()

    def dispatch(self, cmd: Fetch) -> FetchTask:
        task = FetchTask(cmd, self.clock(), self.session_factory())
        with self._lock:
            if self.current is not None:
                self.current.cancel()
            self.current = task
        logger.info("fetching %r (generation %d)", cmd.query, cmd.generation)
        task.thread = threading.Thread(target=self._run, args=(task,), daemon=True)
        task.thread.start()
        return task

    def expire(self):
        with self._lock:
            task = self.current
            if task is None or task.cancelled:
                return
            if self.clock() - task.started < self.timeout:
                return
            task.cancel()
            self.current = None
        logger.warning("lookup for %r timed out after %gs", task.cmd.query, self.timeout)
        self.post(FetchFailed(task.cmd.generation, task.cmd.query,
                              FetchTimeout(f"no answer within {self.timeout:g}s")))

    def shutdown(self):
        with self._lock:
            if self.current is not None:
                self.current.cancel()
            self.current = None

    def _run(self, task: FetchTask):
        try:
            event = self.fetch(task.cmd, task.session, self.api_url, self.timeout)
        except Exception as exc:
            logger.exception("lookup for %r crashed", task.cmd.query)
            event = FetchFailed(task.cmd.generation, task.cmd.query, TransportError(str(exc) or type(exc).__name__))
        with self._lock:
            if task.cancelled:
                logger.debug("discarding result of cancelled lookup %r", task.cmd.query)
                return
            self.post(event)
            if self.current is task:
                self.current = None
            task.session.close()
