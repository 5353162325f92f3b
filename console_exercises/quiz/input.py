"""Background line reading for timed prompts.

A blocking ``readline`` cannot be interrupted, so lines are read on a daemon
thread and handed over through futures. A requester that stops waiting calls
``abandon``: a read that is already in progress then passes its line on to the
next request instead of the abandoned one. Lines that complete before
``abandon`` is called stay with their own request, so an answer typed for one
question is never counted for another.
"""

import logging
import queue
import threading
from concurrent.futures import Future
from typing import Protocol

logger = logging.getLogger(__name__)

# Stand-in for a line that could not be decoded; never a valid answer
UNDECODABLE_LINE = "�"


class InputExhausted(Exception):
    """Raised when the input source has no more lines."""


class ReadAbandoned(Exception):
    """Set on an abandoned request whose line went to a later request."""


class LineSource(Protocol):
    """Anything with text-stream ``readline`` semantics ('' means end of input)."""

    def readline(self) -> str: ...


class LineReader:
    """Serve line requests from a single daemon reader thread, in request order."""

    def __init__(self, source: LineSource, name: str = "line-reader"):
        self._source = source
        self._name = name
        self._requests: "queue.SimpleQueue[Future[str] | None]" = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._abandoned: set[Future] = set()
        self._carried: tuple[str | None, BaseException | None] | None = None
        self._exhausted = threading.Event()

    @property
    def exhausted(self) -> bool:
        """Whether end of input has been reached."""
        return self._exhausted.is_set()

    def request_line(self) -> "Future[str]":
        """
        Ask for the next line of input.

        Returns:
            A future resolving to the line without its trailing newline, or
            failing with InputExhausted at end of input. Cancelling the future
            before the reader picks it up leaves the line for the next request.
        """
        future: Future[str] = Future()
        with self._lock:
            if self._carried is not None:
                line, error = self._carried
                self._carried = None
                future.set_running_or_notify_cancel()
                self._resolve(future, line, error)
                return future

            if self.exhausted:
                future.set_exception(InputExhausted("No more input available"))
                return future

            self._ensure_started()
            self._requests.put(future)
        return future

    def abandon(self, future: "Future[str]") -> None:
        """
        Stop waiting for a requested line.

        A request the reader has not started is cancelled. If its read is in
        progress, the line it produces goes to the next request.
        """
        with self._lock:
            if future.cancel():
                return
            if future.running():
                self._abandoned.add(future)

    def close(self) -> None:
        """Stop the reader thread once it finishes the request it is serving."""
        self._requests.put(None)

    def _ensure_started(self) -> None:
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._serve, name=self._name, daemon=True
            )
            self._thread.start()

    def _serve(self) -> None:
        while True:
            future = self._requests.get()
            if future is None:
                return
            if not future.set_running_or_notify_cancel():
                logger.debug("Skipping cancelled line request")
                continue

            line, error = self._read()
            with self._lock:
                if future not in self._abandoned:
                    self._resolve(future, line, error)
                    continue
                self._abandoned.discard(future)
                future.set_exception(ReadAbandoned("Line passed to a later request"))
                if not self._hand_over(line, error):
                    return

    def _read(self) -> tuple[str | None, BaseException | None]:
        if self.exhausted:
            return None, InputExhausted("No more input available")
        try:
            line = self._source.readline()
        except UnicodeDecodeError as e:
            logger.warning("Discarding undecodable input: %s", e)
            return UNDECODABLE_LINE, None
        except Exception as e:
            logger.error("Reading input failed: %s", e)
            return None, e

        if not line:
            logger.info("End of input reached")
            self._exhausted.set()
            return None, InputExhausted("No more input available")
        return line.rstrip("\r\n"), None

    def _hand_over(self, line: str | None, error: BaseException | None) -> bool:
        """Give the result of an abandoned read to the next live request.

        Keeps it for the next ``request_line`` call when nothing is waiting.
        Must be called with the lock held. Returns False if the reader was
        closed meanwhile.
        """
        while True:
            try:
                successor = self._requests.get_nowait()
            except queue.Empty:
                logger.debug("Holding line of an abandoned read for the next request")
                self._carried = (line, error)
                return True
            if successor is None:
                return False
            if successor.set_running_or_notify_cancel():
                self._resolve(successor, line, error)
                return True

    @staticmethod
    def _resolve(
        future: "Future[str]", line: str | None, error: BaseException | None
    ) -> None:
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line)
