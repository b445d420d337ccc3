from __future__ import annotations

import concurrent.futures
import logging
import queue
import threading
from types import TracebackType

from . import intents
from .client import TransportError, WebhookClient
from .models import EditState
from .reducer import apply

logger = logging.getLogger(__name__)


class Composer:
    """
    Owns an :class:`EditState` and feeds intents through the reducer.

    All state changes happen on the thread calling :meth:`dispatch` and
    :meth:`process_completions`. Sends run on the executor; their outcomes
    are queued as ``SendCompleted`` intents and only applied when the owner
    drains the queue, so the state is never touched from a worker.
    """

    def __init__(
        self,
        client: WebhookClient,
        *,
        state: EditState | None = None,
        executor: concurrent.futures.Executor | None = None,
    ):
        self.client = client
        self._state = state or EditState()
        self._executor = executor or concurrent.futures.ThreadPoolExecutor(thread_name_prefix="webhook-send")
        self._owns_executor = executor is None
        self._completions: queue.SimpleQueue[intents.SendCompleted] = queue.SimpleQueue()
        self._in_flight: set[concurrent.futures.Future] = set()
        self._lock = threading.Lock()

    def __enter__(self) -> "Composer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def pending_sends(self) -> int:
        with self._lock:
            return sum(not future.done() for future in self._in_flight)

    def dispatch(self, intent: intents.Intent) -> None:
        self._state, effect = apply(self._state, intent)
        if effect is not None:
            self._launch(effect)

    def process_completions(self) -> int:
        applied = 0
        while True:
            try:
                completion = self._completions.get_nowait()
            except queue.Empty:
                return applied
            self.dispatch(completion)
            applied += 1

    def wait_for_sends(self, timeout: float | None = None) -> int:
        with self._lock:
            futures = list(self._in_flight)
        concurrent.futures.wait(futures, timeout=timeout)
        return self.process_completions()

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self.client.close()

    def _launch(self, effect: intents.SendEffect) -> None:
        future = self._executor.submit(self._send, effect)
        with self._lock:
            self._in_flight.add(future)
        future.add_done_callback(self._forget)

    def _forget(self, future: concurrent.futures.Future) -> None:
        with self._lock:
            self._in_flight.discard(future)

    def _send(self, effect: intents.SendEffect) -> None:
        # Runs on the executor; the outcome is queued before the future completes.
        try:
            self.client.send(effect.url, effect.payload)
        except TransportError as exc:
            self._completions.put(intents.SendCompleted(error=str(exc)))
        except Exception as exc:
            logger.exception("Unexpected error while sending webhook")
            self._completions.put(intents.SendCompleted(error=str(exc) or type(exc).__name__))
        else:
            self._completions.put(intents.SendCompleted())
