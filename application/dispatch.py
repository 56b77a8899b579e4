import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional

logger = logging.getLogger("todo_graph.dispatch")


class BackgroundDispatcher:
    """Run dependency intents off the caller's thread without waiting for them.

    Failures are only logged: reconciliation happens through the next snapshot.
    """

    def __init__(self, max_workers: int = 2, executor: Optional[ThreadPoolExecutor] = None) -> None:
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="todo-graph")
        self._futures: List[Future] = []

    def wrap(self, func: Callable[[str, str], object]) -> Callable[[str, str], None]:
        def submit(source_id: str, target_id: str) -> None:
            self.submit(func, source_id, target_id)

        return submit

    def submit(self, func: Callable[..., object], *args) -> Future:
        future = self._executor.submit(func, *args)
        future.add_done_callback(_log_failure)
        self._futures.append(future)
        return future

    def drain(self, timeout: Optional[float] = None) -> int:
        """Wait for submitted intents (used before exit); returns failures seen."""
        pending, self._futures = self._futures, []
        if not pending:
            return 0
        wait(pending, timeout=timeout)
        return sum(1 for f in pending if f.done() and f.exception() is not None)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)


def _log_failure(future: Future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.warning("Dependency update failed: %s", exc)


__all__ = ["BackgroundDispatcher"]
