"""A fixed-size pool of worker threads consuming a FIFO task queue."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable


class ThreadPool:
    """Run submitted callables on a fixed number of worker threads."""

    def __init__(self, threads: int) -> None:
        if threads < 0:
            raise ValueError("thread count must not be negative")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers = [threading.Thread(target=self._work, daemon=True) for _ in range(threads)]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or self._tasks)
                if self._stop and not self._tasks:
                    return
                future, func, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._condition:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._tasks.append((future, func, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let the workers drain the queue and join them."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()