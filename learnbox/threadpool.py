"""A fixed-size pool of worker threads fed through a shared queue."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable

Job = Callable[[], object]

_TERMINATE = object()


class PoolCreationError(ValueError):
    """Raised when a pool is asked for no threads."""


class Worker:
    """A thread that runs jobs from a queue until told to stop."""

    def __init__(self, worker_id: int, receiver: queue.SimpleQueue) -> None:
        self.id = worker_id
        self.thread: threading.Thread | None = threading.Thread(
            target=self._run, args=(receiver,), name=f"worker-{worker_id}", daemon=True
        )
        self.thread.start()

    def _run(self, receiver: queue.SimpleQueue) -> None:
        while True:
            message = receiver.get()
            if message is _TERMINATE:
                print(f"Worker {self.id} disconnected; shutting down.")
                break
            print(f"Worker {self.id} got a job;executing")
            message()

    def join(self) -> None:
        """Wait for the thread to finish; later calls do nothing."""
        if self.thread is not None:
            self.thread.join()
            self.thread = None


class ThreadPool:
    """Runs submitted jobs on a fixed number of worker threads."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise PoolCreationError("the number of threads must be greater than 0")
        self._sender: queue.SimpleQueue = queue.SimpleQueue()
        self._workers = [Worker(worker_id, self._sender) for worker_id in range(size)]
        self._closed = False

    @classmethod
    def build(cls, size: int) -> "ThreadPool":
        return cls(size)

    @property
    def workers(self) -> tuple[Worker, ...]:
        return tuple(self._workers)

    def execute(self, job: Job) -> None:
        if self._closed:
            raise RuntimeError("cannot execute on a pool that has been shut down")
        self._sender.put(job)

    def shutdown(self) -> None:
        """Stop every worker once queued jobs are done, and wait for them."""
        if self._closed:
            return
        self._closed = True
        print("Sending terminate message to all workers.")
        # Every terminate goes out before any join, so no worker waits on one
        # that has already taken the message meant for it.
        for _ in self._workers:
            self._sender.put(_TERMINATE)
        print("Shutting down all workers.")
        for worker in self._workers:
            print(f"shutting down worker {worker.id}")
            worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()