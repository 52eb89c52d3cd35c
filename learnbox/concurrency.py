"""Threads, channels and locks in a few small demonstrations."""

from __future__ import annotations

import queue
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar


class Drawable(Protocol):
    def draw(self) -> str: ...


D = TypeVar("D", bound=Drawable)


@dataclass
class Button:
    width: int
    height: int

    def draw(self) -> str:
        """Print the button's drawing output and return it."""
        output = "print"
        print(output)
        return output


@dataclass
class Screen(Generic[D]):
    components: list[D] = field(default_factory=list)


def count_with_threads(workers: int = 9) -> int:
    """Have ``workers`` threads each add one to a shared counter; return it."""
    lock = threading.Lock()
    counter = 0

    def increment() -> None:
        nonlocal counter
        with lock:
            counter += 1

    threads = [threading.Thread(target=increment) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with lock:
        return counter


def relay_messages(messages: Iterable[str], delay: float = 1.0) -> Iterator[str]:
    """Send messages from a producer thread, pausing ``delay`` seconds after each."""
    items = list(messages)
    channel: queue.SimpleQueue = queue.SimpleQueue()
    finished = object()

    def produce() -> None:
        for item in items:
            channel.put(item)
            time.sleep(delay)
        channel.put(finished)

    producer = threading.Thread(target=produce, daemon=True)
    producer.start()
    while (received := channel.get()) is not finished:
        yield received
    producer.join()


def _print_range(label: str, stop: int) -> None:
    for number in range(1, stop):
        print(f"{label} number is {number}")


def main(argv: Sequence[str] | None = None) -> int:
    spawned = threading.Thread(target=_print_range, args=("spawn", 30))
    spawned.start()
    _print_range("main", 2)
    spawned.join()

    numbers = [1, 2, 3]

    def show_list() -> None:
        print(f"list is {numbers}")
        for item in numbers:
            print(f"list item is {item}")

    lister = threading.Thread(target=show_list)
    lister.start()
    lister.join()

    for message in relay_messages(["hello", "world", "huixing", "giegie"]):
        print(f"message: {message}")

    guard = threading.Lock()
    value = 5
    with guard:
        value = 6
    print(f"m = {value}")

    print(f"Result: {count_with_threads()}")

    screen = Screen([Button(width=10, height=10)])
    screen.components[0].draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())