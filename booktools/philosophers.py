"""The dining philosophers, sharing forks between threads."""

from __future__ import annotations

import queue
import sys
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Plato", "Aristotle", "Thales", "Pythagoras")

_DONE = object()


@dataclass
class Philosopher:
    """A philosopher who eats with two forks and reports thoughts."""

    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: queue.Queue

    def think(self) -> None:
        """Report a new idea."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both forks, eat briefly, and put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(0.01)


def _run(philosophers: list[Philosopher], thoughts: queue.Queue, rounds: int) -> Iterator[str]:
    def live(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                philosopher.eat()
                philosopher.think()
        finally:
            thoughts.put(_DONE)

    threads = [
        threading.Thread(target=live, args=(philosopher,), daemon=True)
        for philosopher in philosophers
    ]
    for thread in threads:
        thread.start()
    remaining = len(threads)
    while remaining:
        thought = thoughts.get()
        if thought is _DONE:
            remaining -= 1
        else:
            yield thought
    for thread in threads:
        thread.join()


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers round a table and yield their thoughts as they come.

    Each philosopher eats and thinks ``rounds`` times. The last one picks up
    the forks in the opposite order, which prevents deadlock.
    """
    names = list(names)
    if len(names) < 2:
        raise ValueError("at least two philosophers are needed to share forks")
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]
    philosophers = []
    for i, name in enumerate(names):
        left, right = forks[i], forks[(i + 1) % len(forks)]
        if i == len(forks) - 1:
            left, right = right, left
        philosophers.append(Philosopher(name, left, right, thoughts))
    return _run(philosophers, thoughts, rounds)


def main(argv=None) -> int:
    """Let the philosophers dine and print their thoughts."""
    for thought in dine():
        print(thought)
    return 0


if __name__ == "__main__":
    sys.exit(main())