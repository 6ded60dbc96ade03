"""The dining philosophers, with threads and with asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
import queue
import sys
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Plato", "Aristotle", "Thales", "Pythagoras")

_CHANNEL_CAPACITY = 10
_DONE = object()


def _thought(name: str) -> str:
    return f"Eureka! {name} has a new idea!"


def _names(names: Iterable[str]) -> list[str]:
    names = list(names)
    if len(names) < 2:
        raise ValueError("need at least two philosophers to share forks")
    return names


@dataclass
class Philosopher:
    """A philosopher sharing forks (locks) with the neighbours, run in a thread."""

    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: queue.Queue

    def think(self) -> None:
        """Share a new idea on the thoughts channel."""
        self.thoughts.put(_thought(self.name))

    def eat(self) -> None:
        """Pick up both forks, eat for a moment and put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(0.010)


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> list[str]:
    """Let each philosopher eat and think ``rounds`` times in its own thread.

    Returns every thought in the order it was received.
    """
    names = _names(names)
    thoughts: queue.Queue = queue.Queue(maxsize=_CHANNEL_CAPACITY)
    forks = [threading.Lock() for _ in names]

    philosophers = []
    for i, name in enumerate(names):
        left_fork, right_fork = forks[i], forks[(i + 1) % len(forks)]
        # Break the symmetry so that the philosophers cannot deadlock.
        if i == len(forks) - 1:
            left_fork, right_fork = right_fork, left_fork
        philosophers.append(Philosopher(name, left_fork, right_fork, thoughts))

    def run(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                philosopher.eat()
                philosopher.think()
        finally:
            thoughts.put(_DONE)

    threads = [
        threading.Thread(target=run, args=(philosopher,), daemon=True)
        for philosopher in philosophers
    ]
    for thread in threads:
        thread.start()

    collected: list[str] = []
    finished = 0
    while finished < len(threads):
        item = thoughts.get()
        if item is _DONE:
            finished += 1
        else:
            collected.append(item)

    for thread in threads:
        thread.join()
    return collected


@dataclass
class AsyncPhilosopher:
    """A philosopher sharing forks (asyncio locks) with the neighbours."""

    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: asyncio.Queue

    async def think(self) -> None:
        """Share a new idea on the thoughts channel."""
        await self.thoughts.put(_thought(self.name))

    async def eat(self) -> None:
        """Pick up both forks, eat for a moment and put them down."""
        async with self.left_fork:
            # Give other tasks a chance to run before taking the second fork.
            await asyncio.sleep(0.001)
            async with self.right_fork:
                print(f"{self.name} is eating...")
                await asyncio.sleep(0.005)


async def dine_async(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100
) -> list[str]:
    """Let each philosopher think and eat ``rounds`` times in its own task.

    Returns every thought in the order it was received.
    """
    names = _names(names)
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=_CHANNEL_CAPACITY)
    forks = [asyncio.Lock() for _ in names]

    philosophers = []
    for i, name in enumerate(names):
        left_fork, right_fork = forks[i], forks[(i + 1) % len(forks)]
        if i % 2 == 1:
            left_fork, right_fork = right_fork, left_fork
        philosophers.append(AsyncPhilosopher(name, left_fork, right_fork, thoughts))

    async def run(philosopher: AsyncPhilosopher) -> None:
        try:
            for _ in range(rounds):
                await philosopher.think()
                await philosopher.eat()
        finally:
            await thoughts.put(_DONE)

    tasks = [asyncio.ensure_future(run(philosopher)) for philosopher in philosophers]

    collected: list[str] = []
    finished = 0
    while finished < len(tasks):
        item = await thoughts.get()
        if item is _DONE:
            finished += 1
        else:
            collected.append(item)

    await asyncio.gather(*tasks)
    return collected


def main(argv: list[str] | None = None) -> int:
    """Run the dinner and print the philosophers' thoughts."""
    parser = argparse.ArgumentParser(description="Dining philosophers.")
    parser.add_argument("--async", dest="use_async", action="store_true",
                        help="use asyncio tasks instead of threads")
    parser.add_argument("--rounds", type=int, default=100,
                        help="how often each philosopher eats and thinks")
    args = parser.parse_args(argv)

    if args.use_async:
        for thought in asyncio.run(dine_async(PHILOSOPHERS, args.rounds)):
            print(f"Here is a thought: {thought}")
    else:
        for thought in dine(PHILOSOPHERS, args.rounds):
            print(thought)
    return 0


if __name__ == "__main__":
    sys.exit(main())