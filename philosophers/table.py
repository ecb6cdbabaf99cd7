"""Shared state of the dining table: philosophers, forks and locks."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from philosophers.clock import now_ms
from philosophers.parsing import Settings


@dataclass
class Philosopher:
    """One seat at the table.

    ``left_fork`` is picked up first, ``right_fork`` second.
    """

    position: int
    right_fork: int
    left_fork: int
    meal_limit: int | None = None
    meals_eaten: int = 0
    start_time: int = 0
    last_meal_time: int = 0

    def is_full(self) -> bool:
        """True once the philosopher has eaten the required number of meals."""
        if self.meal_limit is None or self.meal_limit < 0:
            return False
        return self.meals_eaten >= self.meal_limit


class Table:
    """Forks, philosophers and the locks guarding their shared state."""

    def __init__(
        self,
        settings: Settings,
        output: TextIO | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.settings = settings
        self.clock = clock
        self._output = output
        count = settings.count
        self.philosophers = [
            Philosopher(
                position=i + 1,
                right_fork=i,
                left_fork=(i - 1) % count,
                meal_limit=settings.meals,
            )
            for i in range(count)
        ]
        self.forks = [threading.Lock() for _ in range(count)]
        self._meal_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._stopped = threading.Event()

    def is_stopped(self) -> bool:
        """True once a death or a full table has ended the simulation."""
        return self._stopped.is_set()

    def stop(self) -> None:
        """End the simulation; later announcements are suppressed."""
        self._stopped.set()

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped status line unless the simulation has ended."""
        with self._print_lock:
            elapsed = self.clock() - philosopher.start_time
            if not self.is_stopped():
                out = self._output if self._output is not None else sys.stdout
                print(f"{elapsed} {philosopher.position} {message}", file=out, flush=True)

    def record_meal(self, philosopher: Philosopher) -> None:
        """Mark the start of a meal: reset the hunger timer and count it."""
        with self._meal_lock:
            philosopher.last_meal_time = self.clock()
            philosopher.meals_eaten += 1

    def time_since_meal(self, philosopher: Philosopher) -> int:
        """Milliseconds since the philosopher last began eating."""
        with self._meal_lock:
            return self.clock() - philosopher.last_meal_time

    def meals_eaten(self, philosopher: Philosopher) -> int:
        """Number of meals the philosopher has started."""
        with self._meal_lock:
            return philosopher.meals_eaten

    def reset_clock(self) -> None:
        """Set every philosopher's start and last-meal time to now."""
        with self._meal_lock:
            for philosopher in self.philosophers:
                philosopher.start_time = self.clock()
                philosopher.last_meal_time = self.clock()