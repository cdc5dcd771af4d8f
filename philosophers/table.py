"""Shared state of the dinner: forks, philosophers and the table itself."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .parsing import Settings
from .timing import TimeUnit, gettime


@dataclass(eq=False)
class Fork:
    """A fork lying between two philosophers."""

    fork_id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """One diner; the fork order depends on the parity of its id."""

    id: int
    first_fork: Fork
    second_fork: Fork
    full: bool = False
    meals_counter: int = 0
    last_meal_time: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def start(self, now: int) -> None:
        """Record the moment the philosopher sat down."""
        with self._lock:
            self.last_meal_time = now

    def begin_meal(self, now: int) -> int:
        """Record the start of a meal and return the number of meals so far."""
        with self._lock:
            self.last_meal_time = now
            self.meals_counter += 1
            return self.meals_counter

    def mark_full(self) -> None:
        with self._lock:
            self.full = True

    def snapshot(self) -> tuple[bool, int]:
        """Return ``(full, last_meal_time)`` read consistently."""
        with self._lock:
            return self.full, self.last_meal_time


class Table:
    """The table, its forks and seated philosophers, plus run-wide flags."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.start_simulation = 0
        self.write_lock = threading.Lock()
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._ended = False
        self._running = 0
        self.forks = [Fork(i) for i in range(settings.philo_nbr)]
        self.philos = [self._seat(pos) for pos in range(settings.philo_nbr)]

    def _seat(self, position: int) -> Philosopher:
        philo_id = position + 1
        own = self.forks[position]
        neighbour = self.forks[(position + 1) % len(self.forks)]
        if philo_id % 2 == 0:
            return Philosopher(philo_id, own, neighbour)
        return Philosopher(philo_id, neighbour, own)

    @property
    def all_threads_ready(self) -> bool:
        return self._ready.is_set()

    def simulation_finished(self) -> bool:
        with self._lock:
            return self._ended

    def finish(self) -> None:
        with self._lock:
            self._ended = True

    def release(self) -> None:
        """Record the start time and let every waiting thread go."""
        self.start_simulation = gettime(TimeUnit.MILLISECOND)
        self._ready.set()

    def wait_all_threads(self) -> None:
        """Block until release() has been called."""
        self._ready.wait()

    def mark_running(self) -> None:
        with self._lock:
            self._running += 1

    def all_threads_running(self) -> bool:
        with self._lock:
            return self._running == self.settings.philo_nbr