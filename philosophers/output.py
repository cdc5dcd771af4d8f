"""Formatting and printing of philosopher status lines."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from .table import Philosopher, Table
from .timing import TimeUnit, gettime

RESET = "\033[0m"
RED = "\033[1;31m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"
CYAN = "\033[1;36m"
WHITE = "\033[1;37m"


class Status(enum.Enum):
    EATING = enum.auto()
    SLEEPING = enum.auto()
    THINKING = enum.auto()
    TAKE_FIRST_FORK = enum.auto()
    TAKE_SECOND_FORK = enum.auto()
    DIED = enum.auto()


_FORKS = (Status.TAKE_FIRST_FORK, Status.TAKE_SECOND_FORK)


def _format_plain(status: Status, philo: Philosopher, elapsed: int) -> str:
    stamp = f"{elapsed:<6d}"
    if status in _FORKS:
        return f"{WHITE}{stamp}{RESET} {philo.id} has taken a fork\n"
    if status is Status.EATING:
        return f"{WHITE}{stamp}{CYAN} {philo.id} is eating ...\n{RESET}"
    if status is Status.SLEEPING:
        return f"{WHITE}{stamp}{RESET} {philo.id} is sleeping ...\n"
    if status is Status.THINKING:
        return f"{WHITE}{stamp}{RESET} {philo.id} is thinking ...\n"
    return f"{RED}{stamp} {philo.id} died\n{RESET}"


def _format_debug(status: Status, philo: Philosopher, elapsed: int) -> str:
    stamp = f"{elapsed:6d}"
    if status in _FORKS:
        nth = "1" if status is Status.TAKE_FIRST_FORK else "2"
        # Both fork lines report the first fork's id.
        return (
            f"{WHITE}{stamp}{RESET} {philo.id} has taken the {nth}° fork"
            f"\t\t\tn°{BLUE}[ {philo.first_fork.fork_id} ]\n{RESET}"
        )
    if status is Status.EATING:
        return (
            f"{WHITE}{stamp}{CYAN} {philo.id} is eating ..."
            f"\t\t\t{YELLOW}[ {philo.meals_counter} ]\n{RESET}"
        )
    if status is Status.SLEEPING:
        return f"{WHITE}{stamp}{RESET} {philo.id} is sleeping ...\n"
    if status is Status.THINKING:
        return f"{WHITE}{stamp}{RESET} {philo.id} is thinking ...\n"
    return f"{RED}\t\t {stamp} {philo.id} died !!!\n{RESET}"


def format_status(
    status: Status, philo: Philosopher, elapsed: int, debug: bool
) -> str:
    """Return the coloured line announcing ``status`` at ``elapsed`` ms."""
    if debug:
        return _format_debug(status, philo, elapsed)
    return _format_plain(status, philo, elapsed)


class StatusWriter:
    """Serialises status lines of all philosophers onto one stream."""

    def __init__(
        self, table: Table, stream: TextIO | None = None, debug: bool = False
    ) -> None:
        self.table = table
        self.stream = stream if stream is not None else sys.stdout
        self.debug = debug

    def write(self, status: Status, philo: Philosopher) -> bool:
        """Print the status line; return whether anything was printed.

        Nothing is printed for a full philosopher, and once the simulation
        has finished only deaths are still reported.
        """
        elapsed = gettime(TimeUnit.MILLISECOND) - self.table.start_simulation
        if philo.full:
            return False
        with self.table.write_lock:
            if status is not Status.DIED and self.table.simulation_finished():
                return False
            self.stream.write(format_status(status, philo, elapsed, self.debug))
            self.stream.flush()
            return True