"""The dinner itself: philosopher threads and the monitor that watches them."""

from __future__ import annotations

import threading
import time
from typing import TextIO

from .output import Status, StatusWriter
from .table import Philosopher, Table
from .timing import TimeUnit, gettime, precise_sleep

_DESYNC_US = 30_000
_THINK_FACTOR = 0.42
_LONE_POLL_S = 0.0002
_MONITOR_POLL_S = 0.0001


def philo_died(philo: Philosopher, time_to_die: int, now: int) -> bool:
    """Tell whether ``philo`` has starved at ``now`` (milliseconds).

    ``time_to_die`` is in microseconds. A full philosopher never dies.
    """
    full, last_meal = philo.snapshot()
    if full:
        return False
    return now - last_meal > time_to_die / 1000


class Dinner:
    """Runs one simulation on a prepared table."""

    def __init__(
        self, table: Table, stream: TextIO | None = None, debug: bool = False
    ) -> None:
        self.table = table
        self.settings = table.settings
        self.writer = StatusWriter(table, stream, debug)

    def _sleep(self, usec: int) -> None:
        precise_sleep(usec, self.table.simulation_finished)

    def run(self) -> None:
        """Start every thread, wait for the philosophers, then stop the monitor."""
        if self.settings.nbr_limit_meals == 0:
            return
        target = self._lone if self.settings.philo_nbr == 1 else self._simulate
        diners = [
            threading.Thread(target=target, args=(philo,), daemon=True)
            for philo in self.table.philos
        ]
        for thread in diners:
            thread.start()
        monitor = threading.Thread(target=self.monitor, daemon=True)
        monitor.start()
        self.table.release()
        for thread in diners:
            thread.join()
        self.table.finish()
        monitor.join()

    def think(self, philo: Philosopher, pre_simulation: bool) -> None:
        """Announce thinking and, for an odd table, pause to stay fair."""
        if not pre_simulation:
            self.writer.write(Status.THINKING, philo)
        if self.settings.philo_nbr % 2 == 0:
            return
        t_think = max(self.settings.time_to_eat * 2 - self.settings.time_to_sleep, 0)
        self._sleep(int(t_think * _THINK_FACTOR))

    def monitor(self) -> None:
        """Watch for starving philosophers until the simulation ends."""
        table = self.table
        while not table.all_threads_running():
            if table.simulation_finished():
                return
            time.sleep(_MONITOR_POLL_S)
        while not table.simulation_finished():
            for philo in table.philos:
                if table.simulation_finished():
                    break
                if philo_died(philo, self.settings.time_to_die,
                              gettime(TimeUnit.MILLISECOND)):
                    table.finish()
                    self.writer.write(Status.DIED, philo)
            time.sleep(_MONITOR_POLL_S)

    def _sit_down(self, philo: Philosopher) -> None:
        self.table.wait_all_threads()
        philo.start(gettime(TimeUnit.MILLISECOND))
        self.table.mark_running()

    def _lone(self, philo: Philosopher) -> None:
        self._sit_down(philo)
        self.writer.write(Status.TAKE_FIRST_FORK, philo)
        while not self.table.simulation_finished():
            time.sleep(_LONE_POLL_S)

    def _desynchronize(self, philo: Philosopher) -> None:
        if self.settings.philo_nbr % 2 == 0:
            if philo.id % 2 == 0:
                self._sleep(_DESYNC_US)
        elif philo.id % 2:
            self.think(philo, True)

    def _eat(self, philo: Philosopher) -> None:
        limit = self.settings.nbr_limit_meals
        with philo.first_fork.lock:
            self.writer.write(Status.TAKE_FIRST_FORK, philo)
            with philo.second_fork.lock:
                self.writer.write(Status.TAKE_SECOND_FORK, philo)
                meals = philo.begin_meal(gettime(TimeUnit.MILLISECOND))
                self.writer.write(Status.EATING, philo)
                self._sleep(self.settings.time_to_eat)
                if limit > 0 and meals == limit:
                    philo.mark_full()

    def _simulate(self, philo: Philosopher) -> None:
        self._sit_down(philo)
        self._desynchronize(philo)
        while not self.table.simulation_finished():
            full, _ = philo.snapshot()
            if full:
                break
            self._eat(philo)
            self.writer.write(Status.SLEEPING, philo)
            self._sleep(self.settings.time_to_sleep)
            self.think(philo, False)