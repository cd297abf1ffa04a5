"""The dining philosophers: table state, philosopher threads and the reaper."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .output import Status, debug_status_line, outcome_line, status_line
from .parsing import PROG_NAME, Settings
from .timing import now_ms, wait_until

THREAD_ERROR = f"{PROG_NAME} error: Could not create thread."

_REAPER_INTERVAL_S = 0.001
_SLEEP_STEP_S = 0.0001
_START_DELAY_PER_PHILO_MS = 2 * 10


def assign_forks(philo_id: int, nb_philos: int) -> tuple[int, int]:
    """Return the (first, second) fork indices a philosopher picks up.

    Odd philosophers take their right-hand fork first so that neighbours
    never grab forks in the same order.
    """
    left = philo_id
    right = (philo_id + 1) % nb_philos
    if philo_id % 2:
        return right, left
    return left, right


@dataclass(eq=False)
class Philosopher:
    """One seat at the table; its run method is the thread body."""

    id: int
    table: Table = field(repr=False)
    forks: tuple[int, int]
    times_ate: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def run(self) -> None:
        """Live until the simulation stops."""
        table = self.table
        settings = table.settings
        if settings.must_eat_count == 0:
            return
        wait_until(table.start_time)
        if settings.time_to_die == 0:
            return
        if settings.nb_philos == 1:
            self._live_alone()
            return
        if self.id % 2:
            self._think(silent=True)
        while not table.has_stopped():
            self._eat_and_sleep()
            self._think(silent=False)

    def _eat_and_sleep(self) -> None:
        table = self.table
        first, second = (table.forks[index] for index in self.forks)
        with first:
            table.write_status(self, Status.GOT_FORK_1)
            with second:
                table.write_status(self, Status.GOT_FORK_2)
                table.write_status(self, Status.EATING)
                with self.meal_lock:
                    self.last_meal = now_ms()
                table.sleep(table.settings.time_to_eat)
                if not table.has_stopped():
                    with self.meal_lock:
                        self.times_ate += 1
                table.write_status(self, Status.SLEEPING)
        table.sleep(table.settings.time_to_sleep)

    def _think(self, silent: bool) -> None:
        settings = self.table.settings
        with self.meal_lock:
            hunger = now_ms() - self.last_meal
        time_to_think = max(0, (settings.time_to_die - hunger - settings.time_to_eat) // 2)
        if time_to_think == 0 and silent:
            time_to_think = 1
        if time_to_think > 600:
            time_to_think = 200
        if not silent:
            self.table.write_status(self, Status.THINKING)
        self.table.sleep(time_to_think)

    def _live_alone(self) -> None:
        table = self.table
        with table.forks[self.forks[0]]:
            table.write_status(self, Status.GOT_FORK_1)
            table.sleep(table.settings.time_to_die)
            table.write_status(self, Status.DIED)


class Table:
    """Shared state of one simulation run."""

    def __init__(
        self, settings: Settings, out: TextIO | None = None, debug: bool = False
    ) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.debug = debug
        self.start_time = now_ms()
        self._stopped = False
        self._stop_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.nb_philos)]
        self.philos = [
            Philosopher(
                id=philo_id,
                table=self,
                forks=assign_forks(philo_id, settings.nb_philos),
            )
            for philo_id in range(settings.nb_philos)
        ]

    def has_stopped(self) -> bool:
        """Tell whether the simulation has ended."""
        with self._stop_lock:
            return self._stopped

    def stop(self) -> None:
        """End the simulation."""
        with self._stop_lock:
            self._stopped = True

    def sleep(self, duration: int) -> None:
        """Pause for duration milliseconds, waking early if the run stops."""
        wake_up = now_ms() + duration
        while now_ms() < wake_up:
            if self.has_stopped():
                break
            time.sleep(_SLEEP_STEP_S)

    def write_status(
        self, philo: Philosopher, status: Status, reaper: bool = False
    ) -> None:
        """Print a status line unless the run has stopped.

        The reaper's own report is printed even after the stop.
        """
        with self._write_lock:
            if self.has_stopped() and not reaper:
                return
            elapsed = now_ms() - self.start_time
            if self.debug:
                fork_index = None
                if status is Status.GOT_FORK_1:
                    fork_index = philo.forks[0]
                elif status is Status.GOT_FORK_2:
                    fork_index = philo.forks[1]
                line = debug_status_line(elapsed, philo.id, status, fork_index)
            else:
                line = status_line(elapsed, philo.id, status)
            self.out.write(line + "\n")

    def run(self) -> None:
        """Start every thread, wait for all of them, then report."""
        self.start_time = now_ms() + self.settings.nb_philos * _START_DELAY_PER_PHILO_MS
        for philo in self.philos:
            with philo.meal_lock:
                philo.last_meal = self.start_time

        threads = [
            threading.Thread(target=philo.run, name=f"philo-{philo.id + 1}")
            for philo in self.philos
        ]
        if self.settings.nb_philos > 1:
            threads.append(threading.Thread(target=self._reap, name="reaper"))

        started: list[threading.Thread] = []
        try:
            for thread in threads:
                thread.start()
                started.append(thread)
        except RuntimeError as exc:
            self.stop()
            for thread in started:
                thread.join()
            raise RuntimeError(THREAD_ERROR) from exc

        for thread in started:
            thread.join()
        if self.debug and self.settings.must_eat_count is not None:
            self._write_outcome()
        self.out.flush()

    def _write_outcome(self) -> None:
        required = self.settings.must_eat_count
        full_count = sum(philo.times_ate >= required for philo in self.philos)
        with self._write_lock:
            line = outcome_line(full_count, self.settings.nb_philos, required)
            self.out.write(line + "\n")

    def _reap(self) -> None:
        if self.settings.must_eat_count == 0:
            return
        wait_until(self.start_time)
        while not self._end_condition_reached():
            time.sleep(_REAPER_INTERVAL_S)

    def _end_condition_reached(self) -> bool:
        required = self.settings.must_eat_count
        all_ate_enough = True
        for philo in self.philos:
            with philo.meal_lock:
                if now_ms() - philo.last_meal >= self.settings.time_to_die:
                    self.stop()
                    self.write_status(philo, Status.DIED, reaper=True)
                    return True
                if required is not None and philo.times_ate < required:
                    all_ate_enough = False
        if required is not None and all_ate_enough:
            self.stop()
            return True
        return False


def run_simulation(
    settings: Settings, out: TextIO | None = None, debug: bool = False
) -> Table:
    """Run one simulation to its end and return the finished table."""
    table = Table(settings, out, debug)
    table.run()
    return table