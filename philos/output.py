"""Status values and the text lines the simulation prints."""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """What a philosopher is reporting."""

    DIED = 0
    EATING = 1
    SLEEPING = 2
    THINKING = 3
    GOT_FORK_1 = 4
    GOT_FORK_2 = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def is_fork(self) -> bool:
        return self in (Status.GOT_FORK_1, Status.GOT_FORK_2)


_MESSAGES = {
    Status.DIED: "died",
    Status.EATING: "is eating",
    Status.SLEEPING: "is sleeping",
    Status.THINKING: "is thinking",
    Status.GOT_FORK_1: "has taken a fork",
    Status.GOT_FORK_2: "has taken a fork",
}


def status_line(elapsed: int, philo_id: int, status: Status) -> str:
    """Format a status report; philo_id is zero-based, printed one-based."""
    return f"{elapsed} {philo_id + 1} {status.message}"


def debug_status_line(
    elapsed: int, philo_id: int, status: Status, fork_index: int | None = None
) -> str:
    """Format a status report in the aligned debug layout.

    Fork statuses also name the fork taken, so they need fork_index.
    """
    head = f"[{elapsed:10d}]\t{philo_id + 1:03d}\t{status.message}"
    if status.is_fork:
        if fork_index is None:
            raise ValueError(f"{status.name} needs a fork index")
        return f"{head}: fork [{fork_index}]"
    return head


def outcome_line(full_count: int, nb_philos: int, must_eat_count: int) -> str:
    """Summarise how many philosophers ate the required number of meals."""
    return (
        f"{full_count}/{nb_philos} philosophers had at least "
        f"{must_eat_count} meals."
    )