"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_PHILOS = 250
INT_MAX = 2147483647
PROG_NAME = "philo:"

USAGE = (
    f"{PROG_NAME} usage: ./philo <number_of_philosophers> "
    "<time_to_die> <time_to_eat> <time_to_sleep> "
    "[number_of_times_each_philosopher_must_eat]"
)


def _not_a_number_message(detail: str) -> str:
    return (
        f"{PROG_NAME} invalid input: {detail}: "
        f"not a valid unsigned integer between 0 and {INT_MAX}."
    )


_PHILO_COUNT_MESSAGE = (
    f"{PROG_NAME} invalid input: "
    f"there must be between 1 and {MAX_PHILOS} philosophers."
)


class UsageError(ValueError):
    """Raised when the number of arguments is wrong."""

    def __init__(self) -> None:
        super().__init__(USAGE)


class InputError(ValueError):
    """Raised when an argument is not an acceptable number."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    nb_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None


def parse_number(text: str) -> int:
    """Parse an unsigned decimal integer no larger than INT_MAX.

    An empty string reads as 0. Raises ValueError when the text holds
    anything but ASCII digits and OverflowError when the value is too big.
    """
    if any(not "0" <= char <= "9" for char in text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text) if text else 0
    if value > INT_MAX:
        raise OverflowError(f"larger than {INT_MAX}: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the program arguments (without the program name)."""
    if not 4 <= len(args) <= 5:
        raise UsageError()

    values = []
    for position, text in enumerate(args):
        try:
            value = parse_number(text)
        except OverflowError:
            if position == 0:
                raise InputError(_PHILO_COUNT_MESSAGE) from None
            raise InputError(_not_a_number_message(text)) from None
        except ValueError:
            raise InputError(_not_a_number_message(str(MAX_PHILOS))) from None
        if position == 0 and not 0 < value <= MAX_PHILOS:
            raise InputError(_PHILO_COUNT_MESSAGE)
        values.append(value)

    nb_philos, time_to_die, time_to_eat, time_to_sleep = values[:4]
    must_eat_count = values[4] if len(values) == 5 else None
    return Settings(
        nb_philos=nb_philos,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat_count=must_eat_count,
    )