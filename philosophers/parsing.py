"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile

INT_MAX = 2_147_483_647
MIN_TIME_US = 60_000
MAX_DIGITS = 10

USAGE = "Wrong input:\nCorrect id ./philo 5 800 200 200 [5]"

_SPACES = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; times are in microseconds."""

    philo_nbr: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    nbr_limit_meals: int = -1


def parse_number(text: str) -> int:
    """Parse a non-negative integer no larger than INT_MAX.

    Leading whitespace and a single '+' are allowed; anything after the
    leading run of digits is ignored.
    """
    rest = text.lstrip(_SPACES)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise InputError("Only positive values !")
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    if not digits:
        raise InputError("Only digits argument are accepted !")
    if len(digits) > MAX_DIGITS:
        raise InputError("Only number under the INT_MAX value is accepted !")
    value = int(digits)
    if value > INT_MAX:
        raise InputError("Only number under the INT_MAX value is accepted !")
    return value


def parse_args(argv: list[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Expects four or five values: number of philosophers, time to die,
    time to eat, time to sleep (all in milliseconds) and an optional
    number of meals each philosopher must eat.
    """
    args = list(argv)
    if len(args) not in (4, 5):
        raise InputError(USAGE)
    philo_nbr = parse_number(args[0])
    time_to_die = parse_number(args[1]) * 1000
    time_to_eat = parse_number(args[2]) * 1000
    time_to_sleep = parse_number(args[3]) * 1000
    if min(time_to_die, time_to_eat, time_to_sleep) < MIN_TIME_US:
        raise InputError("Use timestamps major than 60ms")
    limit = parse_number(args[4]) if len(args) == 5 else -1
    return Settings(
        philo_nbr=philo_nbr,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        nbr_limit_meals=limit,
    )