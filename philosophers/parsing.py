"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MIN = -2147483648
INT_MAX = 2147483647

ERR_ARG = "Number of args is not Correct"
ERR_NBR = "Number is not Correct"

# Smallest accepted value for time_to_die and time_to_sleep, in milliseconds.
MIN_DURATION = 60


class ParseError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; durations are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def parse_number(text: str) -> int:
    """Read a decimal integer, returning -1 when the text is not one.

    Leading spaces are skipped and any run of sign characters is accepted;
    a single minus among them makes the number negative.  Anything other
    than digits after the signs, or a value outside the 32-bit signed
    range, yields -1.
    """
    rest = text.lstrip(" ")
    signs = len(rest) - len(rest.lstrip("+-"))
    negative = "-" in rest[:signs]
    digits = rest[signs:]
    if any(ch not in "0123456789" for ch in digits):
        return -1
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        return -1
    return value


def parse_arguments(args: Sequence[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Expects: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].
    """
    if len(args) not in (4, 5):
        raise ParseError(ERR_ARG)
    values = [parse_number(arg) for arg in args]
    count, time_to_die, time_to_eat, time_to_sleep = values[:4]
    meals = values[4] if len(values) == 5 else None

    if 0 in (count, time_to_die, time_to_eat, time_to_sleep):
        raise ParseError(ERR_NBR)
    if count < 0 or time_to_eat < 0 or (meals is not None and meals < 0):
        raise ParseError(ERR_NBR)
    if time_to_die < MIN_DURATION or time_to_sleep < MIN_DURATION:
        raise ParseError(ERR_NBR)

    return Settings(
        count=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals=meals,
    )