"""The philosophers' routine, the monitor that watches them, and the entry point."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence

from philosophers.clock import sleep_ms
from philosophers.parsing import ParseError, parse_arguments
from philosophers.table import Philosopher, Table

_MONITOR_PAUSE_SECONDS = 0.0001


def think(table: Table, philosopher: Philosopher) -> None:
    """Announce that the philosopher is thinking."""
    table.announce(philosopher, "is thinking")


def sleep(table: Table, philosopher: Philosopher) -> None:
    """Announce sleeping and sleep for the configured time, or until stopped."""
    table.announce(philosopher, "is sleeping")
    sleep_ms(table.settings.time_to_sleep, table.is_stopped)


def eat(table: Table, philosopher: Philosopher) -> bool:
    """Take both forks and eat.

    Returns False when the philosopher could not eat because there is only
    one fork at the table; the philosopher then waits out ``time_to_die``.
    """
    first = table.forks[philosopher.left_fork]
    with first:
        table.announce(philosopher, "has taken a fork")
        if table.settings.count == 1:
            lone = True
        else:
            lone = False
            with table.forks[philosopher.right_fork]:
                table.announce(philosopher, "has taken a fork")
                table.announce(philosopher, "is eating")
                table.record_meal(philosopher)
                sleep_ms(table.settings.time_to_eat, table.is_stopped)
    if lone:
        sleep_ms(table.settings.time_to_die, table.is_stopped)
        return False
    return True


def routine(table: Table, philosopher: Philosopher) -> None:
    """Think, eat and sleep until the simulation ends or the philosopher is full."""
    if philosopher.position % 2 == 0:
        sleep_ms(table.settings.time_to_eat // 2, table.is_stopped)
    while not table.is_stopped() and not philosopher.is_full():
        think(table, philosopher)
        if not eat(table, philosopher):
            return
        sleep(table, philosopher)


def check_deaths(table: Table) -> bool:
    """Stop the simulation and report True if some philosopher has starved."""
    for philosopher in table.philosophers:
        if table.time_since_meal(philosopher) >= table.settings.time_to_die:
            table.announce(philosopher, "died")
            table.stop()
            return True
        time.sleep(_MONITOR_PAUSE_SECONDS)
    return False


def check_meals(table: Table) -> bool:
    """Stop the simulation and report True once everyone has eaten enough."""
    limit = table.settings.meals
    if limit is None:
        return False
    full = 0
    for philosopher in table.philosophers:
        if table.meals_eaten(philosopher) == limit:
            full += 1
        time.sleep(_MONITOR_PAUSE_SECONDS)
    if full == len(table.philosophers):
        table.stop()
        return True
    return False


def monitor(table: Table) -> None:
    """Watch the table until a philosopher dies or all are full."""
    while not (check_deaths(table) or check_meals(table)):
        pass


def start_dining(table: Table) -> None:
    """Run the whole simulation and wait for every thread to finish."""
    if table.settings.meals == 0:
        return
    table.reset_clock()
    watcher = threading.Thread(target=monitor, args=(table,), name="monitor")
    diners = [
        threading.Thread(
            target=routine,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.position}",
        )
        for philosopher in table.philosophers
    ]
    watcher.start()
    for diner in diners:
        diner.start()
    watcher.join()
    for diner in diners:
        diner.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ParseError as exc:
        print(exc)
        return 1
    start_dining(Table(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())