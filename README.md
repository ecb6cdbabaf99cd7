# philosophers

This package simulates the dining philosophers problem with threads. Each philosopher runs in its own thread. The forks are locks, and each fork is shared by two neighbours. A monitor thread watches for a philosopher starving. It also watches for every philosopher having eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_required]
```

The same entry point can also be run as `python -m philosophers.simulation`.

All times are in milliseconds. The program takes four or five arguments:

- `number_of_philosophers`: how many philosophers sit at the table. This is also the number of forks.
- `time_to_die`: the longest a philosopher may go without starting a meal. When this time has passed, the philosopher dies.
- `time_to_eat`: how long a meal lasts. The philosopher holds both forks for this time.
- `time_to_sleep`: how long a philosopher sleeps after eating.
- `meals_required` (optional): the simulation ends once every philosopher has eaten exactly this many meals. If it is `0`, nothing runs.

Each event is printed on its own line in the form `<elapsed ms> <philosopher number> <action>`. For example:

```
$ philo 5 800 200 200 7
0 1 is thinking
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

The order of the lines depends on how the threads are scheduled.

The possible actions are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

Timing is staggered at the start. Philosophers with even numbers wait half of `time_to_eat` before they begin. Each philosopher stops once it has eaten `meals_required` meals. When a philosopher dies, the monitor announces it and stops the simulation, and later announcements are suppressed.

With a single philosopher there is only one fork. That philosopher takes the fork, cannot eat, and dies after `time_to_die`.

On invalid input the program prints an error message and exits with status 1. The input is invalid when any of these holds:

- there are not four or five arguments;
- a value is not an integer: leading spaces and sign characters are accepted, then only digits;
- a value is outside the 32-bit signed range;
- the number of philosophers, `time_to_eat` or `meals_required` is negative;
- the number of philosophers, `time_to_die`, `time_to_eat` or `time_to_sleep` is zero;
- `time_to_die` or `time_to_sleep` is below 60.

## Library use

The pieces can also be used from Python:

```python
from philosophers.parsing import parse_arguments
from philosophers.table import Table
from philosophers.simulation import start_dining

settings = parse_arguments(["4", "410", "200", "200", "3"])
table = Table(settings)
start_dining(table)
```

- `philosophers.parsing.parse_arguments` returns a frozen `Settings` dataclass. On bad input it raises `ParseError`, which is a subclass of `ValueError`. `parse_number` reads a single value and returns `-1` when the value is not acceptable.
- `Table(settings, output=None, clock=now_ms)` holds the philosophers, the forks and the locks. Status lines go to `output` if it is given, and to standard output otherwise.
- `philosophers.simulation` provides the following:
  - the per-philosopher steps `think`, `eat`, `sleep` and `routine`;
  - the monitor checks `check_deaths`, `check_meals` and `monitor`;
  - `start_dining`, which runs the whole simulation;
  - `main(argv=None)`, which returns the exit status.
- `philosophers.clock` provides `now_ms()` and `sleep_ms(duration, should_stop)`. `sleep_ms` can be cut short: it returns `False` if `should_stop()` becomes true before the time is up.

## Running the tests

```
pip install .[test]
pytest
```