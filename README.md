# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread, shares forks (locks) with its neighbours, and alternates
between eating, sleeping and thinking. A monitor thread watches the table
and ends the simulation as soon as a philosopher starves. When a meal
count is given, each philosopher stops once it has eaten that many times,
and the dinner ends when all of them have stopped.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

The same entry point can be run as `python -m philosophers.cli`.

All times are in milliseconds and must be at least 60. Every value must be
a non-negative whole number no larger than 2147483647. Leading whitespace
and a leading `+` are accepted, a leading `-` is rejected, and anything
after the leading run of digits is ignored.

Example:

```
philo 5 800 200 200 5
```

Each line of output holds the milliseconds elapsed since the start of the
dinner, the philosopher's number and what happened, coloured with ANSI
escape codes:

```
0      1 has taken a fork
0      1 has taken a fork
0      1 is eating ...
200    1 is sleeping ...
...
```

When a philosopher starves the simulation stops and prints
`<time> <id> died`. A meal count of `0` ends the dinner before it begins.
With a single philosopher, it takes its one fork and waits until it
starves.

On invalid input the program prints `ERROR:` followed by the reason and
exits with status 1.

## Using it from Python

```python
import io

from philosophers.dinner import Dinner
from philosophers.parsing import parse_args
from philosophers.table import Table

settings = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
Dinner(Table(settings), stream=out).run()
print(out.getvalue())
```

- `philosophers.parsing`: `parse_number`, `parse_args`, the `Settings`
  dataclass (times in microseconds) and `InputError`.
- `philosophers.table`: `Table`, `Philosopher` and `Fork`, the shared state
  and its locks.
- `philosophers.output`: `Status`, `format_status` and `StatusWriter`;
  passing `debug=True` produces a more detailed line format with fork ids
  and meal counts.
- `philosophers.dinner`: `Dinner`, which starts the philosopher and monitor
  threads, and `philo_died`.
- `philosophers.timing`: `gettime` and `precise_sleep`.

## Running the tests

```
pip install .[test]
pytest
```