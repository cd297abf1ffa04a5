# philos

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. One fork sits between each pair of neighbours, and each fork is a
lock. A philosopher takes two forks, eats, sleeps, thinks, and then starts
again. When there is more than one philosopher, a monitor thread watches the
table. It stops the dinner when a philosopher has gone too long without a
meal. It also stops the dinner when every philosopher has eaten the required
number of times.

## Installation

```
pip install .
```

## Usage

```
philos <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

- `number_of_philosophers`: between 1 and 250.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: times in milliseconds.
- `number_of_times_each_philosopher_must_eat`: optional. Without it, the
  dinner runs until a philosopher dies. With `0`, nothing happens.

Every argument must be an unsigned integer no greater than 2147483647.
When the arguments are wrong, the command prints a message and exits with
status 1. Otherwise it exits with status 0 when the dinner ends.

Example:

```
philos 5 800 200 200 7
```

Each event is printed on its own line. The line holds the milliseconds since
the start, the philosopher's number (counted from 1) and what happened, for
example:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the dinner has stopped, philosophers print
nothing more; the monitor's `died` report is the last line.

A lone philosopher takes one fork, waits `time_to_die` milliseconds and dies.

## Library use

```python
from philos.parsing import parse_arguments
from philos.simulation import run_simulation

settings = parse_arguments(["4", "410", "200", "200", "3"])
table = run_simulation(settings)
print([philo.times_ate for philo in table.philos])
```

- `philos.parsing.parse_arguments` takes the arguments without the program
  name and returns a `Settings`. It raises `UsageError` when the number of
  arguments is wrong and `InputError` when a value is not valid.
- `philos.simulation.run_simulation(settings, out=None, debug=False)` runs
  the dinner, writes to `out` (standard output by default) and returns the
  finished `Table`.
- With `debug=True`, lines use an aligned layout that also names the fork
  taken, and, when a meal count was given, a final line tells how many
  philosophers had at least that many meals. The `philos` command does not
  offer this layout.
- `philos.output` holds the `Status` enum and the functions that format each
  line: `status_line`, `debug_status_line` and `outcome_line`.

## Running the tests

```
pip install ".[test]"
pytest
```