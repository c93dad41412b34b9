# oilpool

`oilpool` is a small game simulation core with a terminal front end and a set
of health checks:

- **Tic-tac-toe** (`oilpool.tictactoe`): turn-based game logic. It validates
  moves, detects wins and draws, and keeps score across rounds.
- **Leaf growth** (`oilpool.leaf`, `oilpool.noise`): leaves are placed along
  invisible vines using seeded Perlin noise and grow over time. The result is
  deterministic for a given `noise_seed`.
- **World** (`oilpool.world`): hosts a tic-tac-toe game and a leaf simulation
  and ticks every active one. It supports pause, time scale and a
  fixed-timestep accumulator.
- **Health checks** (`oilpool.check`, `oilpool.runner`, `oilpool.reporter`,
  `oilpool.checks`): check types, a runner that times each check, and a table
  reporter.
- **Build info** (`oilpool.build_info`): build metadata read from `OILPOOL_*`
  environment variables, with gaps filled from the running interpreter.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Command line

Play tic-tac-toe in the terminal:

```
oilpool
```

Enter a cell as `row col` (or `row,col`), each from 0 to 2; `q`, `quit` or
`exit` leaves the game, as does end of input. After a win or a draw the board
is cleared and play continues.

Run the health checks and exit:

```
oilpool --health-check
```

This runs the world, build info and system info checks, prints a table, a
summary and each check's details. The exit status is 0 when every check
passes, 1 when any check fails, and 2 when there are warnings but no failures.

Run the simulation without the board:

```
oilpool --headless
```

This ticks a fresh world for 60 frames of 1/60 s and logs the tick count,
simulated time and number of leaves.

Log output goes to standard error. The level defaults to `DEBUG` and can be
set with the `OILPOOL_LOG` environment variable (for example
`OILPOOL_LOG=info`).

## Build metadata

`oilpool.build_info.current()` reads these variables: `OILPOOL_GIT_BRANCH`,
`OILPOOL_GIT_SHA`, `OILPOOL_GIT_DIRTY` (`true` marks a dirty tree),
`OILPOOL_GIT_COMMIT_TIMESTAMP`, `OILPOOL_BUILD_TIMESTAMP`,
`OILPOOL_TARGET_TRIPLE`, `OILPOOL_OPT_LEVEL`, `OILPOOL_RUNTIME_VERSION` and
`OILPOOL_RUNTIME_CHANNEL`. Unset git and build values read as `unknown`.

```python
from oilpool.build_info import BuildInfo

info = BuildInfo.from_env({"OILPOOL_GIT_BRANCH": "main",
                           "OILPOOL_GIT_SHA": "a1b2c3d4e5f6",
                           "OILPOOL_GIT_DIRTY": "true"})
print(info.version_string())   # main@a1b2c3d4*
```

## Library use

Playing tic-tac-toe:

```python
from oilpool.tictactoe import TicTacToeSimulation, GameStateKind, Player

game = TicTacToeSimulation()
game.make_move(0, 0)   # X
game.make_move(1, 1)   # O
print(game.game_state.kind is GameStateKind.PLAYING)
print(game.wins(Player.X), game.draws)
```

Growing leaves along a vine:

```python
from oilpool.leaf import LeafSimulation, LeafConfig

sim = LeafSimulation(LeafConfig(spawn_rate=10.0))
sim.add_vine_line((0.0, 0.0), (100.0, 0.0))
sim.tick(1.0)
print(len(sim.leaves))
```

Driving the world:

```python
from oilpool.world import World

world = World(seed=7, time_scale=2.0)
world.tick(0.5)
print(world.tick_count, world.sim_time)   # 1 1.0
world.tictactoe().make_move(2, 2)
```

Running health checks from code:

```python
from oilpool.checks import run_all_checks
from oilpool.reporter import print_report

report = run_all_checks()
print_report(report)
```

Custom checks subclass `oilpool.check.SystemCheck`, set `name` and return a
`CheckResult` from `check()`; add them with
`oilpool.runner.HealthCheckRunner().add_check(...)`.

## What it does not do

There is no graphical window or rendering: the board is played as text in the
terminal, and leaves exist only as data. The health checks cover the world,
build metadata and the host system; there are no checks of configuration
files or graphics hardware, and no configuration files are read.