# gamesolver

Models of combinatorial games and the building blocks for analysing them.
Every game shares one interface, the `Game` base class in `gamesolver.game`:
`possible_moves()`, `make_move(move)`, `state()`, `player()`, `max_moves()`,
`copy()`, `find_immediately_resolvable_game()` and a `move_count` attribute.

## Games

The games live in `gamesolver.games`:

| Module | Class | Move | Text form |
| --- | --- | --- | --- |
| `nim` | `Nim(heaps)` | `NaturalMove((heap, amount))` | `heap-amount` |
| `chomp` | `Chomp(width, height)` | `NaturalMove((x, y))` | `x-y` |
| `domineering` | `Domineering(width, height, orientation)` | `DomineeringMove(x, y)` | `x-y` |
| `reversi` | `Reversi()` (6×6 board) | `NaturalMove((x, y))` | `x-y` |
| `sprouts` | `Sprouts(node_count)` | `SproutsMove(start, end)` | `i-j` |
| `order_and_chaos` | `OrderAndChaos(width, height, min_win_length, max_win_length)` | `OrderAndChaosMove((row, column), cell)` | `row-column-x` or `row-column-o` |
| `tic_tac_toe` | `TicTacToe(dim, size)` | `TicTacToeMove(index)` | `0-2`, one number per dimension |
| `zener` | `Zener()` | `ZenerMove((x, y), direction)` | `x:y:direction` |

Each move class has a `parse` class method for the text form
(`NaturalMove.parse(text, length)` takes the number of values). Each game also
has an `...Args` dataclass and a `from_args` class method that builds the game
and plays a list of moves given as move objects or text.

Zener is loopy: a position that repeats is a tie.

`gamesolver.games.registry` lists every game as a `GameKind`, with
`display_name()`, `default_args()` and `build(args)`; `default_games()` pairs
every kind with its default arguments.

`gamesolver.games.util.move_failable(game, move)` plays a move but raises
`GameOverError` when the game has already ended. Each game raises its own
`MoveError` subclass when a move is illegal, and text that can not be read as
a move raises `MoveParseError` (a `ValueError`).

## Core pieces

- `gamesolver.player`: `PartizanPlayer`, `ImpartialPlayer` and `NPlayerPartizan`
- `gamesolver.game`: `Game`, the `NormalGame`, `NormalImpartialGame` and
  `MisereGame` play conventions, `GameState`, `MoveError`, `upper_bound` and
  `score_to_outcome`
- `gamesolver.disjoint`: `DisjointImpartialNormalGame`, the disjoint sum of two
  normal play impartial games
- `gamesolver.nimber`: `Nimber`, whose `+` is the nim-sum, and `mex`
- `gamesolver.combinatorial`: `VecGame`, a game written as its left and right
  options, with `zero`, `star`, `up`, `down`, `flip`, `negate` and `birthday`
- `gamesolver.transposition`: `TranspositionTable` of `Score` bounds
- `gamesolver.loopy`: `LoopyTracker` for games that can repeat positions
- `gamesolver.grid`: a fixed-size two-dimensional `Grid`
- `gamesolver.stats`: `Stats` and `TerminalEnds` search counters;
  `gamesolver.report.show_stats` prints them

## Example

```python
from gamesolver.games.nim import Nim
from gamesolver.games.util import NaturalMove, move_failable

game = Nim([3, 5, 7])
move_failable(game, NaturalMove((0, 2)))   # take 2 from heap 0
print(game)
print(game.state())
```

## Command line

The `gamesolver` command plays a game interactively. It shows the board,
reads one move per line in the game's text form, and stops at end of input:

```
gamesolver play naive-nim 3,5,7
gamesolver play chomp --width 6 --height 4
gamesolver play tic-tac-toe 2 3 1-1
gamesolver play sprouts 6
gamesolver play zener
```

The games are `reversi`, `tic-tac-toe`, `order-and-chaos`, `naive-nim`,
`domineering` (5×5), `chomp`, `sprouts` and `zener`. Every game except
`zener` accepts moves to play before starting. Run `gamesolver play --help`
for the arguments of each game.

## What it does not do

The package has no search routine: it does not compute the score of each
move or the best move of a position, and the command line has no solving
mode. The transposition table, the statistics counters and
`score_to_outcome` are there for such a search, but nothing in the package
runs one. There is no graphical interface.

## Running the tests

```
pip install -e .[test]
pytest
```