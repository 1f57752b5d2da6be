import logging
import random
from dataclasses import dataclass
from typing import Literal

import tyro

from negamax.games.tictactoe import SYMBOLS, TicTacToe, changed_cell
from negamax.solver.minimax import NegamaxSolver

PlayerType = Literal["human", "ai", "random"]


@dataclass
class Config:
    """Tic-tac-toe against the negamax engine."""

    # players
    x: PlayerType = "human"
    """Player x (+1) type."""

    o: PlayerType = "ai"
    """Player o (-1) type."""

    x_depth: int = 9
    """Search depth for x AI."""

    o_depth: int = 9
    """Search depth for o AI."""

    # initial state
    board: str | None = None
    """Initial board as 9 characters of x, o and '.', row by row. Example: 'x...o....'"""

    starting_player: int = 1
    """Which player starts (1 for x, -1 for o)."""

    seed: int | None = None
    """Seed for random players and for breaking ties between equally good AI moves."""

    verbose: bool = False
    """Log search details."""


def print_board(state: TicTacToe) -> None:
    """Print the board with cell numbers for empty cells."""
    print()
    for r in range(3):
        row = []
        for c in range(3):
            cell = r * 3 + c
            mark = state.cells[cell]
            row.append(SYMBOLS[mark] if mark else str(cell + 1))
        print("   " + " | ".join(row))
        if r < 2:
            print("  ---+---+---")
    print()


def get_human_move(player: int, legal_moves: list[int]) -> int:
    """Get move from human player via terminal input."""
    # display cells as 1-indexed for user
    display_moves = [m + 1 for m in legal_moves]

    while True:
        try:
            prompt = f"Player {SYMBOLS[player]}, choose cell {display_moves}: "
            cell = int(input(prompt)) - 1
            if cell in legal_moves:
                return cell
            print(f"Invalid choice. Pick from {display_moves}")
        except ValueError:
            print("Enter a number.")
        except EOFError:
            raise SystemExit from None


def parse_initial_state(config: Config) -> TicTacToe:
    """Parse initial state from config, returning an empty or custom board."""
    assert config.starting_player in (1, -1), "starting_player must be 1 or -1"
    assert config.x_depth > 0 and config.o_depth > 0, "search depths must be positive"

    if config.board is None:
        return TicTacToe()
    return TicTacToe.from_string(config.board)


def run_terminal_game(config: Config) -> None:
    """Run the game in terminal mode."""
    state = parse_initial_state(config)
    rng = random.Random(config.seed)
    solvers = {
        1: NegamaxSolver(max_depth=config.x_depth),
        -1: NegamaxSolver(max_depth=config.o_depth),
    }
    player_types = {1: config.x, -1: config.o}
    player = config.starting_player

    print("Tic-tac-toe - Terminal Mode")
    print("=" * 40)
    print(f"Players: x={config.x} (d={config.x_depth}), o={config.o} (d={config.o_depth})")

    while not state.is_over():
        print_board(state)
        legal_moves = state.legal_moves()
        player_type = player_types[player]

        print(f"Player {SYMBOLS[player]}'s turn ({player_type})")

        if player_type == "human":
            state = state.play(get_human_move(player, legal_moves), player)
        elif player_type == "ai":
            print("AI thinking...")
            child = solvers[player].get_best_move(state, player, rng)
            assert child is not None
            cell = changed_cell(state, child)
            assert cell is not None
            print(f"AI plays cell {cell + 1}")
            state = child
        else:  # random
            cell = rng.choice(legal_moves)
            print(f"Random plays cell {cell + 1}")
            state = state.play(cell, player)

        player = -player

    # game over
    print_board(state)
    print("=" * 40)
    print("GAME OVER")

    winner = state.winner()
    if winner == 0:
        print("Draw!")
    else:
        print(f"Player {SYMBOLS[winner]} wins!")


def main(config: Config | None = None) -> None:
    """Main entry point."""
    if config is None:
        config = tyro.cli(Config)

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    run_terminal_game(config)


if __name__ == "__main__":
    main()
