import logging
import random
from typing import TypeVar

from negamax.solver.transposition import Table
from negamax.state import INFINITY, GameState

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=GameState)

# below this remaining depth the table costs more than it saves
TABLE_MIN_DEPTH = 3


def _terminal_score(state: GameState, player: int, depth: int) -> int | None:
    """Score of a leaf in ``player`` perspective, None if the node must be expanded.

    The ``depth + 1`` factor makes early wins and late losses score higher.
    """
    if depth == 0 or state.win(-player):
        return player * state.value() * (depth + 1)
    return None


def negamax(state: GameState, player: int, depth: int, alpha: int, beta: int) -> int:
    """Fail-soft alpha-beta search without a table.

    Returns a score in ``player`` perspective, ``player`` being the side to move.
    """
    score = _terminal_score(state, player, depth)
    if score is not None:
        return score

    best = -INFINITY
    for child in state.possibilities(player):
        value = -negamax(child, -player, depth - 1, -beta, -alpha)
        best = max(best, value)
        alpha = max(alpha, value)
        if alpha >= beta:
            break
    return best


def negamax_table(
    state: GameState, player: int, depth: int, alpha: int, beta: int, table: Table
) -> int:
    """Same as ``negamax`` but reuses and feeds the bounds stored in ``table``."""
    score = _terminal_score(state, player, depth)
    if score is not None:
        return score

    if depth < TABLE_MIN_DEPTH:
        return negamax(state, player, depth, alpha, beta)

    orig_alpha, orig_beta = alpha, beta
    cached, alpha, beta = table.get(state, player, depth, alpha, beta)
    if cached is not None:
        return cached

    best = -INFINITY
    for child in state.possibilities(player):
        value = -negamax_table(child, -player, depth - 1, -beta, -alpha, table)
        best = max(best, value)
        alpha = max(alpha, value)
        if alpha >= beta:
            break

    table.insert(state, player, depth, orig_alpha, orig_beta, best)
    return best


def negamax_value(state: GameState, player: int, depth: int, table: Table) -> int:
    """Value of ``state`` in +1 perspective, ``player`` to move."""
    return player * negamax_table(state, player, depth, -INFINITY, INFINITY, table)


def bot_play(state: S, player: int, depth: int, table: Table) -> list[S]:
    """All best successor states for ``player``, in the order they were generated.

    Compacts ``table`` before returning.
    """
    best = -INFINITY
    results: list[S] = []

    for child in state.possibilities(player):
        value = -negamax_table(child, -player, depth, -INFINITY, INFINITY, table)
        if value > best:
            best = value
            results.clear()
        if value == best:
            results.append(child)

    table.clean()
    logger.debug("bot_play depth=%d: %d best moves scoring %d", depth, len(results), best)
    return results


class NegamaxSolver:
    """Keeps one table alive across successive searches, e.g. the turns of a game."""

    def __init__(self, max_depth: int = 9, table: Table | None = None):
        self.max_depth = max_depth
        self.table = table if table is not None else Table()

    def best_moves(self, state: S, player: int) -> list[S]:
        return bot_play(state, player, self.max_depth, self.table)

    def get_best_move(self, state: S, player: int, rng: random.Random | None = None) -> S | None:
        """One of the best successors, None if ``player`` has no move.

        Ties go to the first generated successor unless ``rng`` is given.
        """
        moves = self.best_moves(state, player)
        if not moves:
            return None
        if rng is None:
            return moves[0]
        return rng.choice(moves)

    def value(self, state: GameState, player: int) -> int:
        return negamax_value(state, player, self.max_depth, self.table)

    def clear_table(self) -> None:
        """Clear the transposition table."""
        self.table.clear()
