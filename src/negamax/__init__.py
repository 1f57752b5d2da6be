from negamax.solver import (
    NegamaxSolver,
    Quality,
    Table,
    TableEntry,
    bot_play,
    negamax,
    negamax_table,
    negamax_value,
)
from negamax.state import INFINITY, PLAYER_ONE, PLAYER_TWO, GameState, canonicalize

__all__ = [
    "GameState",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "INFINITY",
    "canonicalize",
    "Table",
    "TableEntry",
    "Quality",
    "negamax",
    "negamax_table",
    "negamax_value",
    "bot_play",
    "NegamaxSolver",
]
