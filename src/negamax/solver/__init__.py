from negamax.solver.minimax import NegamaxSolver, bot_play, negamax, negamax_table, negamax_value
from negamax.solver.transposition import Quality, Table, TableEntry, classify

__all__ = [
    "NegamaxSolver",
    "negamax",
    "negamax_table",
    "negamax_value",
    "bot_play",
    "Table",
    "TableEntry",
    "Quality",
    "classify",
]
