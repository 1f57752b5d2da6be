from negamax.games.tictactoe import TicTacToe

__all__ = ["TicTacToe"]
