from collections.abc import Sequence

SIZE = 3
LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)
SYMBOLS = {1: "x", -1: "o", 0: "."}


def _dihedral_maps() -> list[tuple[int, ...]]:
    """Destination index of every cell under the 8 symmetries of the square."""
    n = SIZE - 1
    transforms = [
        lambda r, c: (r, c),
        lambda r, c: (c, n - r),
        lambda r, c: (n - r, n - c),
        lambda r, c: (n - c, r),
        lambda r, c: (r, n - c),
        lambda r, c: (n - r, c),
        lambda r, c: (c, r),
        lambda r, c: (n - c, n - r),
    ]
    maps = []
    for transform in transforms:
        dest = []
        for i in range(SIZE * SIZE):
            r, c = transform(*divmod(i, SIZE))
            dest.append(r * SIZE + c)
        maps.append(tuple(dest))
    return maps


SYMMETRY_MAPS = _dihedral_maps()


class TicTacToe:
    """3x3 board, cells hold +1 (x), -1 (o) or 0.

    The player to move is not stored; the search passes it alongside the state.
    A full board offers a single pass move so drawn lines can still be searched
    to the requested depth.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: Sequence[int] | None = None):
        if cells is None:
            cells = [0] * (SIZE * SIZE)
        assert len(cells) == SIZE * SIZE, f"expected {SIZE * SIZE} cells, got {len(cells)}"
        assert all(c in (-1, 0, 1) for c in cells), f"cells must be -1, 0 or 1: {cells}"
        self.cells = list(cells)

    @classmethod
    def from_string(cls, board: str) -> "TicTacToe":
        """Parse a board such as ``"xo.\\n.x.\\n..o"``; whitespace is ignored."""
        symbols = {v: k for k, v in SYMBOLS.items()}
        chars = [ch for ch in board.lower() if not ch.isspace()]
        if len(chars) != SIZE * SIZE:
            raise ValueError(f"expected {SIZE * SIZE} cells, got {len(chars)}: {board!r}")
        try:
            return cls([symbols[ch] for ch in chars])
        except KeyError as e:
            raise ValueError(f"unknown cell symbol {e.args[0]!r} in {board!r}") from None

    def legal_moves(self) -> list[int]:
        return [i for i, c in enumerate(self.cells) if c == 0]

    def play(self, cell: int, player: int) -> "TicTacToe":
        """Return the state after ``player`` marks ``cell``."""
        assert self.cells[cell] == 0, f"cell {cell} is occupied"
        child = self.copy()
        child.cells[cell] = player
        return child

    def is_full(self) -> bool:
        return all(self.cells)

    def winner(self) -> int:
        """+1 or -1 for a completed line, 0 otherwise."""
        if self.win(1):
            return 1
        if self.win(-1):
            return -1
        return 0

    def is_over(self) -> bool:
        return self.winner() != 0 or self.is_full()

    # search capabilities

    def win(self, player: int) -> bool:
        cells = self.cells
        return any(cells[a] == cells[b] == cells[c] == player for a, b, c in LINES)

    def value(self) -> int:
        return self.winner()

    def possibilities(self, player: int) -> list["TicTacToe"]:
        moves = self.legal_moves()
        if not moves:
            return [self.copy()]
        return [self.play(cell, player) for cell in moves]

    def swap(self) -> None:
        self.cells = [-c for c in self.cells]

    def symmetries(self) -> list["TicTacToe"]:
        states = []
        for dest in SYMMETRY_MAPS:
            cells = [0] * len(self.cells)
            for i, c in enumerate(self.cells):
                cells[dest[i]] = c
            states.append(TicTacToe(cells))
        return states

    def copy(self) -> "TicTacToe":
        return TicTacToe(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToe):
            return NotImplemented
        return self.cells == other.cells

    def __lt__(self, other: "TicTacToe") -> bool:
        return self.cells < other.cells

    def __hash__(self) -> int:
        return hash(tuple(self.cells))

    def __repr__(self) -> str:
        return f"TicTacToe.from_string({''.join(SYMBOLS[c] for c in self.cells)!r})"

    def __str__(self) -> str:
        rows = []
        for r in range(SIZE):
            rows.append(" ".join(SYMBOLS[c] for c in self.cells[r * SIZE : (r + 1) * SIZE]))
        return "\n".join(rows)


def changed_cell(before: TicTacToe, after: TicTacToe) -> int | None:
    """Cell filled between two consecutive states, None for a pass."""
    for i, (a, b) in enumerate(zip(before.cells, after.cells)):
        if a != b:
            return i
    return None
