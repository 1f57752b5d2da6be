from collections.abc import Iterable
from typing import Protocol, TypeVar

PLAYER_ONE = 1
PLAYER_TWO = -1

# 32-bit bound so scores line up with the fixed-width engine this mirrors
INFINITY = 2**31 - 1


class GameState(Protocol):
    """Capabilities a game model must provide to be searched.

    States are ordered (a canonical representative is picked with ``min``) and
    hashable (canonical states key the transposition table).
    """

    def win(self, player: int) -> bool:
        """True if the game is over in favor of ``player``."""
        ...

    def value(self) -> int:
        """Static value from the +1 perspective."""
        ...

    def possibilities(self, player: int) -> Iterable["GameState"]:
        """Successor states reachable by a move of ``player``."""
        ...

    def swap(self) -> None:
        """Exchange the roles of the two players in place."""
        ...

    def symmetries(self) -> Iterable["GameState"]:
        """Strategically equivalent states, including the state itself."""
        ...

    def copy(self) -> "GameState": ...

    def __lt__(self, other: "GameState", /) -> bool: ...

    def __hash__(self) -> int: ...


S = TypeVar("S", bound=GameState)


def canonicalize(state: S) -> S:
    """Return the smallest state of the symmetry class of ``state``."""
    symmetries = list(state.symmetries())
    if not symmetries:
        raise ValueError(f"symmetries() must include the state itself: {state!r}")
    return min(symmetries)


def perspective(state: S, player: int) -> S:
    """Return ``state`` as seen by player +1, copying before any swap."""
    if player == PLAYER_TWO:
        state = state.copy()
        state.swap()
    return state
