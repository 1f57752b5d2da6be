import logging
from dataclasses import dataclass
from enum import IntEnum

from negamax.state import GameState, canonicalize, perspective

logger = logging.getLogger(__name__)


class Quality(IntEnum):
    EXACT = 0
    UPPER_BOUND = 1  # fail low: true value <= stored value
    LOWER_BOUND = 2  # fail high: true value >= stored value


@dataclass(slots=True)
class TableEntry:
    value: int
    quality: Quality


def classify(value: int, alpha: int, beta: int) -> Quality:
    """Quality of ``value`` computed with the window ``(alpha, beta)``."""
    if value <= alpha:
        return Quality.UPPER_BOUND
    if value >= beta:
        return Quality.LOWER_BOUND
    return Quality.EXACT


class Table:
    """Transposition table keyed on ``(depth, canonical state)``.

    Every key holds a list of bound records seen from the +1 perspective.
    Inserting only appends; redundant records are dropped by ``clean``.
    """

    def __init__(self) -> None:
        self.table: dict[tuple[int, GameState], list[TableEntry]] = {}
        self.probes = 0
        self.hits = 0
        self.stores = 0
        self.removed = 0

    def _key(self, state: GameState, player: int, depth: int) -> tuple[int, GameState]:
        return depth, canonicalize(perspective(state, player))

    def get(
        self, state: GameState, player: int, depth: int, alpha: int, beta: int
    ) -> tuple[int | None, int, int]:
        """Probe a node searched with the window ``(alpha, beta)``.

        Returns ``(value, alpha, beta)``. ``value`` is set when an exact record
        exists or the cached bounds close the window, otherwise it is None and
        the narrowed window should be searched.
        """
        self.probes += 1
        entries = self.table.get(self._key(state, player, depth))
        if entries is None:
            return None, alpha, beta

        for entry in entries:
            match entry.quality:
                case Quality.EXACT:
                    self.hits += 1
                    return entry.value, alpha, beta
                case Quality.UPPER_BOUND:
                    beta = min(beta, entry.value)
                case Quality.LOWER_BOUND:
                    alpha = max(alpha, entry.value)

            if alpha >= beta:
                self.hits += 1
                return entry.value, alpha, beta

        return None, alpha, beta

    def insert(
        self, state: GameState, player: int, depth: int, alpha: int, beta: int, value: int
    ) -> None:
        """Record ``value`` for a node whose search started with ``(alpha, beta)``."""
        depth, canonical = self._key(state, player, depth)
        entry = TableEntry(value, classify(value, alpha, beta))
        key = (depth, canonical.copy())
        self.table.setdefault(key, []).append(entry)
        self.stores += 1

    def clean(self) -> int:
        """Drop records made redundant by another record at the same key.

        An exact record makes every other record redundant. Otherwise only the
        tightest upper bound and the tightest lower bound are kept.
        """
        removed = 0
        for key, entries in self.table.items():
            kept = _dominant(entries)
            removed += len(entries) - len(kept)
            self.table[key] = kept

        self.removed += removed
        logger.debug(
            "clean removed %d records, %d left in %d keys", removed, len(self), len(self.table)
        )
        return removed

    def clear(self) -> None:
        self.table.clear()
        self.probes = 0
        self.hits = 0
        self.stores = 0
        self.removed = 0

    def is_empty(self) -> bool:
        return not self.table

    def get_stats(self) -> dict:
        """Probe and storage counters since creation or the last ``clear``."""
        hit_rate = self.hits / self.probes if self.probes > 0 else 0.0
        return {
            "probes": self.probes,
            "hits": self.hits,
            "hit_rate": hit_rate,
            "stores": self.stores,
            "removed": self.removed,
            "keys": len(self.table),
            "records": len(self),
        }

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.table.values())


def _dominant(entries: list[TableEntry]) -> list[TableEntry]:
    for entry in entries:
        if entry.quality == Quality.EXACT:
            return [entry]

    kept: list[TableEntry] = []
    upper = [e for e in entries if e.quality == Quality.UPPER_BOUND]
    if upper:
        kept.append(min(upper, key=lambda e: e.value))
    lower = [e for e in entries if e.quality == Quality.LOWER_BOUND]
    if lower:
        kept.append(max(lower, key=lambda e: e.value))
    return kept
