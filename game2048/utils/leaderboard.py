"""
High score ranking.

The leaderboard only ranks scores; storing the records is left to the caller through
``to_records`` and ``from_records``.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Callable, Iterable


@dataclass(frozen=True)
class ScoreRecord:
    """One leaderboard entry."""

    value: int
    date: str


def _today() -> str:
    return date.today().isoformat()


class Leaderboard:
    """
    Keep the best scores, highest first.

    Parameters
    ----------
    max_scores : int, optional
        Number of ranked entries (default is 3).
    records : Iterable[ScoreRecord], optional
        Initial entries. Missing entries are filled with zero scores.
    clock : Callable[[], str], optional
        Returns the date stamped on new entries (default is today's ISO date).
    """

    def __init__(
        self,
        max_scores: int = 3,
        records: Iterable[ScoreRecord] | None = None,
        clock: Callable[[], str] | None = None,
    ):
        if max_scores < 1:
            raise ValueError(f'max_scores must be positive, got {max_scores}')

        self.max_scores = max_scores
        self._clock = clock if clock is not None else _today
        self._scores: list[ScoreRecord] = []
        self._fill(records or [])

    def _fill(self, records: Iterable[ScoreRecord]) -> None:
        ranked = sorted(records, key=lambda record: record.value, reverse=True)[: self.max_scores]
        padding = [ScoreRecord(value=0, date=self._clock()) for _ in range(self.max_scores - len(ranked))]
        self._scores = ranked + padding

    @property
    def scores(self) -> list[ScoreRecord]:
        """Ranked entries, best first."""
        return list(self._scores)

    def best_score(self) -> int:
        return self._scores[0].value

    def can_enter(self, score: int) -> bool:
        """True if ``score`` would take a place on the board. Non-positive scores never do."""
        if score <= 0:
            return False
        return score > self._scores[-1].value

    def check_and_update(self, score: int) -> int | None:
        """
        Insert ``score`` if it ranks.

        Parameters
        ----------
        score : int
            Final score of a game.

        Returns
        -------
        int or None
            The zero-based rank taken by the score, or None if it did not enter.

        Notes
        -----
        A score equal to an existing entry ranks below it.
        """
        if not self.can_enter(score):
            return None

        rank = next(index for index, record in enumerate(self._scores) if score > record.value)
        self._scores.insert(rank, ScoreRecord(value=score, date=self._clock()))
        del self._scores[self.max_scores :]
        return rank

    def clear(self) -> None:
        """Reset every entry to a zero score."""
        self._fill([])

    def stats(self) -> dict[str, Any]:
        """
        Summary of the ranked games.

        Returns
        -------
        dict
            ``total_games``, ``best_score``, ``average_score`` (rounded) and ``last_play_date``
            (date of the best entry), computed over non-zero entries only.
        """
        played = [record for record in self._scores if record.value > 0]
        return {
            'total_games': len(played),
            'best_score': self.best_score(),
            'average_score': round(sum(record.value for record in played) / len(played)) if played else 0,
            'last_play_date': played[0].date if played else None,
        }

    def to_records(self) -> list[dict[str, Any]]:
        """Entries as plain dictionaries."""
        return [asdict(record) for record in self._scores]

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]], max_scores: int = 3, **kwargs: Any) -> 'Leaderboard':
        """
        Rebuild a leaderboard from plain dictionaries.

        Entries without an integer ``value`` or a string ``date`` are skipped.
        """
        valid = [
            ScoreRecord(value=record['value'], date=record['date'])
            for record in records
            if isinstance(record, dict)
            and isinstance(record.get('value'), int)
            and not isinstance(record.get('value'), bool)
            and isinstance(record.get('date'), str)
        ]
        return cls(max_scores=max_scores, records=valid, **kwargs)
