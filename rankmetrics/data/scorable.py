"""Score/label record contract consumed by the ranking metrics."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Protocol, runtime_checkable

__all__ = ["Scorable", "ScoreLabel", "Projected", "project"]


@runtime_checkable
class Scorable(Protocol):
    """Anything exposing a score and a ground-truth label.

    ``get_label`` returns ``True`` for the positive (active) class.
    """

    def get_score(self) -> float:
        ...

    def get_label(self) -> bool:
        ...


@dataclass(frozen=True)
class ScoreLabel:
    """Plain record used when data comes from a table."""

    score: float
    label: bool
    name: str = ""

    def get_score(self) -> float:
        return self.score

    def get_label(self) -> bool:
        return self.label


class Projected:
    """Wrap an arbitrary caller record with score/label projections."""

    __slots__ = ("record", "_score_of", "_label_of")

    def __init__(
        self,
        record: Any,
        score_of: Callable[[Any], float],
        label_of: Callable[[Any], bool],
    ) -> None:
        self.record = record
        self._score_of = score_of
        self._label_of = label_of

    def get_score(self) -> float:
        return float(self._score_of(self.record))

    def get_label(self) -> bool:
        return bool(self._label_of(self.record))

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Projected({self.record!r})"


def project(
    records: Iterable[Any],
    score_of: Callable[[Any], float],
    label_of: Callable[[Any], bool],
) -> List[Projected]:
    """Adapt ``records`` to the :class:`Scorable` contract.

    Examples
    --------
    >>> rows = [("a", 14.0, True), ("b", 13.0, False)]
    >>> items = project(rows, lambda r: r[1], lambda r: r[2])
    >>> items[0].get_score()
    14.0
    """
    return [Projected(r, score_of, label_of) for r in records]
