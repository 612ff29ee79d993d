# src/halscope/halstead.py
"""
Halstead metric data.

Raw counts are kept per aggregation level:
- n1 / n2 = distinct operators / operands
- N1 / N2 = total operators / operands

The derived scalars (length, vocabulary, volume, difficulty, effort, time,
bugs) are written by the formula step in ``complexity.py`` and can be reset
and recomputed any number of times from the same raw counts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from .rules import HalsteadKind

DERIVED_FIELDS = (
    "bugs",
    "difficulty",
    "effort",
    "length",
    "time",
    "vocabulary",
    "volume",
)


@dataclass
class HalsteadCount:
    """Distinct and total count for one of operands / operators."""

    distinct: int = 0
    total: int = 0
    identifiers: List[str] = field(default_factory=list)
    _seen: Set[str] = field(default_factory=set, repr=False, compare=False)

    def record(self, identifier: str) -> bool:
        """Append an identifier; returns True if this counter had not seen it."""
        self.identifiers.append(identifier)
        self.total += 1
        if identifier in self._seen:
            return False
        self._seen.add(identifier)
        self.distinct += 1
        return True

    def clear(self):
        self.distinct = 0
        self.total = 0
        self.identifiers.clear()
        self._seen.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distinct": self.distinct,
            "total": self.total,
            "identifiers": list(self.identifiers),
        }


class MetricBundle:
    """All Halstead metric data for one report."""

    def __init__(self):
        # Estimate for the number of delivered bugs.
        self.bugs = 0
        # How hard the code is to write or understand.
        self.difficulty = 0
        self.effort = 0
        # N1 + N2
        self.length = 0
        # Estimated coding time in seconds.
        self.time = 0
        # n1 + n2
        self.vocabulary = 0
        self.volume = 0

        self.operands = HalsteadCount()
        self.operators = HalsteadCount()

    def __getitem__(self, kind: str | HalsteadKind) -> HalsteadCount:
        if isinstance(kind, HalsteadKind):
            kind = kind.value
        if kind == HalsteadKind.OPERANDS.value:
            return self.operands
        if kind == HalsteadKind.OPERATORS.value:
            return self.operators
        raise KeyError(kind)

    def reset(self, clear_counts: bool = False):
        """
        Zero the derived scalars.

        Operand and operator data is left alone unless ``clear_counts`` is set.
        """
        for name in DERIVED_FIELDS:
            setattr(self, name, 0)

        if clear_counts:
            self.operands.clear()
            self.operators.clear()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {name: getattr(self, name) for name in DERIVED_FIELDS}
        data["operands"] = self.operands.to_dict()
        data["operators"] = self.operators.to_dict()
        return data
