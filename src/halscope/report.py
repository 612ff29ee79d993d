# src/halscope/report.py
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .halstead import MetricBundle
from .rules import HalsteadKind, ScopeType


def _physical_lines(line_start: Optional[int], line_end: Optional[int]) -> int:
    if line_start is None or line_end is None:
        return 0
    return max(0, line_end - line_start + 1)


class AggregateReport:
    """Running metric totals for one aggregation level"""

    def __init__(self, line_start: Optional[int] = None, line_end: Optional[int] = None):
        self.cyclomatic = 1
        self.cyclomatic_density = 0
        self.sloc = {"logical": 0, "physical": _physical_lines(line_start, line_end)}
        self.halstead = MetricBundle()
        self.params = 0
        self.param_count = 0

    def halstead_item_encountered(self, kind: str | HalsteadKind, identifier: str) -> bool:
        return self.halstead[kind].record(identifier)

    def increment_cyclomatic(self, amount: int = 1):
        self.cyclomatic += amount

    def increment_logical_sloc(self, amount: int = 1):
        self.sloc["logical"] += amount

    def increment_params(self, amount: int = 1):
        self.params += amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cyclomatic": self.cyclomatic,
            "cyclomatic_density": self.cyclomatic_density,
            "sloc": dict(self.sloc),
            "halstead": self.halstead.to_dict(),
            "params": self.params,
            "param_count": self.param_count,
        }


class MethodReport(AggregateReport):
    type = ScopeType.METHOD

    def __init__(
        self,
        name: str | None,
        line_start: Optional[int] = None,
        line_end: Optional[int] = None,
        param_count: int = 0,
    ):
        super().__init__(line_start, line_end)
        self.name = name
        self.line_start = line_start
        self.line_end = line_end
        self.param_count = param_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "line_start": self.line_start,
            "line_end": self.line_end,
            **super().to_dict(),
        }

    def __repr__(self) -> str:
        return f"MethodReport(name={self.name!r}, line_start={self.line_start}, line_end={self.line_end})"


class ClassReport:
    """
    Report for a class scope.

    A class's own metrics are read through its method aggregate, which the
    module report updates for every method nested in the class.
    """

    type = ScopeType.CLASS

    def __init__(self, name: str | None, line_start: Optional[int] = None, line_end: Optional[int] = None):
        self.name = name
        self.line_start = line_start
        self.line_end = line_end
        self.methods: List[MethodReport] = []
        self.method_aggregate = AggregateReport()

    @property
    def halstead(self) -> MetricBundle:
        return self.method_aggregate.halstead

    @property
    def cyclomatic(self) -> int:
        return self.method_aggregate.cyclomatic

    @property
    def cyclomatic_density(self) -> float:
        return self.method_aggregate.cyclomatic_density

    @property
    def params(self) -> int:
        return self.method_aggregate.params

    @property
    def sloc(self) -> Mapping[str, int]:
        """Read-only; logical lines are counted on the method aggregate."""
        return MappingProxyType({
            "logical": self.method_aggregate.sloc["logical"],
            "physical": _physical_lines(self.line_start, self.line_end),
        })

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "line_start": self.line_start,
            "line_end": self.line_end,
            "sloc": dict(self.sloc),
            "method_aggregate": self.method_aggregate.to_dict(),
            "methods": [m.to_dict() for m in self.methods],
        }

    def __repr__(self) -> str:
        return f"ClassReport(name={self.name!r}, methods={len(self.methods)})"
