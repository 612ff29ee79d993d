# src/halscope/complexity.py
import logging
import math
from typing import List

from .halstead import MetricBundle
from .module_report import ModuleReport
from .report import AggregateReport, MethodReport

logger = logging.getLogger(__name__)


def calculate_halstead(bundle: MetricBundle, *, stroud: float = 18, bug_divisor: float = 3000) -> MetricBundle:
    """Halstead derived metrics from the raw operator / operand counts"""
    bundle.reset()

    n1 = bundle.operators.distinct  # unique operators
    n2 = bundle.operands.distinct   # unique operands
    N1 = bundle.operators.total     # total operators
    N2 = bundle.operands.total      # total operands

    bundle.length = N1 + N2
    bundle.vocabulary = n1 + n2
    if bundle.vocabulary > 0:
        bundle.volume = bundle.length * math.log2(bundle.vocabulary)
    if n2 > 0:
        bundle.difficulty = (n1 / 2) * (N2 / n2)
    bundle.effort = bundle.difficulty * bundle.volume
    bundle.time = bundle.effort / stroud
    bundle.bugs = bundle.volume / bug_divisor

    return bundle


def cyclomatic_density(report: AggregateReport) -> float:
    logical = report.sloc["logical"]
    if logical == 0:
        return 0
    return report.cyclomatic / logical * 100


def _outermost(methods: List[MethodReport]) -> List[MethodReport]:
    """Methods whose line span is not inside another method of the list"""
    result = []
    for index, method in enumerate(methods):
        if method.line_start is None or method.line_end is None:
            result.append(method)
            continue
        enclosed = False
        for other_index, other in enumerate(methods):
            if other is method or other.line_start is None or other.line_end is None:
                continue
            if other.line_start <= method.line_start and method.line_end <= other.line_end:
                # identical spans: the first one counts
                same_span = (other.line_start, other.line_end) == (method.line_start, method.line_end)
                if not same_span or other_index < index:
                    enclosed = True
                    break
        if not enclosed:
            result.append(method)
    return result


def _ln(value: float) -> float:
    return math.log(value) if value > 0 else 0


def maintainability_index(effort: float, cyclomatic: float, logical: float, *, new_mi: bool = False) -> float:
    """Classic maintainability index, optionally rescaled to 0-100"""
    mi = 171 - 3.42 * _ln(effort) - 0.23 * cyclomatic - 16.2 * _ln(logical)
    if new_mi:
        mi = max(0, mi * 100 / 171)
    return mi


class ComplexityCalculator:
    """Compute derived metrics for a finished module report"""

    def __init__(self, *, stroud: float = 18, bug_divisor: float = 3000, new_mi: bool = False):
        self.stroud = stroud
        self.bug_divisor = bug_divisor
        self.new_mi = new_mi

    def _calculate_report(self, report: AggregateReport):
        calculate_halstead(report.halstead, stroud=self.stroud, bug_divisor=self.bug_divisor)
        report.cyclomatic_density = cyclomatic_density(report)

    def calculate(self, module_report: ModuleReport) -> ModuleReport:
        for method in module_report.all_methods():
            self._calculate_report(method)

        for class_report in module_report.classes:
            aggregate = class_report.method_aggregate
            aggregate.sloc["physical"] = sum(m.sloc["physical"] for m in _outermost(class_report.methods))
            self._calculate_report(aggregate)

        aggregate = module_report.method_aggregate
        aggregate.sloc["physical"] = sum(m.sloc["physical"] for m in _outermost(list(module_report.all_methods())))
        self._calculate_report(aggregate)

        module_report.maintainability = maintainability_index(
            aggregate.halstead.effort,
            aggregate.cyclomatic,
            aggregate.sloc["logical"],
            new_mi=self.new_mi,
        )

        logger.debug(
            f"Calculated metrics for {len(module_report.classes)} classes, "
            f"{sum(1 for _ in module_report.all_methods())} methods"
        )
        return module_report
