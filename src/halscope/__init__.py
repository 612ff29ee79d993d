# src/halscope/__init__.py
"""
halscope 0.1.0
Scope-aware aggregation of cyclomatic, SLOC and Halstead metrics.
"""

from .builder import ReportGraphBuilder
from .complexity import ComplexityCalculator
from .errors import HalscopeError, InvalidScopeDescriptor, ScopeError, UnbalancedScope
from .halstead import HalsteadCount, MetricBundle
from .module_report import ModuleReport
from .report import AggregateReport, ClassReport, MethodReport
from .rules import EdgeType, HalsteadKind, NodeType, ScopeType
from .traits import SyntaxTraits, Trait, TraitKind

__version__ = "0.1.0"


def summarize(
    report: ModuleReport,
    module_name: str = "module",
    *,
    stroud: float = 18,
    bug_divisor: float = 3000,
    new_mi: bool = False,
):
    """
    Finalize a module report, compute its derived metrics and return it as a graph.

    Parameters
    ----------
    report : ModuleReport
        Report populated by a tree walker.
    module_name : str
        Id of the module node in the returned graph.
    stroud : float
        Stroud number used for the Halstead time estimate.
    bug_divisor : float
        Divisor used for the Halstead delivered-bugs estimate.
    new_mi : bool
        Rescale the maintainability index to 0-100.
    """
    report.finalize()
    ComplexityCalculator(stroud=stroud, bug_divisor=bug_divisor, new_mi=new_mi).calculate(report)
    return ReportGraphBuilder(report, module_name).build()


__all__ = [
    "summarize",
    "ModuleReport",
    "AggregateReport",
    "ClassReport",
    "MethodReport",
    "MetricBundle",
    "HalsteadCount",
    "Trait",
    "TraitKind",
    "SyntaxTraits",
    "ComplexityCalculator",
    "ReportGraphBuilder",
    "ScopeType",
    "HalsteadKind",
    "NodeType",
    "EdgeType",
    "HalscopeError",
    "ScopeError",
    "InvalidScopeDescriptor",
    "UnbalancedScope",
    "__version__",
]
