# src/halscope/module_report.py
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from .errors import InvalidScopeDescriptor, UnbalancedScope
from .report import AggregateReport, ClassReport, MethodReport
from .rules import HalsteadKind, ScopeType
from .traits import SyntaxTraits

logger = logging.getLogger(__name__)


def _scope_type(descriptor: Any, operation: str) -> ScopeType:
    if not isinstance(descriptor, Mapping):
        raise InvalidScopeDescriptor(
            f"{operation}: scope descriptor must be a mapping",
            {"descriptor": repr(descriptor)},
        )
    if "type" not in descriptor:
        raise InvalidScopeDescriptor(f"{operation}: scope descriptor has no type")

    raw = descriptor["type"]
    if isinstance(raw, ScopeType):
        return raw
    try:
        return ScopeType(raw)
    except ValueError:
        raise InvalidScopeDescriptor(
            f"{operation}: unknown scope type", {"type": repr(raw)}
        ) from None


def _halstead_kind(kind: str | HalsteadKind) -> HalsteadKind:
    if isinstance(kind, HalsteadKind):
        return kind
    try:
        return HalsteadKind(kind)
    except ValueError:
        raise ValueError(f"unknown halstead kind {kind!r}") from None


class ModuleReport:
    """
    Module level report and scope tracker.

    A tree walker calls ``create_scope`` when it enters a class or method,
    reports metrics while visiting the body and calls ``pop_scope`` on the
    way out. Every metric increment is applied to the module aggregate, the
    active class's method aggregate and the innermost active method, so each
    level keeps its own running total.

    The class and method stacks are independent. Each is either ``None`` or a
    non-empty list.
    """

    def __init__(self, line_start: Optional[int] = None, line_end: Optional[int] = None):
        self._line_start = line_start
        self._line_end = line_end

        self.dependencies: List[Any] = []
        self.classes: List[ClassReport] = []
        self.methods: List[MethodReport] = []
        self.method_aggregate = AggregateReport()
        self.maintainability = 0

        self._scope_stack_class: Optional[List[ClassReport]] = None
        self._scope_stack_method: Optional[List[MethodReport]] = None

    @property
    def line_start(self) -> Optional[int]:
        return self._line_start

    @property
    def line_end(self) -> Optional[int]:
        return self._line_end

    # ------------------------------------------------------------------
    # Scope lifecycle
    # ------------------------------------------------------------------

    def create_scope(self, descriptor: Mapping | None = None) -> ClassReport | MethodReport:
        scope_type = _scope_type(descriptor, "create_scope")

        name = descriptor.get("name")
        line_start = descriptor.get("line_start")
        line_end = descriptor.get("line_end")

        if scope_type is ScopeType.CLASS:
            current = self.get_current_class_report()
            if current is not None:
                raise InvalidScopeDescriptor(
                    "create_scope: class scopes cannot nest",
                    {"name": name, "active": current.name},
                )

            report = ClassReport(name, line_start, line_end)
            self.classes.append(report)
            if self._scope_stack_class is None:
                self._scope_stack_class = []
            self._scope_stack_class.append(report)
            logger.debug(f"Entered class scope {name} ({line_start}-{line_end})")
            return report

        report = MethodReport(name, line_start, line_end, descriptor.get("param_count", 0))
        current_class = self.get_current_class_report()
        (current_class.methods if current_class else self.methods).append(report)
        if self._scope_stack_method is None:
            self._scope_stack_method = []
        self._scope_stack_method.append(report)
        logger.debug(f"Entered method scope {name} ({line_start}-{line_end})")
        return report

    def pop_scope(self, descriptor: Mapping | None = None) -> ClassReport | MethodReport:
        scope_type = _scope_type(descriptor, "pop_scope")
        attr = "_scope_stack_class" if scope_type is ScopeType.CLASS else "_scope_stack_method"

        stack = getattr(self, attr)
        if stack is None:
            raise UnbalancedScope(
                f"pop_scope: no active {scope_type.value} scope",
                {"type": scope_type.value},
            )

        report = stack.pop()
        if not stack:
            setattr(self, attr, None)
        logger.debug(f"Left {scope_type.value} scope {report.name}")
        return report

    def get_current_class_report(self) -> Optional[ClassReport]:
        if self._scope_stack_class:
            return self._scope_stack_class[-1]
        return None

    def get_current_method_report(self) -> Optional[MethodReport]:
        if self._scope_stack_method:
            return self._scope_stack_method[-1]
        return None

    def finalize(self) -> "ModuleReport":
        """Drop any scope state left over from the traversal."""
        dangling = len(self._scope_stack_class or ()) + len(self._scope_stack_method or ())
        if dangling:
            logger.warning(f"finalize discarded {dangling} unclosed scope(s)")

        self._scope_stack_class = None
        self._scope_stack_method = None
        return self

    # ------------------------------------------------------------------
    # Metric fan-out
    # ------------------------------------------------------------------

    def _active_aggregates(self) -> List[AggregateReport]:
        targets = [self.method_aggregate]

        current_class = self.get_current_class_report()
        if current_class is not None:
            targets.append(current_class.method_aggregate)

        current_method = self.get_current_method_report()
        if current_method is not None:
            targets.append(current_method)

        return targets

    def halstead_item_encountered(self, kind: str | HalsteadKind, identifier: str):
        kind = _halstead_kind(kind)
        for report in self._active_aggregates():
            report.halstead_item_encountered(kind, identifier)

    def increment_cyclomatic(self, amount: int = 1):
        for report in self._active_aggregates():
            report.increment_cyclomatic(amount)

    def increment_logical_sloc(self, amount: int = 1):
        for report in self._active_aggregates():
            report.increment_logical_sloc(amount)

    def increment_params(self, amount: int = 1):
        for report in self._active_aggregates():
            report.increment_params(amount)

    def add_dependencies(self, dependencies: Any):
        if dependencies is None:
            return
        if isinstance(dependencies, (list, tuple)):
            self.dependencies.extend(dependencies)
        else:
            self.dependencies.append(dependencies)

    def process_syntax(self, traits: SyntaxTraits, *params) -> "ModuleReport":
        """Record the metrics configured for one syntax node."""
        if traits.lloc is not None:
            lloc = traits.lloc.value_of(*params)
            if lloc:
                self.increment_logical_sloc(lloc)

        if traits.cyclomatic is not None:
            cyclomatic = traits.cyclomatic.value_of(*params)
            if cyclomatic:
                self.increment_cyclomatic(cyclomatic)

        for kind in HalsteadKind:
            trait = getattr(traits, kind.value)
            if trait is None:
                continue
            identifiers = trait.value_of(*params)
            if isinstance(identifiers, str):
                identifiers = [identifiers]
            for identifier in identifiers or ():
                if identifier:
                    self.halstead_item_encountered(kind, identifier)

        if traits.dependencies is not None:
            self.add_dependencies(traits.dependencies.value_of(*params))

        return self

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def all_methods(self) -> Iterator[MethodReport]:
        yield from self.methods
        for class_report in self.classes:
            yield from class_report.methods

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_start": self.line_start,
            "line_end": self.line_end,
            "maintainability": self.maintainability,
            "dependencies": list(self.dependencies),
            "method_aggregate": self.method_aggregate.to_dict(),
            "classes": [c.to_dict() for c in self.classes],
            "methods": [m.to_dict() for m in self.methods],
        }
