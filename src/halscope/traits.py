# src/halscope/traits.py
"""
Value-or-function wrappers used to configure metric collection.

A trait lets per-syntax configuration be given either as fixed data or as a
callable evaluated against the traversal context (typically ``node`` and
``parent``) when the metric is recorded.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Optional


class TraitKind(Enum):
    CONSTANT = "constant"
    CALLABLE = "callable"
    SEQUENCE = "sequence"


def _kind_of(data: Any) -> TraitKind:
    if isinstance(data, (list, tuple)):
        return TraitKind.SEQUENCE
    if callable(data):
        return TraitKind.CALLABLE
    return TraitKind.CONSTANT


class Trait:
    """Wraps a value that may be a constant, a callable, or a sequence of either."""

    __slots__ = ("_data", "_kind")

    def __init__(self, data: Any):
        self._data = data
        self._kind = _kind_of(data)

    @property
    def data(self) -> Any:
        return self._data

    @property
    def kind(self) -> TraitKind:
        return self._kind

    @property
    def type_name(self) -> str:
        """Python type name of the wrapped value."""
        return type(self._data).__name__

    def value_of(self, *params, **kwargs) -> Any:
        """
        Resolve the wrapped value.

        Callables (or callable entries of a sequence) are invoked with the
        forwarded parameters; everything else is returned as-is.
        """
        if self._kind is TraitKind.SEQUENCE:
            resolved = [
                entry(*params, **kwargs) if callable(entry) else entry
                for entry in self._data
            ]
            return tuple(resolved) if isinstance(self._data, tuple) else resolved

        if self._kind is TraitKind.CALLABLE:
            return self._data(*params, **kwargs)

        return self._data

    def __repr__(self) -> str:
        return f"Trait({self._data!r})"


@dataclass
class SyntaxTraits:
    """Metric configuration for one kind of syntax node."""

    lloc: Optional[Trait] = None
    cyclomatic: Optional[Trait] = None
    operators: Optional[Trait] = None
    operands: Optional[Trait] = None
    dependencies: Optional[Trait] = None

    @classmethod
    def create(cls, **values) -> "SyntaxTraits":
        """Build from raw values; anything not already a Trait gets wrapped."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise TypeError(f"unknown syntax traits: {', '.join(sorted(unknown))}")

        wrapped = {
            name: value if value is None or isinstance(value, Trait) else Trait(value)
            for name, value in values.items()
        }
        return cls(**wrapped)
