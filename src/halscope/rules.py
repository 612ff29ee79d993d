# src/halscope/rules.py
from enum import Enum


class ScopeType(Enum):
    CLASS = "class"
    METHOD = "method"


class HalsteadKind(Enum):
    OPERANDS = "operands"
    OPERATORS = "operators"


class NodeType(Enum):
    MODULE = "module"
    CLASS = "class"
    FUNCTION = "function"


class EdgeType(Enum):
    CONTAINS = "contains"
    DEFINES = "defines"
