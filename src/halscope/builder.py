# src/halscope/builder.py
import networkx as nx

from .module_report import ModuleReport
from .rules import EdgeType, NodeType


class ReportGraphBuilder:
    def __init__(self, report: ModuleReport, module_name: str = "module"):
        self.report = report
        self.module_name = module_name
        self.graph = nx.DiGraph()

    def _node_id(self, parent: str, name: str | None, line_start: int | None) -> str:
        nid = f"{parent}.{name}"
        if self.graph.has_node(nid):
            # same name defined twice in one scope
            nid = f"{nid}:{line_start}"
        return nid

    def build(self):
        self.graph = nx.DiGraph()
        mod = self.module_name
        self.graph.add_node(
            mod,
            type=NodeType.MODULE,
            line_start=self.report.line_start,
            line_end=self.report.line_end,
            maintainability=self.report.maintainability,
            dependencies=list(self.report.dependencies),
            **self.report.method_aggregate.to_dict(),
        )

        for method in self.report.methods:
            fn = self._node_id(mod, method.name, method.line_start)
            self.graph.add_node(fn, **{**method.to_dict(), "type": NodeType.FUNCTION})
            self.graph.add_edge(mod, fn, type=EdgeType.CONTAINS)

        for class_report in self.report.classes:
            cls = self._node_id(mod, class_report.name, class_report.line_start)
            attrs = class_report.to_dict()
            del attrs["methods"]
            self.graph.add_node(cls, **{**attrs, "type": NodeType.CLASS})
            self.graph.add_edge(mod, cls, type=EdgeType.CONTAINS)

            for method in class_report.methods:
                fn = self._node_id(cls, method.name, method.line_start)
                self.graph.add_node(fn, **{**method.to_dict(), "type": NodeType.FUNCTION})
                self.graph.add_edge(cls, fn, type=EdgeType.DEFINES)

        return self.graph
