import pytest

from halscope.module_report import ModuleReport


CLASS_SCOPE = {"type": "class", "name": "aclass", "line_start": 100, "line_end": 200}
METHOD_SCOPE = {"type": "method", "name": "amethod", "line_start": 100, "line_end": 200, "param_count": 0}


@pytest.fixture
def report():
    """라인 10~100 범위의 빈 모듈 리포트를 생성합니다."""
    return ModuleReport(10, 100)


@pytest.fixture
def nested_report(report):
    """클래스 스코프 안에 메서드 스코프가 열린 상태의 리포트"""
    report.create_scope(CLASS_SCOPE)
    report.create_scope(METHOD_SCOPE)
    return report


@pytest.fixture
def sample_report():
    """
    트리 워커가 아래 코드를 순회한 것과 같은 상태의 리포트를 만듭니다.

        import os

        def helper(a, b):        # 3-5
            return a + b

        class Shape:             # 10-30
            def area(self):      # 12-20
                if self.w:
                    return self.w * self.h
            def scale(self, k):  # 22-30
                self.w = self.w * k
    """
    report = ModuleReport(1, 30)
    report.add_dependencies({"type": "import", "path": "os"})

    report.create_scope({"type": "method", "name": "helper", "line_start": 3, "line_end": 5, "param_count": 2})
    report.increment_params(2)
    report.increment_logical_sloc(1)
    report.halstead_item_encountered("operators", "return")
    report.halstead_item_encountered("operators", "+")
    report.halstead_item_encountered("operands", "a")
    report.halstead_item_encountered("operands", "b")
    report.pop_scope({"type": "method"})

    report.create_scope({"type": "class", "name": "Shape", "line_start": 10, "line_end": 30})

    report.create_scope({"type": "method", "name": "area", "line_start": 12, "line_end": 20, "param_count": 1})
    report.increment_params(1)
    report.increment_logical_sloc(2)
    report.increment_cyclomatic(1)
    report.halstead_item_encountered("operators", "if")
    report.halstead_item_encountered("operators", "return")
    report.halstead_item_encountered("operators", "*")
    report.halstead_item_encountered("operands", "w")
    report.halstead_item_encountered("operands", "w")
    report.halstead_item_encountered("operands", "h")
    report.pop_scope({"type": "method"})

    report.create_scope({"type": "method", "name": "scale", "line_start": 22, "line_end": 30, "param_count": 2})
    report.increment_params(2)
    report.increment_logical_sloc(1)
    report.halstead_item_encountered("operators", "=")
    report.halstead_item_encountered("operators", "*")
    report.halstead_item_encountered("operands", "w")
    report.halstead_item_encountered("operands", "w")
    report.halstead_item_encountered("operands", "k")
    report.pop_scope({"type": "method"})

    report.pop_scope({"type": "class"})
    return report
