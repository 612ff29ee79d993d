from halscope.rules import EdgeType, HalsteadKind, NodeType, ScopeType


class TestScopeType:
    """ScopeType 열거형 테스트"""

    def test_values(self):
        assert ScopeType.CLASS.value == "class"
        assert ScopeType.METHOD.value == "method"

    def test_count(self):
        assert len(ScopeType) == 2


class TestHalsteadKind:
    def test_values(self):
        assert HalsteadKind.OPERANDS.value == "operands"
        assert HalsteadKind.OPERATORS.value == "operators"


class TestNodeType:
    """NodeType 열거형 테스트"""

    def test_node_type_values(self):
        assert NodeType.MODULE.value == "module"
        assert NodeType.CLASS.value == "class"
        assert NodeType.FUNCTION.value == "function"

    def test_node_type_unique_values(self):
        """모든 NodeType 값이 고유한지 확인"""
        values = [node_type.value for node_type in NodeType]
        assert len(values) == len(set(values))


class TestEdgeType:
    """EdgeType 열거형 테스트"""

    def test_edge_type_values(self):
        assert EdgeType.CONTAINS.value == "contains"
        assert EdgeType.DEFINES.value == "defines"

    def test_edge_type_count(self):
        assert len(EdgeType) == 2
