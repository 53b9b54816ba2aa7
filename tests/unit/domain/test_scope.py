"""Unit tests for scope classification and name resolution."""

import unittest

from linter_test_utils import parse
from react_memo_linter.domain.scope import ScopeCandidate, ScopeClassifier


def _functions(unit):
    """(node, ancestors) for every function-like node, in document order."""
    found = []
    stack = [(unit.root, ())]
    while stack:
        node, ancestors = stack.pop()
        if node.type in {"function_declaration", "function_expression", "function", "arrow_function"}:
            found.append((node, ancestors))
        stack.extend((child, ancestors + (node,)) for child in reversed(node.named_children))
    return found


class TestScopeClassifier(unittest.TestCase):
    """Test the name-based hook/component heuristic."""

    def test_hook_names(self) -> None:
        for name in ("useX", "useCustomHook", "use2D"):
            self.assertTrue(ScopeClassifier.is_hook_name(name), name)
        for name in ("use", "user", "useful", "Use", None, ""):
            self.assertFalse(ScopeClassifier.is_hook_name(name), name)

    def test_component_names(self) -> None:
        self.assertTrue(ScopeClassifier.is_component_name("Button"))
        self.assertFalse(ScopeClassifier.is_component_name("button"))
        self.assertFalse(ScopeClassifier.is_component_name("_Button"))
        self.assertFalse(ScopeClassifier.is_component_name(None))

    def test_memo_scope_name(self) -> None:
        self.assertTrue(ScopeClassifier.is_memo_scope_name("useData"))
        self.assertTrue(ScopeClassifier.is_memo_scope_name("Card"))
        self.assertFalse(ScopeClassifier.is_memo_scope_name("normalFunction"))


class TestScopeCandidate(unittest.TestCase):
    """Test name resolution through declarations and declarators."""

    def _resolve_all(self, code: str) -> list[ScopeCandidate]:
        unit = parse(code)
        return [ScopeCandidate.resolve(node, ancestors, unit) for node, ancestors in _functions(unit)]

    def test_function_declaration_uses_its_own_name(self) -> None:
        [candidate] = self._resolve_all("function useThing() { return 1; }")
        self.assertEqual(candidate.name, "useThing")
        self.assertTrue(candidate.qualifies)
        self.assertTrue(candidate.has_block_body)

    def test_declarator_name_for_expressions(self) -> None:
        names = [c.name for c in self._resolve_all(
            "const Card = () => { return 1; };\nvar useX = function () {};\n"
        )]
        self.assertEqual(names, ["Card", "useX"])

    def test_anonymous_functions_have_no_name(self) -> None:
        candidates = self._resolve_all("export default () => {};\nfoo(function () {});\n")
        self.assertEqual([c.name for c in candidates], [None, None])
        self.assertFalse(any(c.qualifies for c in candidates))

    def test_destructured_declarator_does_not_name_the_function(self) -> None:
        [candidate] = self._resolve_all("const { Card } = () => {};")
        self.assertIsNone(candidate.name)

    def test_function_used_as_default_value_is_not_named_by_declarator(self) -> None:
        candidates = self._resolve_all("const Card = wrap(() => {});")
        self.assertEqual([c.name for c in candidates], [None])

    def test_expression_body_is_not_a_block(self) -> None:
        [candidate] = self._resolve_all("const Label = () => <span />;")
        self.assertEqual(candidate.name, "Label")
        self.assertFalse(candidate.has_block_body)
