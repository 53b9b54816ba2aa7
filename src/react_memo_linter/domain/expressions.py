"""Expression classification over tree-sitter JavaScript/TypeScript nodes."""

from typing import Optional

from react_memo_linter.domain.entities import ExprKind
from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode


class ExpressionClassifier:
    """
    Maps initializer nodes onto the closed ExprKind set.

    Classification looks through redundant parentheses, since in ESTree
    terms `(expr)` is just `expr`.
    """

    _KIND_BY_TYPE: dict[str, ExprKind] = {
        "function_expression": ExprKind.FUNCTION_LITERAL,
        "function": ExprKind.FUNCTION_LITERAL,
        "generator_function": ExprKind.FUNCTION_LITERAL,
        "arrow_function": ExprKind.ARROW_FUNCTION,
        "call_expression": ExprKind.CALL,
        "object": ExprKind.OBJECT_LITERAL,
        "array": ExprKind.ARRAY_LITERAL,
        "jsx_element": ExprKind.MARKUP_ELEMENT,
        "jsx_self_closing_element": ExprKind.MARKUP_ELEMENT,
        "jsx_fragment": ExprKind.MARKUP_FRAGMENT,
    }

    _MEMBER_TYPES: frozenset[str] = frozenset({"member_expression", "subscript_expression"})

    @staticmethod
    def unwrap_parentheses(node: SyntaxNode) -> SyntaxNode:
        """Return the innermost expression of `((expr))`; other nodes are returned as is."""
        current = node
        while current.type == "parenthesized_expression":
            inner = [c for c in current.named_children if c.type != "comment"]
            if len(inner) != 1:
                return current
            current = inner[0]
        return current

    @classmethod
    def classify(cls, node: Optional[SyntaxNode]) -> ExprKind:
        if node is None:
            return ExprKind.OTHER
        node = cls.unwrap_parentheses(node)
        kind = cls._KIND_BY_TYPE.get(node.type, ExprKind.OTHER)
        if kind is ExprKind.CALL and cls._is_tagged_template(node):
            return ExprKind.OTHER
        if kind is ExprKind.MARKUP_ELEMENT and cls._is_fragment(node):
            return ExprKind.MARKUP_FRAGMENT
        return kind

    @staticmethod
    def _is_tagged_template(node: SyntaxNode) -> bool:
        arguments = node.child_by_field_name("arguments")
        return arguments is not None and arguments.type == "template_string"

    @staticmethod
    def _is_fragment(node: SyntaxNode) -> bool:
        # <>...</> parses as a jsx_element whose opening tag has no name.
        if node.type != "jsx_element":
            return False
        opening = node.child_by_field_name("open_tag")
        if opening is None:
            opening = next((c for c in node.named_children if c.type == "jsx_opening_element"), None)
        return opening is not None and opening.child_by_field_name("name") is None

    @classmethod
    def callee(cls, node: SyntaxNode) -> Optional[SyntaxNode]:
        """The called expression of a call, parentheses removed."""
        if node.type != "call_expression":
            return None
        function = node.child_by_field_name("function")
        return cls.unwrap_parentheses(function) if function is not None else None

    @classmethod
    def callee_identifier(cls, node: SyntaxNode, unit: SourceUnitProtocol) -> Optional[str]:
        """Name of a plain-identifier callee, e.g. `useMemo` in `useMemo(...)`."""
        callee = cls.callee(node)
        if callee is None or callee.type != "identifier":
            return None
        return unit.text_of(callee)

    @classmethod
    def callee_member_base(cls, node: SyntaxNode, unit: SourceUnitProtocol) -> Optional[str]:
        """Base identifier of a member callee, e.g. `console` in `console.log(...)`."""
        callee = cls.callee(node)
        if callee is None or callee.type not in cls._MEMBER_TYPES:
            return None
        obj = callee.child_by_field_name("object")
        if obj is None:
            return None
        obj = cls.unwrap_parentheses(obj)
        if obj.type != "identifier":
            return None
        return unit.text_of(obj)

    @classmethod
    def is_direct_call_to(cls, node: SyntaxNode, name: str, unit: SourceUnitProtocol) -> bool:
        """True for `name(...)` where the callee is exactly the identifier `name`."""
        return cls.callee_identifier(cls.unwrap_parentheses(node), unit) == name
