"""Replacement text for wrapped initializers. The original text is never re-printed."""

from react_memo_linter.domain.constants import CALLBACK_HELPER, MEMO_HELPER
from react_memo_linter.domain.entities import ExprKind, RuleKind

EMPTY_DEPS: str = "[]"


class WrapTextSynthesizer:
    """
    Builds `useCallback(...)` / `useMemo(() => ...)` around verbatim source.

    The dependency list is always `[]`; no dependency inference is attempted.
    """

    @staticmethod
    def callback(original: str, helper: str = CALLBACK_HELPER) -> str:
        return f"{helper}({original}, {EMPTY_DEPS})"

    @staticmethod
    def value(original: str, kind: ExprKind, helper: str = MEMO_HELPER) -> str:
        # `() => {` would open a block body, so object literals need parentheses.
        if kind is ExprKind.OBJECT_LITERAL:
            return f"{helper}(() => ({original}), {EMPTY_DEPS})"
        if kind in (
            ExprKind.CALL,
            ExprKind.ARRAY_LITERAL,
            ExprKind.MARKUP_ELEMENT,
            ExprKind.MARKUP_FRAGMENT,
        ):
            return f"{helper}(() => {original}, {EMPTY_DEPS})"
        raise ValueError(f"{kind.value} initializers are not wrapped with {helper}")

    @classmethod
    def synthesize(cls, rule_kind: RuleKind, expression_kind: ExprKind, original: str) -> str:
        if rule_kind is RuleKind.WRAP_AS_CALLBACK:
            if expression_kind not in (ExprKind.FUNCTION_LITERAL, ExprKind.ARROW_FUNCTION):
                raise ValueError(f"{expression_kind.value} initializers are not wrapped with {CALLBACK_HELPER}")
            return cls.callback(original)
        if rule_kind is RuleKind.WRAP_AS_VALUE:
            return cls.value(original, expression_kind)
        raise ValueError(f"Unhandled rule kind: {rule_kind}")
