"""Eligibility predicates for the callback and value rules."""

from dataclasses import dataclass

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import (
    CALLBACK_HELPER,
    DEFAULT_DIAGNOSTIC_SINKS,
    DEFAULT_STATEFUL_PRIMITIVES,
    MEMO_HELPER,
)
from react_memo_linter.domain.entities import ExprKind, RuleKind
from react_memo_linter.domain.expressions import ExpressionClassifier
from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode
from react_memo_linter.domain.scope import ScopeClassifier

CALLBACK_KINDS: frozenset[ExprKind] = frozenset({ExprKind.FUNCTION_LITERAL, ExprKind.ARROW_FUNCTION})

VALUE_KINDS: frozenset[ExprKind] = frozenset(
    {
        ExprKind.CALL,
        ExprKind.OBJECT_LITERAL,
        ExprKind.ARRAY_LITERAL,
        ExprKind.MARKUP_ELEMENT,
        ExprKind.MARKUP_FRAGMENT,
    }
)


@dataclass(frozen=True)
class EligibilityPolicy:
    """
    Decides whether an initializer must be wrapped.

    `stateful_primitives` and `diagnostic_sinks` are the overridable
    denylists for the value rule's call exclusions.
    """

    stateful_primitives: frozenset[str] = frozenset(DEFAULT_STATEFUL_PRIMITIVES)
    diagnostic_sinks: frozenset[str] = frozenset(DEFAULT_DIAGNOSTIC_SINKS)
    skip_custom_hook_calls: bool = True

    @classmethod
    def from_config(cls, config: ConfigurationLoader) -> "EligibilityPolicy":
        return cls(
            stateful_primitives=config.stateful_primitives,
            diagnostic_sinks=config.diagnostic_sinks,
            skip_custom_hook_calls=config.skip_custom_hook_calls,
        )

    def is_eligible(self, kind: RuleKind, node: SyntaxNode, unit: SourceUnitProtocol) -> bool:
        if kind is RuleKind.WRAP_AS_CALLBACK:
            return self.needs_callback(node, unit)
        if kind is RuleKind.WRAP_AS_VALUE:
            return self.needs_memo(node, unit)
        raise ValueError(f"Unhandled rule kind: {kind}")

    def needs_callback(self, node: SyntaxNode, unit: SourceUnitProtocol) -> bool:
        """Function and arrow literals, unless already `useCallback(...)`."""
        if ExpressionClassifier.is_direct_call_to(node, CALLBACK_HELPER, unit):
            return False
        return ExpressionClassifier.classify(node) in CALLBACK_KINDS

    def needs_memo(self, node: SyntaxNode, unit: SourceUnitProtocol) -> bool:
        """Calls, object/array literals and markup, minus stable or side-effect calls."""
        if ExpressionClassifier.is_direct_call_to(node, MEMO_HELPER, unit):
            return False
        kind = ExpressionClassifier.classify(node)
        if kind not in VALUE_KINDS:
            return False
        if kind is ExprKind.CALL:
            return not self._is_excluded_call(ExpressionClassifier.unwrap_parentheses(node), unit)
        return True

    def _is_excluded_call(self, node: SyntaxNode, unit: SourceUnitProtocol) -> bool:
        name = ExpressionClassifier.callee_identifier(node, unit)
        if name is not None:
            if name in self.stateful_primitives or name in self.diagnostic_sinks:
                return True
            # Hooks cannot be called inside a useMemo factory.
            return self.skip_custom_hook_calls and ScopeClassifier.is_hook_name(name)
        base = ExpressionClassifier.callee_member_base(node, unit)
        return base is not None and base in self.diagnostic_sinks
