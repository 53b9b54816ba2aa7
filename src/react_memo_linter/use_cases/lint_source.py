"""Use Case: run rules over a parsed source unit and collect messages."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from react_memo_linter.domain.entities import EditSet, LintMessage, Suggestion
from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode
from react_memo_linter.domain.rules import (
    FixFunction,
    Fixer,
    Rule,
    SuggestionDescriptor,
    Visitor,
)
from react_memo_linter.domain.rules.catalog import RuleCatalog


@dataclass
class _ReportContext:
    """RuleContext bound to one rule and one unit."""

    unit: SourceUnitProtocol
    rule: Rule
    severity: str
    messages: list[LintMessage] = field(default_factory=list)

    def report(
        self,
        node: SyntaxNode,
        message_id: str,
        fix: Optional[FixFunction] = None,
        suggest: Sequence[SuggestionDescriptor] = (),
    ) -> None:
        node_range = self.unit.range_of(node)
        line, column = self.unit.position_of(node_range.start)
        end_line, end_column = self.unit.position_of(node_range.end)
        fixer = Fixer(self.unit)
        merged = EditSet(tuple(fix(fixer))).merged(self.unit.text) if fix is not None else None
        suggestions = tuple(
            Suggestion(
                message_id=descriptor.message_id,
                message=self._render(descriptor.message_id),
                fix=EditSet(tuple(descriptor.fix(fixer))).merged(self.unit.text),
            )
            for descriptor in suggest
        )
        self.messages.append(
            LintMessage(
                rule_id=self.rule.meta.rule_id,
                message_id=message_id,
                message=self._render(message_id),
                severity=self.severity,
                line=line,
                column=column,
                end_line=end_line,
                end_column=end_column,
                fix=merged,
                suggestions=suggestions,
            )
        )

    def _render(self, message_id: str) -> str:
        messages = self.rule.meta.messages
        if message_id not in messages:
            raise KeyError(f"{self.rule.meta.rule_id} has no message '{message_id}'")
        return messages[message_id]


class Linter:
    """
    Host that runs rules over a SourceUnit.

    The tree is walked depth first in document order. Callbacks receive the
    node and the tuple of its ancestors, root first.
    """

    def __init__(self, rules: Sequence[tuple[Rule, str]]) -> None:
        self.rules = list(rules)

    @classmethod
    def from_catalog(cls, catalog: RuleCatalog, only: Optional[list[str]] = None) -> "Linter":
        return cls([(rule, catalog.severity(rule.meta.rule_id)) for rule in catalog.enabled(only)])

    @staticmethod
    def compile_selector(selector: str) -> list[str]:
        """'a, b' -> ['a', 'b']. Only node-type unions are supported."""
        return [part.strip() for part in selector.split(",") if part.strip()]

    def lint(self, unit: SourceUnitProtocol) -> list[LintMessage]:
        contexts: list[_ReportContext] = []
        listeners: dict[str, list[Visitor]] = {}
        for rule, severity in self.rules:
            context = _ReportContext(unit=unit, rule=rule, severity=severity)
            contexts.append(context)
            for selector, callback in rule.create(context).items():
                for node_type in self.compile_selector(selector):
                    listeners.setdefault(node_type, []).append(callback)

        stack: list[tuple[SyntaxNode, tuple[SyntaxNode, ...]]] = [(unit.root, ())]
        while stack:
            node, ancestors = stack.pop()
            for callback in listeners.get(node.type, ()):
                callback(node, ancestors)
            children = node.named_children
            if children:
                lineage = ancestors + (node,)
                stack.extend((child, lineage) for child in reversed(children))

        messages = [m for context in contexts for m in context.messages]
        messages.sort(key=lambda m: (m.line, m.column, m.rule_id))
        return messages
