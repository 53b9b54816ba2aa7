"""Domain models for rules: metadata, fixer primitives and the report context."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence

from react_memo_linter.domain.constants import FUNCTION_SELECTOR
from react_memo_linter.domain.eligibility import EligibilityPolicy
from react_memo_linter.domain.entities import Edit, Finding, RuleKind, TextRange
from react_memo_linter.domain.expressions import ExpressionClassifier
from react_memo_linter.domain.import_resolver import ImportResolver
from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode
from react_memo_linter.domain.scanner import CandidateScanner
from react_memo_linter.domain.scope import ScopeCandidate
from react_memo_linter.domain.wrap_text import WrapTextSynthesizer


@dataclass(frozen=True)
class RuleMeta:
    """Static description of a rule: what it reports and how it can be fixed."""

    rule_id: str
    type: str
    description: str
    messages: Mapping[str, str]
    fixable: Optional[str] = "code"
    has_suggestions: bool = True
    schema: tuple[object, ...] = ()
    docs_url: str = ""


class Fixer:
    """Edit primitives handed to fix functions. Every primitive returns a plain Edit."""

    def __init__(self, unit: SourceUnitProtocol) -> None:
        self.unit = unit

    def replace_text(self, node: SyntaxNode, text: str) -> Edit:
        return self.replace_range(self.unit.range_of(node), text)

    def replace_range(self, text_range: TextRange, text: str) -> Edit:
        return Edit(text_range, text)

    def insert_text_after(self, node: SyntaxNode, text: str) -> Edit:
        return self.insert_text_after_range(self.unit.range_of(node), text)

    def insert_text_before(self, node: SyntaxNode, text: str) -> Edit:
        start = self.unit.range_of(node).start
        return Edit(TextRange(start, start), text)

    def insert_text_after_range(self, text_range: TextRange, text: str) -> Edit:
        return Edit(TextRange(text_range.end, text_range.end), text)


FixFunction = Callable[[Fixer], Sequence[Edit]]
Visitor = Callable[[SyntaxNode, tuple[SyntaxNode, ...]], None]


@dataclass(frozen=True)
class SuggestionDescriptor:
    """An opt-in fix offered alongside a report."""

    message_id: str
    fix: FixFunction


class RuleContext(Protocol):
    """What a rule sees while it runs: the parsed unit and a way to report."""

    @property
    def unit(self) -> SourceUnitProtocol: ...

    def report(
        self,
        node: SyntaxNode,
        message_id: str,
        fix: Optional[FixFunction] = None,
        suggest: Sequence[SuggestionDescriptor] = (),
    ) -> None: ...


class Rule(Protocol):
    """A lint rule: metadata plus a factory of selector callbacks."""

    meta: RuleMeta

    def create(self, context: RuleContext) -> dict[str, Visitor]:
        """Return {selector: callback(node, ancestors)} for one run over a unit."""
        ...


@dataclass
class MemoRule:
    """
    Shared pipeline of the two memoization rules.

    For every function named like a hook or component, each top-level
    declarator whose initializer is eligible for `kind` is reported once,
    with a fix that wraps the initializer and makes `helper` importable.
    The same fix is offered as the single suggestion.
    """

    meta: RuleMeta
    kind: RuleKind
    helper: str
    policy: EligibilityPolicy = field(default_factory=EligibilityPolicy)
    resolver: ImportResolver = field(default_factory=ImportResolver)

    @property
    def message_id(self) -> str:
        return self.helper

    def create(self, context: RuleContext) -> dict[str, Visitor]:
        def on_function(node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]) -> None:
            self.check_function(context, node, ancestors)

        return {FUNCTION_SELECTOR: on_function}

    def findings(
        self, node: SyntaxNode, ancestors: Sequence[SyntaxNode], unit: SourceUnitProtocol
    ) -> Iterator[Finding]:
        candidate = ScopeCandidate.resolve(node, ancestors, unit)
        if not candidate.qualifies:
            return
        for binding in CandidateScanner.bindings(candidate):
            if not self.policy.is_eligible(self.kind, binding.initializer, unit):
                continue
            target = ExpressionClassifier.unwrap_parentheses(binding.initializer)
            yield Finding(
                kind=self.kind,
                node=target,
                target_range=unit.range_of(target),
                original_text=unit.text_of(target),
                expression_kind=ExpressionClassifier.classify(target),
            )

    def check_function(
        self, context: RuleContext, node: SyntaxNode, ancestors: tuple[SyntaxNode, ...]
    ) -> None:
        unit = context.unit
        for finding in self.findings(node, ancestors, unit):
            fix = self.fix_for(finding, unit)
            context.report(
                finding.node,
                self.message_id,
                fix=fix,
                suggest=(SuggestionDescriptor(self.message_id, fix),),
            )

    def fix_for(self, finding: Finding, unit: SourceUnitProtocol) -> FixFunction:
        def fix(fixer: Fixer) -> list[Edit]:
            replacement = WrapTextSynthesizer.synthesize(
                finding.kind, finding.expression_kind, finding.original_text
            )
            return [
                fixer.replace_range(finding.target_range, replacement),
                *self.resolver.edits_for(unit, self.helper),
            ]

        return fix

