"""Scope classification: which functions are hooks or components."""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode

HOOK_NAME_PATTERN = re.compile(r"^use[A-Z0-9]")
COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z]")

NAMED_DECLARATION_TYPES: frozenset[str] = frozenset({"function_declaration", "generator_function_declaration"})


class ScopeClassifier:
    """
    Name-based heuristic for memoization-relevant scopes.

    Only the name is inspected: bodies, call sites and return types are not,
    so plain functions named like components also qualify.
    """

    @staticmethod
    def is_hook_name(name: Optional[str]) -> bool:
        """`use` followed by an uppercase letter or digit."""
        return bool(name) and HOOK_NAME_PATTERN.match(name or "") is not None

    @staticmethod
    def is_component_name(name: Optional[str]) -> bool:
        return bool(name) and COMPONENT_NAME_PATTERN.match(name or "") is not None

    @classmethod
    def is_memo_scope_name(cls, name: Optional[str]) -> bool:
        return cls.is_hook_name(name) or cls.is_component_name(name)


def _same_node(a: SyntaxNode, b: SyntaxNode) -> bool:
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte


@dataclass(frozen=True)
class ScopeCandidate:
    """A function-like node together with the name it is known by."""

    node: SyntaxNode
    name: Optional[str]

    @property
    def body(self) -> Optional[SyntaxNode]:
        return self.node.child_by_field_name("body")

    @property
    def has_block_body(self) -> bool:
        body = self.body
        return body is not None and body.type == "statement_block"

    @property
    def qualifies(self) -> bool:
        return ScopeClassifier.is_memo_scope_name(self.name)

    @classmethod
    def resolve(
        cls,
        node: SyntaxNode,
        ancestors: Sequence[SyntaxNode],
        unit: SourceUnitProtocol,
    ) -> "ScopeCandidate":
        """
        Resolve a function's name from its own declaration or its declarator.

        `ancestors` is the chain from the root down to the node's parent.
        """
        return cls(node=node, name=cls._resolve_name(node, ancestors, unit))

    @staticmethod
    def _resolve_name(
        node: SyntaxNode, ancestors: Sequence[SyntaxNode], unit: SourceUnitProtocol
    ) -> Optional[str]:
        if node.type in NAMED_DECLARATION_TYPES:
            ident = node.child_by_field_name("name")
            if ident is not None:
                return unit.text_of(ident)
        if not ancestors:
            return None
        parent = ancestors[-1]
        if parent.type != "variable_declarator":
            return None
        value = parent.child_by_field_name("value")
        ident = parent.child_by_field_name("name")
        if value is None or ident is None or not _same_node(value, node):
            return None
        if ident.type != "identifier":
            return None
        return unit.text_of(ident)
