"""Candidate scanning: top-level declarators of a scope's body block."""

from collections.abc import Iterator
from dataclasses import dataclass

from react_memo_linter.domain.protocols import SyntaxNode
from react_memo_linter.domain.scope import ScopeCandidate

DECLARATION_TYPES: frozenset[str] = frozenset({"lexical_declaration", "variable_declaration"})


@dataclass(frozen=True)
class Binding:
    """A `name = initializer` declarator found directly in a scope body."""

    declarator: SyntaxNode
    initializer: SyntaxNode


class CandidateScanner:
    """
    Yields the bindings declared directly in a scope's body.

    Nested blocks, branches, loops and inner functions are not entered: only
    bindings living for the whole call of the scope are candidates.
    """

    @staticmethod
    def bindings(candidate: ScopeCandidate) -> Iterator[Binding]:
        body = candidate.body
        if body is None or not candidate.has_block_body:
            return
        for statement in body.named_children:
            if statement.type not in DECLARATION_TYPES:
                continue
            for declarator in statement.named_children:
                if declarator.type != "variable_declarator":
                    continue
                initializer = declarator.child_by_field_name("value")
                if initializer is None:
                    continue
                yield Binding(declarator=declarator, initializer=initializer)
