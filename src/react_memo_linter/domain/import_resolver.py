"""Import resolution: make a helper name available without duplicating imports."""

import re
from dataclasses import dataclass
from typing import Optional

from react_memo_linter.domain.constants import DEFAULT_HOOK_MODULE
from react_memo_linter.domain.entities import Edit, ImportShape, ImportState, TextRange
from react_memo_linter.domain.protocols import SourceUnitProtocol, SyntaxNode

_LEADING_SPACES = re.compile(r"[ ]*")


def _is_type_only(node: SyntaxNode) -> bool:
    """`import type ...` or an `import { type X }` specifier: binds no value."""
    return any(not child.is_named and child.type in ("type", "typeof") for child in node.children)


@dataclass(frozen=True)
class _ImportDeclaration:
    node: SyntaxNode
    quote: str
    default: Optional[SyntaxNode]
    namespace: Optional[SyntaxNode]
    specifiers: tuple[SyntaxNode, ...]
    imported_names: tuple[str, ...]


class ImportResolver:
    """
    Small state machine over the file's imports of one module.

    inspect() derives an ImportState; edits_for() maps each state to at most
    one insertion. Nothing is emitted when the helper is already a named
    import, which keeps repeated runs from adding duplicates.
    """

    def __init__(self, module: str = DEFAULT_HOOK_MODULE, quote: str = "'") -> None:
        self.module = module
        self.quote = quote

    def inspect(self, unit: SourceUnitProtocol, helper: str) -> ImportState:
        declarations = self._declarations(unit)
        if not declarations:
            return ImportState(module=self.module, shape=ImportShape.NO_IMPORT)

        named = tuple(name for d in declarations for name in d.imported_names)
        for decl in declarations:
            if helper in decl.imported_names:
                return ImportState(
                    module=self.module,
                    shape=ImportShape.NAMED_PRESENT,
                    named=named,
                    declaration_range=unit.range_of(decl.node),
                    quote=decl.quote,
                )

        for decl in declarations:
            if decl.specifiers:
                return ImportState(
                    module=self.module,
                    shape=ImportShape.NAMED_EXISTS,
                    named=named,
                    anchor_range=unit.range_of(decl.specifiers[-1]),
                    declaration_range=unit.range_of(decl.node),
                    quote=decl.quote,
                )

        first = declarations[0]
        declaration_range = unit.range_of(first.node)
        # A namespace binding cannot share a declaration with named specifiers.
        if first.namespace is not None:
            return ImportState(
                module=self.module,
                shape=ImportShape.NAMESPACE_ONLY,
                anchor_range=declaration_range,
                declaration_range=declaration_range,
                quote=first.quote,
            )
        if first.default is not None:
            return ImportState(
                module=self.module,
                shape=ImportShape.DEFAULT_ONLY,
                anchor_range=unit.range_of(first.default),
                declaration_range=declaration_range,
                quote=first.quote,
            )
        return ImportState(
            module=self.module,
            shape=ImportShape.SIDE_EFFECT_ONLY,
            anchor_range=declaration_range,
            declaration_range=declaration_range,
            quote=first.quote,
        )

    def edits_for(
        self, unit: SourceUnitProtocol, helper: str, state: Optional[ImportState] = None
    ) -> tuple[Edit, ...]:
        """Edits that bring `helper` into scope: zero or one insertion."""
        if state is None:
            state = self.inspect(unit, helper)
        shape = state.shape

        if shape is ImportShape.NAMED_PRESENT or helper in state.named:
            return ()

        if shape is ImportShape.NO_IMPORT:
            return (self._insert_at_top(unit.text, helper),)

        anchor = state.anchor_range
        if anchor is None:
            raise ValueError(f"{shape.value} state without an anchor")
        at_anchor_end = TextRange(anchor.end, anchor.end)

        if shape is ImportShape.NAMED_EXISTS:
            return (Edit(at_anchor_end, f", {helper}"),)

        if shape is ImportShape.DEFAULT_ONLY:
            return (Edit(at_anchor_end, f", {{ {helper} }}"),)

        if shape in (ImportShape.NAMESPACE_ONLY, ImportShape.SIDE_EFFECT_ONLY):
            declaration = state.declaration_range or anchor
            indent = unit.line_indent(declaration.start)
            text = f"\n{indent}{self.declaration(helper, state.quote)}"
            return (Edit(TextRange(declaration.end, declaration.end), text),)

        raise ValueError(f"Unhandled import shape: {shape}")

    def declaration(self, helper: str, quote: Optional[str] = None) -> str:
        q = quote or self.quote
        return f"import {{ {helper} }} from {q}{self.module}{q};"

    def _insert_at_top(self, text: str, helper: str) -> Edit:
        line = f"{self.declaration(helper)}\n"
        if text.startswith("\n"):
            # Keep an intentional leading blank line; match the indentation after it.
            match = _LEADING_SPACES.match(text, 1)
            indent = match.group(0) if match else ""
            return Edit(TextRange(1, 1), f"{indent}{line}")
        return Edit(TextRange(0, 0), line)

    def _declarations(self, unit: SourceUnitProtocol) -> list[_ImportDeclaration]:
        found: list[_ImportDeclaration] = []
        for statement in unit.root.named_children:
            if statement.type != "import_statement" or _is_type_only(statement):
                continue
            source = statement.child_by_field_name("source")
            if source is None:
                continue
            raw = unit.text_of(source)
            if len(raw) < 2 or raw[1:-1] != self.module:
                continue
            found.append(self._describe(statement, raw[0], unit))
        return found

    @staticmethod
    def _describe(statement: SyntaxNode, quote: str, unit: SourceUnitProtocol) -> _ImportDeclaration:
        default: Optional[SyntaxNode] = None
        namespace: Optional[SyntaxNode] = None
        specifiers: list[SyntaxNode] = []
        names: list[str] = []
        clause = next((c for c in statement.named_children if c.type == "import_clause"), None)
        if clause is not None:
            for part in clause.named_children:
                if part.type == "identifier":
                    default = part
                elif part.type == "namespace_import":
                    namespace = part
                elif part.type == "named_imports":
                    for spec in part.named_children:
                        if spec.type != "import_specifier":
                            continue
                        specifiers.append(spec)
                        if _is_type_only(spec):
                            continue
                        imported = spec.child_by_field_name("name")
                        if imported is None:
                            continue
                        name = unit.text_of(imported)
                        if imported.type == "string":
                            name = name[1:-1]
                        names.append(name)
        return _ImportDeclaration(
            node=statement,
            quote=quote,
            default=default,
            namespace=namespace,
            specifiers=tuple(specifiers),
            imported_names=tuple(names),
        )
