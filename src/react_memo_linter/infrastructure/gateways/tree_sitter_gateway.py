"""Tree-sitter Gateway - parses JavaScript and TypeScript sources into SourceUnits."""

import importlib
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Optional

import tree_sitter

from react_memo_linter.domain.entities import ParseError, TextRange
from react_memo_linter.domain.exceptions import UnsupportedLanguageError
from react_memo_linter.domain.protocols import ParserGatewayProtocol, SyntaxNode

_INDENT = re.compile(r"[ \t]*")


@dataclass
class SourceUnit:
    """
    An immutable parsed file.

    tree-sitter reports byte offsets into the UTF-8 encoding; every range this
    class hands out is a character offset into `text`.
    """

    text: str
    tree: Any
    language: str
    _data: bytes = field(init=False, repr=False)
    _char_at_byte: Optional[list[int]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._data = self.text.encode("utf-8")

    @property
    def root(self) -> SyntaxNode:
        return self.tree.root_node

    def char_offset(self, byte_offset: int) -> int:
        if len(self._data) == len(self.text):
            return byte_offset
        if self._char_at_byte is None:
            table: list[int] = []
            for index, char in enumerate(self.text):
                table.extend([index] * len(char.encode("utf-8")))
            table.append(len(self.text))
            self._char_at_byte = table
        return self._char_at_byte[byte_offset]

    def range_of(self, node: SyntaxNode) -> TextRange:
        return TextRange(self.char_offset(node.start_byte), self.char_offset(node.end_byte))

    def text_of(self, node: SyntaxNode) -> str:
        return self._data[node.start_byte : node.end_byte].decode("utf-8")

    def line_indent(self, offset: int) -> str:
        line_start = self.text.rfind("\n", 0, offset) + 1
        match = _INDENT.match(self.text, line_start)
        return match.group(0) if match else ""

    def position_of(self, offset: int) -> tuple[int, int]:
        line = self.text.count("\n", 0, offset) + 1
        column = offset - (self.text.rfind("\n", 0, offset) + 1)
        return line, column

    def location_of(self, node: SyntaxNode) -> tuple[int, int]:
        return self.position_of(self.range_of(node).start)


@dataclass(frozen=True)
class ParseResult:
    """
    Result of a parse: a unit, a parse error, or both.

    tree-sitter recovers from syntax errors, so a unit with an error is still
    usable; the error records where the first problem was found.
    """

    unit: Optional[SourceUnit]
    error: Optional[ParseError] = None

    @property
    def is_ok(self) -> bool:
        return self.unit is not None and self.error is None

    def unwrap(self) -> SourceUnit:
        if self.unit is None:
            message = self.error.message if self.error else "no parse tree"
            raise ValueError(f"Parse failed: {message}")
        return self.unit


class TreeSitterGateway(ParserGatewayProtocol):
    """Infrastructure implementation of ParserGatewayProtocol using py-tree-sitter."""

    # language name -> (grammar module, language function)
    LANGUAGE_MODULES: ClassVar[dict[str, tuple[str, str]]] = {
        "javascript": ("tree_sitter_javascript", "language"),
        "typescript": ("tree_sitter_typescript", "language_typescript"),
        "tsx": ("tree_sitter_typescript", "language_tsx"),
    }

    EXTENSION_MAP: ClassVar[dict[str, str]] = {
        ".js": "javascript",
        ".jsx": "javascript",
        ".mjs": "javascript",
        ".cjs": "javascript",
        ".ts": "typescript",
        ".mts": "typescript",
        ".cts": "typescript",
        ".tsx": "tsx",
    }

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}

    def language_for_path(self, path: str) -> str:
        ext = Path(path).suffix.lower()
        if ext not in self.EXTENSION_MAP:
            raise UnsupportedLanguageError(f"Unsupported file extension: {ext or path}")
        return self.EXTENSION_MAP[ext]

    def supports(self, path: str) -> bool:
        return Path(path).suffix.lower() in self.EXTENSION_MAP

    def _parser_for(self, language: str) -> tree_sitter.Parser:
        """Lazily initialize and cache one parser per language."""
        parser = self._parsers.get(language)
        if parser is not None:
            return parser
        if language not in self.LANGUAGE_MODULES:
            raise UnsupportedLanguageError(f"Unsupported language: {language}")
        module_name, function_name = self.LANGUAGE_MODULES[language]
        lang_module = importlib.import_module(module_name)
        parser = tree_sitter.Parser(tree_sitter.Language(getattr(lang_module, function_name)()))
        self._parsers[language] = parser
        return parser

    def parse(self, source: str, language: str = "tsx") -> ParseResult:
        """
        Parse `source` in degraded mode: syntax errors never raise.

        Text that cannot be encoded as UTF-8 (lone surrogates) yields a
        result without a unit.
        """
        parser = self._parser_for(language)
        try:
            data = source.encode("utf-8")
        except UnicodeEncodeError as exc:
            return ParseResult(unit=None, error=ParseError(message=f"Cannot encode source: {exc.reason}"))
        unit = SourceUnit(text=source, tree=parser.parse(data), language=language)
        if not unit.tree.root_node.has_error:
            return ParseResult(unit=unit)
        line: Optional[int] = None
        column: Optional[int] = None
        first = self._first_error(unit.root)
        if first is not None:
            line, column = unit.location_of(first)
        return ParseResult(
            unit=unit,
            error=ParseError(message="Parse completed with errors", line=line, column=column),
        )

    def parse_file(self, path: str, source: str) -> ParseResult:
        return self.parse(source, self.language_for_path(path))

    @staticmethod
    def _first_error(root: SyntaxNode) -> Optional[SyntaxNode]:
        """First ERROR or missing node in document order."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or getattr(node, "is_missing", False):
                return node
            stack.extend(reversed(node.children))
        return None
