from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from react_memo_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from react_memo_linter.domain.entities import ParseError, TextRange


class SyntaxNode(Protocol):
    """
    The slice of a tree-sitter node the engine reads.

    Offsets are byte offsets into the UTF-8 source; SourceUnitProtocol
    converts them to character ranges.
    """

    @property
    def type(self) -> str: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...

    @property
    def named_children(self) -> Sequence["SyntaxNode"]: ...

    def child_by_field_name(self, name: str) -> Optional["SyntaxNode"]: ...


class SourceUnitProtocol(Protocol):
    """Immutable parsed file: tree, text, and exact-text access."""

    @property
    def text(self) -> str: ...

    @property
    def root(self) -> SyntaxNode: ...

    def text_of(self, node: SyntaxNode) -> str:
        """Exact original text of a node, whitespace and comments included."""
        ...

    def range_of(self, node: SyntaxNode) -> "TextRange":
        """Character range of a node."""
        ...

    def line_indent(self, offset: int) -> str:
        """Leading whitespace of the line containing `offset`."""
        ...

    def position_of(self, offset: int) -> tuple[int, int]:
        """(1-based line, 0-based column) of a character offset."""
        ...


class ParseResultProtocol(Protocol):
    @property
    def unit(self) -> Optional[SourceUnitProtocol]: ...

    @property
    def error(self) -> Optional["ParseError"]: ...


class ParserGatewayProtocol(Protocol):
    """Protocol for turning source text into a SourceUnit."""

    def parse(self, source: str, language: str) -> ParseResultProtocol: ...

    def language_for_path(self, path: str) -> str: ...

    def supports(self, path: str) -> bool: ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def read_text(self, path: str) -> str: ...

    def write_text(self, path: str, content: str) -> None: ...

    def discover_sources(
        self, paths: Sequence[str], extensions: Sequence[str], exclude: Sequence[str]
    ) -> list[str]:
        """Expand files and directories into a sorted list of source files."""
        ...

    def relative_path(self, path: str) -> str: ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the packaged rule registry."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]: ...

    def get_entry(self, rule_id: str) -> Optional[RuleRegistryEntry]: ...

    def get_manual_instructions(self, rule_id: str) -> str: ...
