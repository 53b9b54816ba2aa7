from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from react_memo_linter.domain.exceptions import OverlappingEditsError


class RuleKind(Enum):
    """Which memoization helper a finding asks for."""
    WRAP_AS_CALLBACK = "wrap-as-callback"
    WRAP_AS_VALUE = "wrap-as-value"


class ExprKind(Enum):
    """Closed set of initializer shapes the rules distinguish."""
    FUNCTION_LITERAL = "function-literal"
    ARROW_FUNCTION = "arrow-function"
    CALL = "call"
    OBJECT_LITERAL = "object-literal"
    ARRAY_LITERAL = "array-literal"
    MARKUP_ELEMENT = "markup-element"
    MARKUP_FRAGMENT = "markup-fragment"
    OTHER = "other"


@dataclass(frozen=True, order=True)
class TextRange:
    """Half-open character range [start, end) into a source text."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid text range [{self.start}, {self.end})")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: "TextRange") -> bool:
        """
        True if the two ranges cannot both be edited in one pass.

        Two insertions at the same offset count as overlapping because their
        relative order would be ambiguous.
        """
        if self.is_empty and other.is_empty:
            return self.start == other.start
        return self.start < other.end and other.start < self.end

    def contains(self, other: "TextRange") -> bool:
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True)
class Edit:
    """Replace the text in `range` with `text`. An empty range is an insertion."""
    range: TextRange
    text: str

    def apply(self, source: str) -> str:
        return source[: self.range.start] + self.text + source[self.range.end :]


@dataclass(frozen=True)
class EditSet:
    """
    The atomic group of edits realizing one finding's fix.

    Edits are kept sorted by position and validated to be pairwise disjoint
    on construction, so a finding can never produce competing edits.
    """
    edits: tuple[Edit, ...]

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.edits, key=lambda e: (e.range.start, e.range.end)))
        for previous, current in zip(ordered, ordered[1:]):
            if previous.range.overlaps(current.range):
                raise OverlappingEditsError(
                    f"Edits [{previous.range.start}, {previous.range.end}) and "
                    f"[{current.range.start}, {current.range.end}) overlap"
                )
        object.__setattr__(self, "edits", ordered)

    @classmethod
    def of(cls, *edits: Edit) -> "EditSet":
        return cls(edits=tuple(edits))

    @property
    def span(self) -> TextRange:
        if not self.edits:
            return TextRange(0, 0)
        return TextRange(self.edits[0].range.start, self.edits[-1].range.end)

    def merged(self, source: str) -> Edit:
        """Collapse all edits into one edit over `span`, copying untouched text between them."""
        span = self.span
        parts: list[str] = []
        cursor = span.start
        for edit in self.edits:
            parts.append(source[cursor : edit.range.start])
            parts.append(edit.text)
            cursor = edit.range.end
        return Edit(range=span, text="".join(parts))

    def apply(self, source: str) -> str:
        return self.merged(source).apply(source)


class ImportShape(Enum):
    """How the helper-providing module is currently imported in a file."""
    NO_IMPORT = "no-import"
    NAMED_PRESENT = "named-present"
    NAMED_EXISTS = "named-exists"
    NAMESPACE_ONLY = "namespace-only"
    DEFAULT_ONLY = "default-only"
    SIDE_EFFECT_ONLY = "side-effect-only"


@dataclass(frozen=True)
class ImportState:
    """
    Read-only view of the import declarations for one module specifier.

    `anchor_range` is the range the resolver inserts after: the last named
    specifier, the default specifier, or the whole declaration, depending on
    the shape. It is None for NO_IMPORT and NAMED_PRESENT.
    """
    module: str
    shape: ImportShape
    named: tuple[str, ...] = ()
    anchor_range: Optional[TextRange] = None
    declaration_range: Optional[TextRange] = None
    quote: str = "'"


@dataclass(frozen=True)
class Finding:
    """One eligible binding: the initializer to wrap and the helper it needs."""
    kind: RuleKind
    node: Any
    target_range: TextRange
    original_text: str
    expression_kind: ExprKind


@dataclass(frozen=True)
class Suggestion:
    message_id: str
    message: str
    fix: Edit


@dataclass(frozen=True)
class LintMessage:
    """A reported problem, positioned with 1-based lines and 0-based columns."""
    rule_id: str
    message_id: str
    message: str
    severity: str
    line: int
    column: int
    end_line: int
    end_column: int
    fix: Optional[Edit] = None
    suggestions: tuple[Suggestion, ...] = ()

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def location(self, path: str = "<text>") -> str:
        return f"{path}:{self.line}:{self.column}"

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for the JSON reporter."""
        return {
            "ruleId": self.rule_id,
            "messageId": self.message_id,
            "message": self.message,
            "severity": self.severity,
            "line": self.line,
            "column": self.column,
            "endLine": self.end_line,
            "endColumn": self.end_column,
            "fixable": self.fixable,
            "suggestions": [s.message for s in self.suggestions],
        }


@dataclass(frozen=True)
class ParseError:
    """Parse diagnostics. Line is 1-based, column 0-based."""
    message: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class FixOutcome:
    """Result of applying fixes to one text."""
    output: str
    applied: int = 0
    passes: int = 0
    remaining: tuple[LintMessage, ...] = ()

    @property
    def changed(self) -> bool:
        return self.applied > 0


@dataclass(frozen=True)
class FileReport:
    """Messages for one file, plus whether it was rewritten."""
    path: str
    messages: tuple[LintMessage, ...] = ()
    parse_error: Optional[ParseError] = None
    fixed: bool = False
    read_error: Optional[str] = None

    @property
    def error_count(self) -> int:
        return sum(1 for m in self.messages if m.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for m in self.messages if m.severity == "warn")


@dataclass(frozen=True)
class RunSummary:
    """Aggregate of a CLI run across files."""
    reports: tuple[FileReport, ...] = field(default_factory=tuple)

    @property
    def error_count(self) -> int:
        return sum(r.error_count for r in self.reports)

    @property
    def warning_count(self) -> int:
        return sum(r.warning_count for r in self.reports)

    @property
    def fixed_files(self) -> int:
        return sum(1 for r in self.reports if r.fixed)
