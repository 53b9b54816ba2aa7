"""Single-pass fix application over a text, skipping fixes that collide."""

from collections.abc import Sequence

from react_memo_linter.domain.entities import Edit, FixOutcome, LintMessage


class SourceCodeFixer:
    """
    Applies the fixes of a batch of messages in one pass.

    Fixes are applied in range order. A fix starting before the end of the
    previously applied one is skipped and its message stays in `remaining`;
    a later pass over the re-linted output picks it up again.
    """

    @staticmethod
    def apply(text: str, messages: Sequence[LintMessage]) -> FixOutcome:
        fixable = sorted(
            (m for m in messages if m.fix is not None),
            key=lambda m: (m.fix.range.start, m.fix.range.end),  # type: ignore[union-attr]
        )
        remaining: list[LintMessage] = [m for m in messages if m.fix is None]
        parts: list[str] = []
        cursor = 0
        last_end = -1
        applied = 0
        for message in fixable:
            fix: Edit = message.fix  # type: ignore[assignment]
            if last_end >= fix.range.start:
                remaining.append(message)
                continue
            parts.append(text[cursor : fix.range.start])
            parts.append(fix.text)
            cursor = fix.range.end
            last_end = fix.range.end
            applied += 1
        parts.append(text[cursor:])
        remaining.sort(key=lambda m: (m.line, m.column))
        return FixOutcome(
            output="".join(parts),
            applied=applied,
            passes=1 if applied else 0,
            remaining=tuple(remaining),
        )

    @staticmethod
    def apply_one(text: str, fix: Edit) -> str:
        """Apply a single fix, e.g. a chosen suggestion."""
        return fix.apply(text)
