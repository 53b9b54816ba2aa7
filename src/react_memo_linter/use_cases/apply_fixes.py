"""Use Case: Apply Fixes to Source Code."""

from typing import Optional

from react_memo_linter.domain.constants import DEFAULT_MAX_FIX_PASSES
from react_memo_linter.domain.entities import FixOutcome, LintMessage
from react_memo_linter.domain.protocols import ParserGatewayProtocol, TelemetryPort
from react_memo_linter.domain.source_code_fixer import SourceCodeFixer
from react_memo_linter.use_cases.lint_source import Linter


class ApplyFixesUseCase:
    """
    Lint, fix, re-parse and re-lint until the text settles.

    Each pass applies the non-overlapping fixes of the current messages.
    Since every fix also carries its import edit near the top of the file,
    usually one finding per helper lands per pass; the loop stops when a pass
    applies nothing or `max_passes` is reached.
    """

    def __init__(
        self,
        parser: ParserGatewayProtocol,
        linter: Linter,
        telemetry: Optional[TelemetryPort] = None,
    ) -> None:
        self.parser = parser
        self.linter = linter
        self.telemetry = telemetry

    def lint(self, source: str, language: str) -> list[LintMessage]:
        unit = self.parser.parse(source, language).unit
        if unit is None:
            return []
        return self.linter.lint(unit)

    def execute(
        self,
        source: str,
        language: str,
        max_passes: int = DEFAULT_MAX_FIX_PASSES,
        messages: Optional[list[LintMessage]] = None,
    ) -> FixOutcome:
        """
        Fix `source` until it settles.

        A source that does not parse cleanly is never fixed: recovered trees
        give unreliable ranges. A pass whose output no longer parses cleanly
        is discarded and the loop stops.
        """
        result = self.parser.parse(source, language)
        if messages is None:
            messages = self.linter.lint(result.unit) if result.unit is not None else []
        if result.unit is None or result.error is not None:
            self._debug("Source has parse errors; no fixes applied")
            return FixOutcome(output=source, remaining=tuple(messages))

        text = source
        current = list(messages)
        applied = 0
        passes = 0
        while passes < max_passes:
            outcome = SourceCodeFixer.apply(text, current)
            if not outcome.applied:
                break
            result = self.parser.parse(outcome.output, language)
            if result.unit is None or result.error is not None:
                self._debug(f"Fix pass {passes + 1} produced parse errors; discarded")
                break
            passes += 1
            applied += outcome.applied
            text = outcome.output
            current = self.linter.lint(result.unit)
            self._debug(f"Fix pass {passes}: {outcome.applied} applied, {len(current)} message(s) left")
        return FixOutcome(output=text, applied=applied, passes=passes, remaining=tuple(current))

    def _debug(self, message: str) -> None:
        if self.telemetry:
            self.telemetry.debug(message)

    @staticmethod
    def apply_suggestion(source: str, message: LintMessage, index: int = 0) -> str:
        """Apply one suggestion of a message to the text it was reported on."""
        if not 0 <= index < len(message.suggestions):
            raise IndexError(
                f"{message.rule_id} at {message.line}:{message.column} has "
                f"{len(message.suggestions)} suggestion(s), requested #{index}"
            )
        return SourceCodeFixer.apply_one(source, message.suggestions[index].fix)
