"""Use Case: lint (and optionally fix) every source file under a set of paths."""

from typing import Sequence

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import DEFAULT_MAX_FIX_PASSES
from react_memo_linter.domain.entities import FileReport, RunSummary
from react_memo_linter.domain.exceptions import UnsupportedLanguageError
from react_memo_linter.domain.protocols import (
    FileSystemProtocol,
    ParserGatewayProtocol,
    TelemetryPort,
)
from react_memo_linter.use_cases.apply_fixes import ApplyFixesUseCase
from react_memo_linter.use_cases.lint_source import Linter


class CheckPathsUseCase:
    """
    Orchestrates a run: discover, read, parse, lint, fix, write.

    Problems with a single file (unreadable, unsupported, unparsable) are
    recorded on that file's report and never abort the run.
    """

    def __init__(
        self,
        filesystem: FileSystemProtocol,
        parser: ParserGatewayProtocol,
        linter: Linter,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
    ) -> None:
        self.filesystem = filesystem
        self.parser = parser
        self.linter = linter
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.fixes = ApplyFixesUseCase(parser, linter, telemetry)

    def discover(self, paths: Sequence[str]) -> list[str]:
        return self.filesystem.discover_sources(
            list(paths) or ["."],
            self.config_loader.extensions,
            self.config_loader.exclude,
        )

    def execute(
        self,
        paths: Sequence[str],
        fix: bool = False,
        max_passes: int = DEFAULT_MAX_FIX_PASSES,
    ) -> RunSummary:
        files = self.discover(paths)
        self.telemetry.step(f"Linting {len(files)} file(s)...")
        reports = tuple(self.check_file(path, fix=fix, max_passes=max_passes) for path in files)
        summary = RunSummary(reports=reports)
        if fix:
            self.telemetry.step(f"Fixed {summary.fixed_files} file(s).")
        return summary

    def check_file(self, path: str, fix: bool = False, max_passes: int = DEFAULT_MAX_FIX_PASSES) -> FileReport:
        display = self.filesystem.relative_path(path)
        try:
            language = self.parser.language_for_path(path)
        except UnsupportedLanguageError as exc:
            self.telemetry.warning(f"{display}: {exc}")
            return FileReport(path=display, read_error=str(exc))

        try:
            source = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.error(f"{display}: cannot read file ({exc})")
            return FileReport(path=display, read_error=str(exc))

        result = self.parser.parse(source, language)
        if result.error is not None:
            where = f":{result.error.line}:{result.error.column}" if result.error.line else ""
            self.telemetry.warning(f"{display}{where}: {result.error.message}")
        if result.unit is None:
            return FileReport(path=display, parse_error=result.error)

        messages = self.linter.lint(result.unit)
        self.telemetry.debug(f"{display}: {len(messages)} message(s)")
        if fix and result.error is not None:
            self.telemetry.warning(f"{display}: not fixing a file with parse errors")
        if not fix or result.error is not None or not any(m.fixable for m in messages):
            return FileReport(path=display, messages=tuple(messages), parse_error=result.error)

        outcome = self.fixes.execute(source, language, max_passes=max_passes, messages=messages)
        if outcome.changed and outcome.output != source:
            self.filesystem.write_text(path, outcome.output)
            self.telemetry.step(f"Fixed {display} ({outcome.applied} fix(es), {outcome.passes} pass(es))")
        return FileReport(
            path=display,
            messages=outcome.remaining,
            parse_error=result.error,
            fixed=outcome.changed,
        )
