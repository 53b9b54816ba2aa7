"""CLI entry points for react-memo-lint - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import DEFAULT_MAX_FIX_PASSES, MEMO_BANNER
from react_memo_linter.domain.exceptions import UnknownRuleError, UnsupportedLanguageError
from react_memo_linter.domain.protocols import (
    FileSystemProtocol,
    GuidanceServiceProtocol,
    ParserGatewayProtocol,
    TelemetryPort,
)
from react_memo_linter.domain.rules.catalog import RECOMMENDED, RuleCatalog
from react_memo_linter.interface.reporters import LintReporter
from react_memo_linter.use_cases.apply_fixes import ApplyFixesUseCase
from react_memo_linter.use_cases.check_paths import CheckPathsUseCase
from react_memo_linter.use_cases.lint_source import Linter


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    parser: ParserGatewayProtocol
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    text_reporter: LintReporter
    json_reporter: LintReporter
    console: Console


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def build_linter(deps: CLIDependencies, only: Optional[list[str]] = None) -> Linter:
        """Linter over the configured rules, optionally restricted to `only`."""
        catalog = RuleCatalog(deps.config_loader, deps.guidance_service.get_registry())
        return Linter.from_catalog(catalog, only)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="react-memo-lint",
            help=f"{MEMO_BANNER}\nreact-memo-lint: require useCallback/useMemo inside hooks and components",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: Optional[list[Path]] = typer.Argument(None, help="Files or directories to lint (default: .)"),  # noqa: B008
            fix: bool = typer.Option(False, "--fix", help="Rewrite files with automatic fixes"),
            rule: Optional[list[str]] = typer.Option(  # noqa: B008
                None, "--rule", "-r", help="Only run this rule id (repeatable)"),
            output_format: OutputFormat = typer.Option(
                OutputFormat.TEXT, "--format", "-f", help="Report format: text or json"),
            max_passes: int = typer.Option(
                DEFAULT_MAX_FIX_PASSES, "--max-passes", min=1, help="Maximum fix passes per file"),
        ) -> None:
            """Lint JavaScript/TypeScript sources; exit 1 if any error-severity problem remains."""
            if output_format is OutputFormat.TEXT:
                deps.telemetry.handshake()
            try:
                linter = CLIAppFactory.build_linter(deps, rule)
            except UnknownRuleError as exc:
                deps.telemetry.error(f"Unknown rule: {exc.args[0]}. Known rules: {', '.join(RuleCatalog.rule_ids())}")
                raise typer.Exit(code=2) from exc
            use_case = CheckPathsUseCase(
                filesystem=deps.filesystem,
                parser=deps.parser,
                linter=linter,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
            )
            summary = use_case.execute([str(p) for p in paths or []], fix=fix, max_passes=max_passes)
            reporter = deps.json_reporter if output_format is OutputFormat.JSON else deps.text_reporter
            reporter.report(summary)
            sys.exit(1 if summary.error_count else 0)

        @app.command()
        def rules(
            explain: bool = typer.Option(False, "--explain", help="Print manual fixing guidance per rule"),
        ) -> None:
            """List the available rules with their configured severity."""
            catalog = RuleCatalog(deps.config_loader, deps.guidance_service.get_registry())
            table = Table(title="react-memo rules", header_style="bold cyan")
            table.add_column("Rule", style="cyan", no_wrap=True)
            table.add_column("Severity", no_wrap=True)
            table.add_column("Recommended", no_wrap=True)
            table.add_column("Fixable", no_wrap=True)
            table.add_column("Description")
            for rule_id in catalog.rule_ids():
                meta = catalog.create(rule_id).meta
                table.add_row(
                    rule_id,
                    catalog.severity(rule_id),
                    RECOMMENDED.get(rule_id, "off"),
                    "yes" if meta.fixable else "no",
                    meta.description,
                )
            deps.console.print(table)
            if not explain:
                return
            for rule_id in catalog.rule_ids():
                instructions = deps.guidance_service.get_manual_instructions(rule_id)
                if instructions:
                    deps.console.print(f"\n[bold cyan]{rule_id}[/bold cyan]")
                    deps.console.print(escape(instructions))

        @app.command("fix-preview")
        def fix_preview(
            path: Path = typer.Argument(..., help="File to fix in memory"),  # noqa: B008
            max_passes: int = typer.Option(
                DEFAULT_MAX_FIX_PASSES, "--max-passes", min=1, help="Maximum fix passes"),
        ) -> None:
            """Print the fully fixed text of one file without writing it."""
            try:
                language = deps.parser.language_for_path(str(path))
                source = deps.filesystem.read_text(str(path))
            except UnsupportedLanguageError as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=2) from exc
            except (OSError, UnicodeDecodeError) as exc:
                deps.telemetry.error(f"Cannot read {path}: {exc}")
                raise typer.Exit(code=2) from exc
            use_case = ApplyFixesUseCase(deps.parser, CLIAppFactory.build_linter(deps), deps.telemetry)
            outcome = use_case.execute(source, language, max_passes=max_passes)
            deps.telemetry.debug(f"{outcome.applied} fix(es) in {outcome.passes} pass(es)")
            typer.echo(outcome.output, nl=False)

        return app


def create_app(deps: CLIDependencies) -> typer.Typer:
    """Module-level helper for the composition root."""
    return CLIAppFactory.create_app(deps)
