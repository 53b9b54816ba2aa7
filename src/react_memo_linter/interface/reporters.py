"""Interface for lint reporting."""

import json
from typing import Optional, Protocol

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from react_memo_linter.domain.entities import FileReport, RunSummary


class LintReporter(Protocol):
    """Protocol for reporting a run to the user."""

    def report(self, summary: RunSummary) -> None:
        """Report run results."""
        ...


class TerminalLintReporter:
    """Terminal reporter using rich tables, one table per file with messages."""

    SEVERITY_STYLES: dict[str, str] = {"error": "bold red", "warn": "yellow"}

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report(self, summary: RunSummary) -> None:
        for file_report in summary.reports:
            self._report_file(file_report)
        self._report_totals(summary)

    def _report_file(self, file_report: FileReport) -> None:
        if file_report.read_error:
            self.console.print(f"[bold red]{escape(file_report.path)}[/]: {escape(file_report.read_error)}", highlight=False)
            return
        if not file_report.messages:
            return
        table = Table(title=escape(file_report.path), title_justify="left", header_style="bold cyan")
        table.add_column("Line:Col", style="dim", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Message")
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Fix?", no_wrap=True)
        for message in file_report.messages:
            style = self.SEVERITY_STYLES.get(message.severity, "")
            table.add_row(
                f"{message.line}:{message.column}",
                f"[{style}]{message.severity}[/]" if style else message.severity,
                message.message,
                message.rule_id,
                "yes" if message.fixable else "",
            )
        self.console.print(table)

    def _report_totals(self, summary: RunSummary) -> None:
        errors = summary.error_count
        warnings = summary.warning_count
        if not errors and not warnings:
            self.console.print("[green]No problems found.[/]")
            return
        fixable = sum(1 for r in summary.reports for m in r.messages if m.fixable)
        line = f"[bold]{errors + warnings} problem(s)[/] ({errors} error(s), {warnings} warning(s))"
        if fixable:
            line += f", {fixable} fixable with --fix"
        self.console.print(line)


class JsonLintReporter:
    """Prints the run to stdout as a JSON array of {filePath, messages, ...} objects."""

    @staticmethod
    def to_payload(summary: RunSummary) -> list[dict[str, object]]:
        payload: list[dict[str, object]] = []
        for file_report in summary.reports:
            entry: dict[str, object] = {
                "filePath": file_report.path,
                "messages": [m.to_dict() for m in file_report.messages],
                "errorCount": file_report.error_count,
                "warningCount": file_report.warning_count,
                "fixed": file_report.fixed,
            }
            if file_report.parse_error is not None:
                entry["parseError"] = {
                    "message": file_report.parse_error.message,
                    "line": file_report.parse_error.line,
                    "column": file_report.parse_error.column,
                }
            if file_report.read_error:
                entry["readError"] = file_report.read_error
            payload.append(entry)
        return payload

    def report(self, summary: RunSummary) -> None:
        typer.echo(json.dumps(self.to_payload(summary), indent=2))
