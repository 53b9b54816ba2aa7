"""Terminal telemetry: rich console output mirrored to the package logger."""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from react_memo_linter.domain.constants import MEMO_BANNER
from react_memo_linter.domain.protocols import TelemetryPort

LOGGER_NAME: str = "react_memo_linter.telemetry"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class ProjectTelemetry(TelemetryPort):
    """
    TelemetryPort for the CLI.

    Status lines go to stderr so machine-readable reports on stdout stay clean.
    Debug lines are only printed when `verbose` is set but are always logged.
    """

    def __init__(
        self,
        project_name: str,
        color: str = "cyan",
        welcome: str = "",
        console: Optional[Console] = None,
        verbose: bool = False,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = console or Console(stderr=True)
        self.verbose = verbose
        self.logger = logging.getLogger(LOGGER_NAME)

    def handshake(self) -> None:
        self.console.print(Text.from_ansi(MEMO_BANNER))
        if self.welcome:
            self.console.print(f"[bold {self.color}]{self.project_name}[/] {self.welcome}")
        self.logger.info("%s %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False)
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/] {escape(message)}", highlight=False)
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]x[/] {escape(message)}", highlight=False)
        self.logger.error(message)

    def debug(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/]", highlight=False)
        self.logger.debug(message)
