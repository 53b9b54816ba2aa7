from typing import TYPE_CHECKING, Any, Optional, cast

from rich.console import Console

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.infrastructure.config_file_loader import ConfigFileLoader
from react_memo_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from react_memo_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from react_memo_linter.infrastructure.services.guidance_service import GuidanceService
from react_memo_linter.interface.reporters import JsonLintReporter, TerminalLintReporter
from react_memo_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from react_memo_linter.domain.protocols import (
        FileSystemProtocol,
        ParserGatewayProtocol,
        TelemetryPort,
    )
    from react_memo_linter.interface.reporters import LintReporter


class ReactMemoContainer:
    """Dependency Injection Container for the react-memo linter."""

    _instance: Optional["ReactMemoContainer"] = None

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))

        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("REACT-MEMO", "cyan", "Memoization audit online")
        )
        self.register_singleton("TreeSitterGateway", TreeSitterGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("GuidanceService", GuidanceService())

        # Reports go to stdout; telemetry writes to stderr.
        console = Console()
        self.register_singleton("Console", console)
        self.register_singleton("TextReporter", TerminalLintReporter(console))
        self.register_singleton("JsonReporter", JsonLintReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_parser_gateway(self) -> "ParserGatewayProtocol":
        """Return the tree-sitter parser gateway."""
        return cast("ParserGatewayProtocol", self.get("TreeSitterGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> GuidanceService:
        """Return the guidance service (rule registry)."""
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_console(self) -> Console:
        return cast(Console, self.get("Console"))

    def get_text_reporter(self) -> "LintReporter":
        return cast("LintReporter", self.get("TextReporter"))

    def get_json_reporter(self) -> "LintReporter":
        return cast("LintReporter", self.get("JsonReporter"))

    @classmethod
    def get_instance(cls) -> "ReactMemoContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = ReactMemoContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
