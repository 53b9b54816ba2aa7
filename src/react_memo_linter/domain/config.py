"""Configuration for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from react_memo_linter.domain.constants import (
    DEFAULT_DIAGNOSTIC_SINKS,
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_EXTENSIONS,
    DEFAULT_HOOK_MODULE,
    DEFAULT_STATEFUL_PRIMITIVES,
    SEVERITIES,
    SEVERITY_ERROR,
)
from react_memo_linter.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "hook_module",
        "stateful_primitives",
        "extra_stateful_primitives",
        "skip_custom_hook_calls",
        "diagnostic_sinks",
        "rules",
        "extensions",
        "exclude",
    }
)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.react-memo-linter] table. Domain
    does not read the filesystem; ConfigFileLoader.load_config_from_fs() feeds
    this class at the composition root. Values are validated once here.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values. Raises ConfigurationError on bad types."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' is ignored.", key)

        hook_module = config.get("hook_module", DEFAULT_HOOK_MODULE)
        if not isinstance(hook_module, str) or not hook_module:
            raise ConfigurationError("hook_module", "expected a non-empty string")

        for key in ("stateful_primitives", "extra_stateful_primitives", "diagnostic_sinks",
                    "extensions", "exclude"):
            raw = config.get(key)
            if raw is None:
                continue
            if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
                raise ConfigurationError(key, "expected a list of strings")

        skip = config.get("skip_custom_hook_calls", True)
        if not isinstance(skip, bool):
            raise ConfigurationError("skip_custom_hook_calls", "expected true or false")

        rules = config.get("rules", {})
        if not isinstance(rules, dict):
            raise ConfigurationError("rules", "expected a table of rule-id = severity")
        for rule_id, severity in rules.items():
            if severity not in SEVERITIES:
                raise ConfigurationError(
                    f"rules.{rule_id}",
                    f"severity must be one of {', '.join(sorted(SEVERITIES))}",
                )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def hook_module(self) -> str:
        return str(self._config.get("hook_module", DEFAULT_HOOK_MODULE))

    @property
    def stateful_primitives(self) -> frozenset[str]:
        """Callees never wrapped by the value rule: the denylist plus any extras."""
        base = self._config.get("stateful_primitives")
        names = list(base) if isinstance(base, list) else list(DEFAULT_STATEFUL_PRIMITIVES)
        extra = self._config.get("extra_stateful_primitives", [])
        if isinstance(extra, list):
            names.extend(extra)
        return frozenset(str(n) for n in names)

    @property
    def skip_custom_hook_calls(self) -> bool:
        return bool(self._config.get("skip_custom_hook_calls", True))

    @property
    def diagnostic_sinks(self) -> frozenset[str]:
        raw = self._config.get("diagnostic_sinks")
        if isinstance(raw, list):
            return frozenset(str(x) for x in raw)
        return frozenset(DEFAULT_DIAGNOSTIC_SINKS)

    @property
    def extensions(self) -> tuple[str, ...]:
        raw = self._config.get("extensions")
        if isinstance(raw, list):
            return tuple(x if x.startswith(".") else f".{x}" for x in raw)
        return DEFAULT_EXTENSIONS

    @property
    def exclude(self) -> tuple[str, ...]:
        raw = self._config.get("exclude")
        if isinstance(raw, list):
            return tuple(str(x) for x in raw)
        return DEFAULT_EXCLUDED_DIRS

    def rule_severity(self, rule_id: str) -> str:
        """Severity configured for a rule; rules default to error."""
        rules = self._config.get("rules", {})
        if isinstance(rules, dict):
            return str(rules.get(rule_id, SEVERITY_ERROR))
        return SEVERITY_ERROR
