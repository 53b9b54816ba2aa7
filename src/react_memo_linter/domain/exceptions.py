"""Exception hierarchy for the linter. The analysis path itself raises none of these."""


class ReactMemoLinterError(Exception):
    """Base class for all linter errors."""


class OverlappingEditsError(ReactMemoLinterError, ValueError):
    """Two edits of one fix touch the same text range."""


class UnsupportedLanguageError(ReactMemoLinterError, ValueError):
    """No grammar is registered for a file extension or language name."""


class UnknownRuleError(ReactMemoLinterError, KeyError):
    """A rule id was requested that the catalog does not define."""


class ConfigurationError(ReactMemoLinterError):
    """A [tool.react-memo-linter] value has the wrong type or an invalid value."""

    def __init__(self, key: str, problem: str) -> None:
        super().__init__(f"Invalid configuration for '{key}': {problem}")
        self.key = key
        self.problem = problem
