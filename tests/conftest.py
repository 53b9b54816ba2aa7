"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and tests/ on the path so helpers import as `linter_test_utils`.
"""

from unittest.mock import MagicMock

import pytest

from react_memo_linter.domain.rules.require_usecallback import RequireUseCallbackRule
from react_memo_linter.domain.rules.require_usememo import RequireUseMemoRule


@pytest.fixture
def callback_rule() -> RequireUseCallbackRule:
    return RequireUseCallbackRule()


@pytest.fixture
def memo_rule() -> RequireUseMemoRule:
    return RequireUseMemoRule()


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()
