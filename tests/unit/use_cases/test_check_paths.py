"""Unit tests for CheckPathsUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.rules.catalog import RuleCatalog
from react_memo_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from react_memo_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from react_memo_linter.use_cases.check_paths import CheckPathsUseCase
from react_memo_linter.use_cases.lint_source import Linter

HOOK = "function useX() {\n  const a = f();\n  return a;\n}\n"
HOOK_FIXED = "import { useMemo } from 'react';\nfunction useX() {\n  const a = useMemo(() => f(), []);\n  return a;\n}\n"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "hooks.js").write_text(HOOK, encoding="utf-8")
    (tmp_path / "src" / "ok.ts").write_text("export const x: number = 1;\n", encoding="utf-8")
    (tmp_path / "src" / "readme.md").write_text("# hi\n", encoding="utf-8")
    return tmp_path


def _use_case(root: Path, telemetry: MagicMock, config: ConfigurationLoader | None = None) -> CheckPathsUseCase:
    config = config or ConfigurationLoader()
    return CheckPathsUseCase(
        filesystem=FileSystemGateway(str(root)),
        parser=TreeSitterGateway(),
        linter=Linter.from_catalog(RuleCatalog(config)),
        telemetry=telemetry,
        config_loader=config,
    )


def test_reports_per_file(project: Path, telemetry: MagicMock) -> None:
    summary = _use_case(project, telemetry).execute([str(project)])

    assert [r.path for r in summary.reports] == [str(Path("src") / "hooks.js"), str(Path("src") / "ok.ts")]
    hooks, ok = summary.reports
    assert [(m.rule_id, m.line, m.column) for m in hooks.messages] == [("require-usememo", 2, 12)]
    assert ok.messages == ()
    assert summary.error_count == 1
    assert summary.fixed_files == 0
    assert (project / "src" / "hooks.js").read_text(encoding="utf-8") == HOOK
    telemetry.step.assert_called_once_with("Linting 2 file(s)...")


def test_fix_rewrites_files(project: Path, telemetry: MagicMock) -> None:
    summary = _use_case(project, telemetry).execute([str(project)], fix=True)

    assert (project / "src" / "hooks.js").read_text(encoding="utf-8") == HOOK_FIXED
    hooks = summary.reports[0]
    assert hooks.fixed
    assert hooks.messages == ()
    assert summary.error_count == 0
    assert summary.fixed_files == 1


def test_configured_extensions_and_exclusions(project: Path, telemetry: MagicMock) -> None:
    config = ConfigurationLoader({"extensions": ["ts"], "exclude": ["src"]})
    assert _use_case(project, telemetry, config).discover([str(project)]) == []
    config = ConfigurationLoader({"extensions": ["ts"]})
    assert _use_case(project, telemetry, config).discover([str(project)]) == [str(project / "src" / "ok.ts")]


def test_unsupported_file_is_reported_not_raised(project: Path, telemetry: MagicMock) -> None:
    report = _use_case(project, telemetry).check_file(str(project / "src" / "readme.md"))
    assert report.read_error is not None
    assert report.messages == ()
    telemetry.warning.assert_called_once()


def test_unreadable_file_is_reported_not_raised(project: Path, telemetry: MagicMock) -> None:
    bad = project / "src" / "bad.js"
    bad.write_bytes(b"const a = '\xff\xfe';\n")
    summary = _use_case(project, telemetry).execute([str(bad), str(project / "src" / "hooks.js")])

    bad_report, hooks = summary.reports
    assert bad_report.read_error
    assert hooks.messages
    telemetry.error.assert_called_once()


def test_parse_errors_are_recorded(project: Path, telemetry: MagicMock) -> None:
    broken = project / "src" / "broken.js"
    broken.write_text("const a = 1;\nconst = ;\n", encoding="utf-8")
    report = _use_case(project, telemetry).check_file(str(broken))
    assert report.parse_error is not None
    assert report.messages == ()
    telemetry.warning.assert_called_once()


def test_fix_leaves_files_with_parse_errors_untouched(project: Path, telemetry: MagicMock) -> None:
    broken = project / "src" / "broken.js"
    code = "function useX() {\n  const o = { a: 1 };\n  const = ;\n  return o;\n}\n"
    broken.write_text(code, encoding="utf-8")

    report = _use_case(project, telemetry).check_file(str(broken), fix=True)

    assert broken.read_text(encoding="utf-8") == code
    assert report.parse_error is not None
    assert not report.fixed
    assert [m.rule_id for m in report.messages] == ["require-usememo"]
    assert telemetry.warning.call_count == 2
