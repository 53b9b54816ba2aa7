"""Unit tests for the Typer CLI."""

import json
from io import StringIO
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

from rich.console import Console
from typer.testing import CliRunner

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from react_memo_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from react_memo_linter.infrastructure.services.guidance_service import GuidanceService
from react_memo_linter.interface.cli import CLIDependencies, create_app
from react_memo_linter.interface.reporters import JsonLintReporter, TerminalLintReporter

runner = CliRunner()

HOOK = "function useX() {\n  const a = f();\n  return a;\n}\n"
HOOK_FIXED = "import { useMemo } from 'react';\nfunction useX() {\n  const a = useMemo(() => f(), []);\n  return a;\n}\n"


def _make_deps(
    root: Path, config: Optional[dict[str, object]] = None, **overrides: object
) -> CLIDependencies:
    """Real gateways; telemetry is a mock so stdout only carries reports."""
    defaults: dict = {
        "config_loader": ConfigurationLoader(config or {}),
        "telemetry": MagicMock(),
        "parser": TreeSitterGateway(),
        "filesystem": FileSystemGateway(str(root)),
        "guidance_service": GuidanceService(),
        "text_reporter": TerminalLintReporter(Console(width=200)),
        "json_reporter": JsonLintReporter(),
        "console": Console(file=StringIO(), width=200),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


def _write(root: Path, name: str, content: str) -> Path:
    path = root / name
    path.write_text(content, encoding="utf-8")
    return path


class TestCheckCommand:
    def test_clean_file_exits_zero(self, tmp_path: Path) -> None:
        _write(tmp_path, "ok.js", "const a = 1;\n")
        deps = _make_deps(tmp_path)
        result = runner.invoke(create_app(deps), ["check", str(tmp_path)])
        assert result.exit_code == 0
        assert "No problems found." in result.stdout
        deps.telemetry.handshake.assert_called_once()

    def test_errors_exit_one(self, tmp_path: Path) -> None:
        _write(tmp_path, "hooks.js", HOOK)
        result = runner.invoke(create_app(_make_deps(tmp_path)), ["check", str(tmp_path)])
        assert result.exit_code == 1
        assert "require-usememo" in result.stdout
        assert "1 problem(s) (1 error(s), 0 warning(s)), 1 fixable with --fix" in result.stdout

    def test_warnings_do_not_fail_the_run(self, tmp_path: Path) -> None:
        _write(tmp_path, "hooks.js", HOOK)
        deps = _make_deps(tmp_path, {"rules": {"require-usememo": "warn"}})
        result = runner.invoke(create_app(deps), ["check", str(tmp_path)])
        assert result.exit_code == 0
        assert "(0 error(s), 1 warning(s))" in result.stdout

    def test_json_format(self, tmp_path: Path) -> None:
        _write(tmp_path, "hooks.js", HOOK)
        deps = _make_deps(tmp_path)
        result = runner.invoke(create_app(deps), ["check", str(tmp_path), "--format", "json"])
        assert result.exit_code == 1
        [entry] = json.loads(result.stdout)
        assert entry["filePath"] == "hooks.js"
        assert entry["errorCount"] == 1
        [message] = entry["messages"]
        assert message["ruleId"] == "require-usememo"
        assert (message["line"], message["column"]) == (2, 12)
        assert message["fixable"] is True
        deps.telemetry.handshake.assert_not_called()

    def test_fix_rewrites_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hooks.js", HOOK)
        result = runner.invoke(create_app(_make_deps(tmp_path)), ["check", str(tmp_path), "--fix"])
        assert result.exit_code == 0
        assert path.read_text(encoding="utf-8") == HOOK_FIXED

    def test_rule_filter(self, tmp_path: Path) -> None:
        _write(tmp_path, "hooks.js", HOOK)
        result = runner.invoke(
            create_app(_make_deps(tmp_path)), ["check", str(tmp_path), "--rule", "require-usecallback"]
        )
        assert result.exit_code == 0

    def test_unknown_rule_exits_two(self, tmp_path: Path) -> None:
        deps = _make_deps(tmp_path)
        result = runner.invoke(create_app(deps), ["check", str(tmp_path), "-r", "require-usestate"])
        assert result.exit_code == 2
        deps.telemetry.error.assert_called_once()
        assert "require-usestate" in deps.telemetry.error.call_args[0][0]


class TestRulesCommand:
    def test_lists_both_rules(self, tmp_path: Path) -> None:
        console = Console(file=StringIO(), width=200)
        deps = _make_deps(tmp_path, {"rules": {"require-usecallback": "off"}}, console=console)
        result = runner.invoke(create_app(deps), ["rules"])
        assert result.exit_code == 0
        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "require-usecallback" in output
        assert "require-usememo" in output
        assert "off" in output

    def test_explain_prints_manual_instructions(self, tmp_path: Path) -> None:
        console = Console(file=StringIO(), width=200)
        result = runner.invoke(create_app(_make_deps(tmp_path, console=console)), ["rules", "--explain"])
        assert result.exit_code == 0
        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "review\nit for stale closures" in output
        assert "useMemo(() => ({ ... }), [deps])" in output

    def test_instructions_are_hidden_without_explain(self, tmp_path: Path) -> None:
        console = Console(file=StringIO(), width=200)
        runner.invoke(create_app(_make_deps(tmp_path, console=console)), ["rules"])
        assert "stale closures" not in console.file.getvalue()  # type: ignore[attr-defined]


class TestFixPreviewCommand:
    def test_prints_fixed_text_without_writing(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hooks.js", HOOK)
        result = runner.invoke(create_app(_make_deps(tmp_path)), ["fix-preview", str(path)])
        assert result.exit_code == 0
        assert result.stdout == HOOK_FIXED
        assert path.read_text(encoding="utf-8") == HOOK

    def test_unsupported_file_exits_two(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "styles.css", "a {}\n")
        deps = _make_deps(tmp_path)
        result = runner.invoke(create_app(deps), ["fix-preview", str(path)])
        assert result.exit_code == 2
        deps.telemetry.error.assert_called_once()

    def test_missing_file_exits_two(self, tmp_path: Path) -> None:
        result = runner.invoke(create_app(_make_deps(tmp_path)), ["fix-preview", str(tmp_path / "gone.js")])
        assert result.exit_code == 2
