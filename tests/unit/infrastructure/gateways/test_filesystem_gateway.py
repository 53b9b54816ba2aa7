"""Unit tests for FileSystemGateway."""

from pathlib import Path

from react_memo_linter.domain.constants import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS
from react_memo_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_discover_walks_directories_and_prunes_excluded(tmp_path: Path) -> None:
    a = _touch(tmp_path / "src" / "a.tsx")
    c = _touch(tmp_path / "src" / "nested" / "c.ts")
    _touch(tmp_path / "src" / "b.py")
    _touch(tmp_path / "node_modules" / "lib" / "x.js")
    _touch(tmp_path / "dist" / "bundle.js")

    found = FileSystemGateway().discover_sources([str(tmp_path)], DEFAULT_EXTENSIONS, DEFAULT_EXCLUDED_DIRS)

    assert found == sorted([str(a), str(c)])


def test_explicit_files_are_kept_and_deduplicated(tmp_path: Path) -> None:
    notes = _touch(tmp_path / "notes.txt")
    a = _touch(tmp_path / "a.js")

    found = FileSystemGateway().discover_sources(
        [str(notes), str(a), str(tmp_path), str(tmp_path / "missing")], [".js"], []
    )

    assert found == sorted([str(notes), str(a)])


def test_read_and_write_keep_newlines(tmp_path: Path) -> None:
    path = tmp_path / "crlf.js"
    path.write_bytes(b"const a = 1;\r\nconst b = 2;\r\n")
    gateway = FileSystemGateway()

    text = gateway.read_text(str(path))
    assert text == "const a = 1;\r\nconst b = 2;\r\n"

    gateway.write_text(str(path), text.replace("1", "3"))
    assert path.read_bytes() == b"const a = 3;\r\nconst b = 2;\r\n"


def test_relative_path(tmp_path: Path) -> None:
    gateway = FileSystemGateway(str(tmp_path))
    inside = tmp_path / "src" / "a.js"
    assert gateway.relative_path(str(inside)) == str(Path("src") / "a.js")
    assert gateway.relative_path("/elsewhere/a.js") == "/elsewhere/a.js"
