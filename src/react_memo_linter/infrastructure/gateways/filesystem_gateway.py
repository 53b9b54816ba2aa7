"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import os
from pathlib import Path
from typing import Sequence

from react_memo_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def __init__(self, root: str | None = None) -> None:
        self.root = Path(root) if root else Path.cwd()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content of a file. Newlines are kept exactly as stored."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def discover_sources(
        self, paths: Sequence[str], extensions: Sequence[str], exclude: Sequence[str]
    ) -> list[str]:
        """
        Expand files and directories into a sorted, de-duplicated list of sources.

        Files named explicitly are kept even when their extension is not listed;
        directories are walked recursively, pruning any directory named in `exclude`.
        """
        wanted = {ext.lower() for ext in extensions}
        skipped = set(exclude)
        found: set[str] = set()
        for raw in paths:
            path_obj = Path(raw)
            if path_obj.is_file():
                found.add(str(path_obj))
                continue
            if not path_obj.is_dir():
                continue
            for dirpath, dirnames, filenames in os.walk(path_obj):
                dirnames[:] = sorted(d for d in dirnames if d not in skipped)
                for name in filenames:
                    if Path(name).suffix.lower() in wanted:
                        found.add(str(Path(dirpath) / name))
        return sorted(found)

    def relative_path(self, path: str) -> str:
        """Path relative to the gateway root when possible, else unchanged."""
        try:
            return str(Path(path).resolve().relative_to(self.root.resolve()))
        except ValueError:
            return path
