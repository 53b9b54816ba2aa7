"""Load [tool.react-memo-linter] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

TOOL_TABLE: str = "react-memo-linter"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from a start directory.
    """

    @staticmethod
    def find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
        current_path = (start or Path.cwd()).resolve()
        for candidate in (current_path, *current_path.parents):
            config_file = candidate / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the [tool.react-memo-linter] table, or {} when there is none."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return {}
        except toml_lib.TOMLDecodeError as exc:
            logger.warning("Ignoring malformed %s: %s", config_file, exc)
            return {}
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(TOOL_TABLE, {}) or {}
        if not isinstance(config_dict, dict):
            logger.warning("[tool.%s] in %s is not a table; ignoring it.", TOOL_TABLE, config_file)
            return {}
        logger.debug("Loaded [tool.%s] from %s", TOOL_TABLE, config_file)
        return config_dict
