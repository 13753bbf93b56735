import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from .exceptions import GlossaConfigError
from .flattening import DEFAULT_DELIMITER, set_delimiter

log = logging.getLogger(__name__)

DELIMITER_ENV = "GLOSSA_DELIMITER"


@dataclass
class GlossaConfig:
    delimiter: str = DEFAULT_DELIMITER


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _read_tool_table(search_path: Path) -> Dict[str, Any]:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return {}

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise GlossaConfigError(f"Could not parse {config_path}: {e}") from e

    tool_data = data.get("tool", {})
    glossa_data = tool_data.get("glossa", {}) if isinstance(tool_data, dict) else None
    if not isinstance(glossa_data, dict):
        raise GlossaConfigError(f"[tool.glossa] in {config_path} must be a table")
    return glossa_data


def load_config_from_path(search_path: Path) -> GlossaConfig:
    """
    Builds the configuration from the nearest pyproject.toml.

    Lookup order for the delimiter:
    1. GLOSSA_DELIMITER environment variable
    2. [tool.glossa] delimiter
    3. "."
    """
    glossa_data = _read_tool_table(search_path)

    delimiter = os.getenv(DELIMITER_ENV)
    if delimiter is None:
        delimiter = glossa_data.get("delimiter", DEFAULT_DELIMITER)

    if not isinstance(delimiter, str) or not delimiter:
        raise GlossaConfigError(
            f"delimiter must be a non-empty string, got {delimiter!r}"
        )
    return GlossaConfig(delimiter=delimiter)


def configure(search_path: Optional[Path] = None) -> GlossaConfig:
    """Loads the configuration and applies it to the process-wide settings."""
    config = load_config_from_path(search_path or Path.cwd())
    set_delimiter(config.delimiter)
    log.debug(f"Using delimiter {config.delimiter!r}")
    return config
