import json
import sys
from pathlib import Path
from typing import Any, Dict, Protocol, Union

import yaml

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from .exceptions import DeserializationError


class Deserializer(Protocol):
    """
    Protocol for turning a raw document into a generic decoded value.
    """

    def __call__(self, data: bytes) -> Any:
        """
        Decodes the raw document.

        Args:
            data: The complete document as bytes.

        Returns:
            A generic value. Only string-keyed mappings and strings
            contribute entries when flattened.

        Raises:
            DeserializationError: If the document is malformed.
        """
        ...


def _decode_text(data: bytes, fmt: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(f"{fmt} document is not valid UTF-8: {e}") from e


def json_loads(data: bytes) -> Any:
    """Standard deserializer for JSON documents."""
    text = _decode_text(data, "JSON")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Invalid JSON: {e}") from e


def yaml_loads(data: bytes) -> Any:
    text = _decode_text(data, "YAML")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeserializationError(f"Invalid YAML: {e}") from e


def toml_loads(data: bytes) -> Any:
    text = _decode_text(data, "TOML")
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise DeserializationError(f"Invalid TOML: {e}") from e


_BY_SUFFIX: Dict[str, Deserializer] = {
    ".json": json_loads,
    ".yaml": yaml_loads,
    ".yml": yaml_loads,
    ".toml": toml_loads,
}


def for_path(path: Union[str, Path]) -> Deserializer:
    """Picks a deserializer from the file suffix, defaulting to JSON."""
    return _BY_SUFFIX.get(Path(path).suffix.lower(), json_loads)
