import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .deserializers import Deserializer, json_loads
from .exceptions import DeserializationError
from .flattening import flatten
from .nodes import to_node

log = logging.getLogger(__name__)


class Source:
    """
    A flat lookup table of composite keys to string values.

    Not safe for concurrent mutation. Callers sharing an instance across
    threads must serialize access themselves.
    """

    def __init__(self) -> None:
        self._registry: Dict[str, str] = {}

    def from_file(
        self, path: Union[str, Path], deserializer: Optional[Deserializer] = None
    ) -> None:
        """
        Reads a whole document from disk and merges its flattened entries.

        Args:
            path: The file to read.
            deserializer: Turns the raw bytes into a decoded value.
                Defaults to JSON.

        Raises:
            OSError: If the file cannot be opened or read.
            DeserializationError: If the document cannot be decoded.
        """
        file_path = Path(path)
        try:
            with file_path.open("rb") as f:
                data = f.read()
        except OSError as e:
            log.warning(f"Could not read file {file_path}: {e}")
            raise
        self._load(data, deserializer, str(file_path))

    def from_data(
        self, data: bytes, deserializer: Optional[Deserializer] = None
    ) -> None:
        """
        Decodes raw bytes and merges their flattened entries.

        Raises:
            DeserializationError: If the document cannot be decoded. The
                registry is left untouched.
        """
        self._load(data, deserializer, "<bytes>")

    def _load(
        self, data: bytes, deserializer: Optional[Deserializer], origin: str
    ) -> None:
        decode = deserializer or json_loads
        try:
            raw = decode(data)
        except DeserializationError as e:
            # Tag with the file path only if the deserializer left it unset
            if e.source == "<bytes>":
                e.source = origin
            log.warning(f"Could not decode {origin}: {e}")
            raise
        except OSError:
            raise
        except Exception as e:
            log.warning(f"Could not decode {origin}: {e}")
            raise DeserializationError(str(e), source=origin) from e

        entries = flatten(to_node(raw))
        self._registry.update(entries)
        log.debug(f"Loaded {len(entries)} entries from {origin}")

    def get(self, key: Any) -> str:
        """
        Returns the value stored under the key, or the key itself if absent.
        """
        key_str = str(key)
        return self._registry.get(key_str, key_str)

    def get_list(self, *keys: Any) -> List[str]:
        return [self.get(key) for key in keys]

    def to_dict(self) -> Dict[str, str]:
        return dict(self._registry)

    def __contains__(self, key: Any) -> bool:
        return str(key) in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"<Source: {len(self._registry)} entries>"
