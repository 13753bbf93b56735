from pathlib import Path
from typing import Any, List, Optional, Union

from .deserializers import Deserializer
from .store import Source


def from_file(
    path: Union[str, Path], deserializer: Optional[Deserializer] = None
) -> None:
    source.from_file(path, deserializer)


def from_data(data: bytes, deserializer: Optional[Deserializer] = None) -> None:
    source.from_data(data, deserializer)


def get(key: Any) -> str:
    """
    Looks the key up in the default source, falling back to the key itself.
    """
    return source.get(key)


def get_list(*keys: Any) -> List[str]:
    return source.get_list(*keys)


# Global default instance. Shares the concurrency limits of Source.
source = Source()
