import logging
from typing import Dict, List, Optional, Tuple

from .nodes import Branch, Leaf, Node, Opaque

log = logging.getLogger(__name__)

DEFAULT_DELIMITER = "."

# Process-wide. Only affects keys composed after a change.
_delimiter = DEFAULT_DELIMITER


def get_delimiter() -> str:
    return _delimiter


def set_delimiter(delimiter: str) -> None:
    """
    Sets the separator used to join path segments into composite keys.

    Keys already stored are not re-keyed.
    """
    global _delimiter
    _delimiter = delimiter


def flatten(node: Node, delimiter: Optional[str] = None) -> Dict[str, str]:
    """
    Projects a decoded tree into a flat mapping of composite keys to strings.

    Args:
        node: The root of the decoded tree.
        delimiter: Separator for this call. Defaults to the current
            process-wide delimiter.

    Returns:
        A dictionary such as {"a.b": "hello"}. A string at the root is
        stored under the empty key.
    """
    sep = _delimiter if delimiter is None else delimiter
    result: Dict[str, str] = {}

    # Explicit stack of (node, path, key) so depth is unbounded
    stack: List[Tuple[Node, List[str], str]] = [(node, [], "")]
    while stack:
        current, path, key = stack.pop()
        if key:
            # Fresh list per level so siblings never share a segment
            path = path + [key]

        if isinstance(current, Leaf):
            result[sep.join(path)] = current.value
        elif isinstance(current, Branch):
            for child_key, child in reversed(list(current.children.items())):
                stack.append((child, path, child_key))
        elif isinstance(current, Opaque):
            log.debug(
                f"Skipping {type(current.raw).__name__} value at '{sep.join(path)}'"
            )
    return result
