from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    value: str


@dataclass(frozen=True)
class Branch:
    children: Dict[str, "Node"] = field(default_factory=dict)


@dataclass(frozen=True)
class Opaque:
    """Any decoded value that is neither a string nor a string-keyed mapping."""

    raw: Any = None


Node = Union[Leaf, Branch, Opaque]


def to_node(raw: Any) -> Node:
    """
    Converts a generic deserialized value into a Node.

    Strings become leaves and mappings whose keys are all strings become
    branches. Everything else (numbers, booleans, lists, None, mappings
    with non-string keys) is opaque.

    Uses an explicit stack, so nesting depth is not bound by the
    interpreter's recursion limit.
    """
    root: Dict[str, Node] = {}
    stack: List[Tuple[Any, Dict[str, Node], str]] = [(raw, root, "")]
    while stack:
        value, parent, key = stack.pop()
        if isinstance(value, str):
            parent[key] = Leaf(value)
        elif isinstance(value, dict) and all(isinstance(k, str) for k in value):
            children: Dict[str, Node] = {}
            parent[key] = Branch(children)
            # Pushed in reverse so children pop in document order
            for child_key, child in reversed(list(value.items())):
                stack.append((child, children, child_key))
        else:
            parent[key] = Opaque(value)
    return root[""]
