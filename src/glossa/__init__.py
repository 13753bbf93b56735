from .config import GlossaConfig, configure, load_config_from_path
from .deserializers import Deserializer, for_path, json_loads, toml_loads, yaml_loads
from .exceptions import DeserializationError, GlossaConfigError, GlossaError
from .flattening import flatten, get_delimiter, set_delimiter
from .nodes import Branch, Leaf, Node, Opaque, to_node
from .runtime import from_data, from_file, get, get_list
from .store import Source

__all__ = [
    "Branch",
    "DeserializationError",
    "Deserializer",
    "GlossaConfig",
    "GlossaConfigError",
    "GlossaError",
    "Leaf",
    "Node",
    "Opaque",
    "Source",
    "configure",
    "flatten",
    "for_path",
    "from_data",
    "from_file",
    "get",
    "get_delimiter",
    "get_list",
    "json_loads",
    "load_config_from_path",
    "set_delimiter",
    "to_node",
    "toml_loads",
    "yaml_loads",
]
