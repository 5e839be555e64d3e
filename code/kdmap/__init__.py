from ._version import __version__
from .cfg import ConfigError, KDMapConfig
from .errors import DuplicateKeyError, EmptyInputError, InvalidPairError, KDMapError
from .index import KDMap, KDNode, Pair

__all__ = (
    "__version__",
    "KDMap",
    "KDMapConfig",
    "KDNode",
    "Pair",
    "ConfigError",
    "KDMapError",
    "EmptyInputError",
    "DuplicateKeyError",
    "InvalidPairError",
)
