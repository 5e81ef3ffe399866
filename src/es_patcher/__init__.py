"""Optimized-file patcher for Everlasting Summer installations."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from es_patcher.protocols import (
    FileSystem,
    ManifestSource,
    Reporter,
)

__all__ = [
    "__version__",
    "FileSystem",
    "ManifestSource",
    "Reporter",
]
