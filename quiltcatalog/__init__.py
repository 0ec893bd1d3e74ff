__version__ = "0.1.0"

from .errors import (
    DecodeError,
    InvalidSnapshot,
    NoLoaderFound,
    NoLoomVersion,
    NoMappingsFound,
    NoStableVersion,
    QuiltCatalogError,
    SelectionError,
    TransportError,
)
from .meta_api import QuiltMetaClient
from .models import VersionEntry, Versions
from .report import format_gradle_catalog
from .resolver import resolve_versions
from .utils import SemanticVersion

__all__ = [
    "DecodeError",
    "InvalidSnapshot",
    "NoLoaderFound",
    "NoLoomVersion",
    "NoMappingsFound",
    "NoStableVersion",
    "QuiltCatalogError",
    "QuiltMetaClient",
    "SelectionError",
    "SemanticVersion",
    "TransportError",
    "VersionEntry",
    "Versions",
    "format_gradle_catalog",
    "resolve_versions",
]
