"""Pure selection rules over the listings fetched by ``QuiltMetaClient``."""

from typing import List, Optional, Sequence

from .errors import NoLoaderFound, NoLoomVersion, NoMappingsFound, NoStableVersion
from .meta_api import LOOM_COORDINATE
from .models import VersionEntry
from .utils import SemanticVersion, find_first


def select_minecraft_version(entries: Sequence[VersionEntry]) -> str:
    """First stable entry in feed order."""
    entry = find_first(entries, lambda e: e.is_stable)
    if entry is None:
        raise NoStableVersion()
    return entry.version


def is_release_loader(version: str) -> bool:
    # Lexical check: any hyphen marks a beta/pre-release tag.
    return "-" not in version


def select_loader_version(entries: Sequence[VersionEntry]) -> str:
    entry = find_first(entries, lambda e: is_release_loader(e.version))
    if entry is None:
        raise NoLoaderFound()
    return entry.version


def select_mappings_version(entries: Sequence[VersionEntry], minecraft: str) -> str:
    # The scoped feed is already newest first.
    entry = find_first(entries, lambda e: True)
    if entry is None:
        raise NoMappingsFound(minecraft)
    return entry.version


def select_loom_version(versions: List[SemanticVersion]) -> str:
    if not versions:
        raise NoLoomVersion(LOOM_COORDINATE)
    return str(versions[0])


def matches_minecraft(version: SemanticVersion, minecraft: str) -> bool:
    return minecraft in version.build_metadata


def select_qfapi_version(versions: List[SemanticVersion], minecraft: str) -> Optional[str]:
    """Newest Quilted Fabric API built for ``minecraft``, or None if none was published yet."""
    match = find_first(versions, lambda v: matches_minecraft(v, minecraft))
    return str(match) if match is not None else None
