from typing import Any, Dict, Optional


class QuiltCatalogError(Exception):
    """Base exception for quiltcatalog."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}


class TransportError(QuiltCatalogError):
    """Raised when a metadata source cannot be reached or answers with an error status."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}", {"url": url})
        self.url = url
        self.reason = reason


class DecodeError(QuiltCatalogError):
    """Raised when a response body is not the JSON or XML document we expect."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not decode response from {url}: {reason}", {"url": url})
        self.url = url
        self.reason = reason


class SelectionError(QuiltCatalogError):
    """Raised when a well-formed feed has no entry matching the selection rules."""


class NoStableVersion(SelectionError):
    def __init__(self) -> None:
        super().__init__("No stable Minecraft version found in the game version feed")


class NoLoaderFound(SelectionError):
    def __init__(self) -> None:
        super().__init__("No stable Quilt Loader version found in the loader feed")


class NoMappingsFound(SelectionError):
    def __init__(self, minecraft: str) -> None:
        super().__init__(
            f"No Quilt Mappings compatible with Minecraft version {minecraft}",
            {"minecraft": minecraft},
        )
        self.minecraft = minecraft


class NoLoomVersion(SelectionError):
    def __init__(self, coordinate: str) -> None:
        super().__init__(f"No versions of {coordinate} published", {"coordinate": coordinate})
        self.coordinate = coordinate


class InvalidSnapshot(SelectionError):
    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            f"Resolved {field} version {value!r} is not a usable version string",
            {"field": field, "value": value},
        )
        self.field = field
        self.value = value
