from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .errors import InvalidSnapshot


@dataclass(frozen=True)
class VersionEntry:
    version: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "VersionEntry":
        version = obj["version"]
        if not isinstance(version, str):
            raise TypeError(f"'version' must be a string, got {type(version).__name__}")
        extra = {key: value for key, value in obj.items() if key != "version"}
        return cls(version=version, extra=extra)

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)

    def get_bool(self, key: str) -> Optional[bool]:
        value = self.extra.get(key)
        return value if isinstance(value, bool) else None

    @property
    def is_stable(self) -> bool:
        return self.get_bool("stable") is True


@dataclass(frozen=True)
class Versions:
    minecraft: str
    loader: str
    mappings: str
    loom: str
    qfapi: Optional[str] = None  # None when no compatible build is published

    def __post_init__(self) -> None:
        for name in ("minecraft", "loader", "mappings", "loom"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidSnapshot(name, value)
        if self.qfapi is not None and (not isinstance(self.qfapi, str) or not self.qfapi):
            raise InvalidSnapshot("qfapi", self.qfapi)
