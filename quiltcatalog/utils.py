import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from rich.console import Console

# Diagnostics only; the catalog itself is written to stdout with print().
console = Console(stderr=True)

T = TypeVar("T")

_NUMERIC = r"0|[1-9]\d*"
_IDENT = r"[0-9A-Za-z-]+"
_PRERELEASE_IDENT = rf"(?:{_NUMERIC}|\d*[A-Za-z-][0-9A-Za-z-]*)"
SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<pre>{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*))?"
    rf"(?:\+(?P<build>{_IDENT}(?:\.{_IDENT})*))?$",
    re.ASCII,
)


class InvalidVersion(ValueError):
    pass


@dataclass(frozen=True)
class SemanticVersion:
    """A SemVer 2.0.0 version.

    Ordering follows SemVer precedence. Build metadata is kept for display
    and matching but never takes part in ``<``/``>`` comparisons.
    """

    major: int
    minor: int
    patch: int
    pre: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        match = SEMVER_PATTERN.match(text.strip())
        if not match:
            raise InvalidVersion(f"Invalid semantic version: {text!r}")
        pre = match.group("pre")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre=tuple(pre.split(".")) if pre else (),
            build=tuple(build.split(".")) if build else (),
        )

    @property
    def build_metadata(self) -> str:
        return ".".join(self.build)

    def precedence(self) -> tuple:
        if self.pre:
            idents = tuple((0, int(i), "") if i.isdigit() else (1, 0, i) for i in self.pre)
            pre_key: tuple = (0, idents)
        else:
            pre_key = (1, ())
        return (self.major, self.minor, self.patch, pre_key)

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence() < other.precedence()

    def __le__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence() <= other.precedence()

    def __gt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence() > other.precedence()

    def __ge__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence() >= other.precedence()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += "-" + ".".join(self.pre)
        if self.build:
            text += "+" + self.build_metadata
        return text


def sort_descending(versions: Iterable[SemanticVersion]) -> List[SemanticVersion]:
    """Most recent first. Ties keep the order of an ascending sort, reversed."""
    ascending = sorted(versions)
    ascending.reverse()
    return ascending


def find_first(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    for item in items:
        if predicate(item):
            return item
    return None
