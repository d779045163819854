from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeKind(Enum):
    DOCUMENT = "document"
    PACKAGE = "package"
    LIBRARY = "library"


# a dependency entry, e.g. `debconf (>= 0.5) | debconf-2.0`
# name keeps the version constraint exactly as written
@dataclass(frozen=True)
class Library:
    kind: ClassVar[NodeKind] = NodeKind.LIBRARY

    name: str
    alternates: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Package:
    kind: ClassVar[NodeKind] = NodeKind.PACKAGE

    name: str
    description: str = field(default_factory=str)
    depends: tuple[Library, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Document:
    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    packages: tuple[Package, ...] = field(default_factory=tuple)
