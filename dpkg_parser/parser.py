from collections.abc import Iterator
from enum import Enum

from dpkg_parser.structs import Document, Library, Package


# Only the fields we actually consume. Status, Priority, Section, Version,
# Pre-Depends, Suggests, Conflicts, Homepage etc. are passed over; supporting
# another one is just a matter of adding a member here.
class FieldName(Enum):
    PACKAGE = "Package"
    DESCRIPTION = "Description"
    DEPENDS = "Depends"

    @property
    def prefix(self) -> str:
        return f"{self.value}: "


class ParseError(ValueError):
    """Describes an error that may occur when parsing a source string"""


class PackageNameNotFound(ParseError):
    def __init__(self, stanza: str) -> None:
        super().__init__(stanza)
        self.stanza = stanza

    def __str__(self) -> str:
        return f"package name not found\n\n{self.stanza}"


def iter_stanzas(source: str) -> Iterator[str]:
    """Yield each blank-line delimited stanza of source, as newline-joined text"""
    lines: list[str] = []

    # the trailing "" acts as a final blank line, so the last stanza is flushed
    for line in [*source.split("\n"), ""]:
        line = line.removesuffix("\r")
        if line:
            lines.append(line)
        elif lines:
            yield "\n".join(lines)
            lines = []


def parse_field(field_name: FieldName, stanza: str) -> str:
    """
    Extract the value of a single field from a stanza.

    Continuation lines (those starting with a space) are stripped and joined to the
    first line with newlines, so a folded Description keeps its line structure,
    including the `.` lines marking blank paragraph lines. Only the first
    occurrence of the field is read; an absent field yields an empty string.
    """
    content: list[str] = []
    capturing = False

    for line in stanza.split("\n"):
        if not capturing:
            if line.startswith(field_name.prefix):
                content.append(line[len(field_name.prefix) :])
                capturing = True
            continue

        # an empty line can't be a continuation, so it also ends the field
        if not line.startswith(" "):
            break
        content.append(line.strip())

    return "\n".join(content).strip()


def parse_libraries(source: str) -> list[Library]:
    """
    Parse a Depends value, e.g.

        libc6 (>= 2.14), zlib1g (>= 1:1.1.4), debconf (>= 0.5) | debconf-2.0

    into one Library per comma separated clause. The first alternative of a clause
    is its name, the rest are its alternates.
    """
    if not source:
        return []

    libraries = []
    # NOTE: a plain split, so a clause containing ", " would be cut in two
    for clause in source.split(", "):
        name, *alternates = clause.split(" | ")
        libraries.append(Library(name=name, alternates=tuple(alternates)))

    return libraries


def parse_package(stanza: str) -> Package:
    name = parse_field(FieldName.PACKAGE, stanza)
    if not name:
        raise PackageNameNotFound(stanza)

    description = parse_field(FieldName.DESCRIPTION, stanza)
    depends = parse_libraries(parse_field(FieldName.DEPENDS, stanza))

    return Package(name=name, description=description, depends=tuple(depends))


class DpkgParser:
    def __init__(self, content: str):
        # content is a dpkg status file, or an apt Packages file
        self.content = content

    def iter_packages(self) -> Iterator[Package]:
        """Yield packages in order, stopping at the first stanza that fails"""
        for stanza in iter_stanzas(self.content):
            yield parse_package(stanza)

    def parse(self) -> Document:
        return Document(packages=tuple(self.iter_packages()))


def parse(source: str) -> Document:
    """
    Parse all packages from a source string.

    The source should already be decoded and stripped of surrounding whitespace.
    Raises PackageNameNotFound for the first stanza without a Package field, in
    which case nothing is returned for the rest of the document.

    >>> document = parse("Package: tcpd\\nDepends: libc6 (>= 2.4), libwrap0")
    >>> document.packages[0].name
    'tcpd'
    >>> [library.name for library in document.packages[0].depends]
    ['libc6 (>= 2.4)', 'libwrap0']
    """
    return DpkgParser(source).parse()
