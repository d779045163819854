import json
from typing import Any

from core.config import OutputFormat
from dpkg_parser.parser import FieldName
from dpkg_parser.structs import Document, Library, Package


def to_dict(node: Document | Package | Library) -> dict[str, Any]:
    """Recursively converts a parsed node to plain dicts, tagging each with its kind"""
    match node:
        case Document():
            return {
                "kind": node.kind.value,
                "packages": [to_dict(package) for package in node.packages],
            }
        case Package():
            return {
                "kind": node.kind.value,
                "name": node.name,
                "description": node.description,
                "depends": [to_dict(library) for library in node.depends],
            }
        case Library():
            return {
                "kind": node.kind.value,
                "name": node.name,
                "alternates": list(node.alternates),
            }
        case _:
            raise TypeError(f"Can't convert {type(node).__name__} to a dict")


def to_json(document: Document, indent: int | None = 2) -> str:
    return json.dumps(to_dict(document), indent=indent)


def format_library(library: Library) -> str:
    return " | ".join([library.name, *library.alternates])


def format_field(field_name: FieldName, value: str) -> list[str]:
    first, *rest = value.split("\n")
    # continuation lines are folded with a single leading space
    return [f"{field_name.prefix}{first}", *(f" {line}" for line in rest)]


def format_package(package: Package) -> str:
    lines = format_field(FieldName.PACKAGE, package.name)

    if package.description:
        lines.extend(format_field(FieldName.DESCRIPTION, package.description))

    if package.depends:
        depends = ", ".join(format_library(library) for library in package.depends)
        lines.extend(format_field(FieldName.DEPENDS, depends))

    return "\n".join(lines)


def to_control(document: Document) -> str:
    """Serializes a document back to stanzas, which parse to an equal document"""
    return "\n\n".join(format_package(package) for package in document.packages)


def summary(document: Document) -> str:
    lines = []
    for package in document.packages:
        alternates = sum(len(library.alternates) for library in package.depends)
        lines.append(
            f"{package.name}: {len(package.depends)} dependencies, {alternates} alternates"  # noqa
        )
    lines.append(f"{len(document.packages)} packages")
    return "\n".join(lines)


def render(document: Document, output_format: OutputFormat) -> str:
    match output_format:
        case OutputFormat.JSON:
            return to_json(document)
        case OutputFormat.CONTROL:
            return to_control(document)
        case OutputFormat.SUMMARY:
            return summary(document)
        case _:
            raise ValueError(f"Unknown output format: {output_format}")
