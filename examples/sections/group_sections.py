"""Build a section table on top of the item stream.

The scanner never aggregates; grouping, trimming and deciding what to do
with malformed lines is up to the caller. This example collects properties
per section the way a build-time config importer would, treating malformed
headers and bare keys as fatal.
"""

from iniscan import ItemType, ScanError, scan, trim

Sections = list[tuple[str | None, list[tuple[str, str]]]]

document = """\
top=level

[server]
host = example.org
port = 8080

[client]
retries=3
"""


def group_sections(source: str) -> Sections:
    sections: Sections = []
    name: str | None = None
    properties: list[tuple[str, str]] = []

    for item in scan(source, strict=True):
        if item.type is ItemType.SECTION_END:
            # Skip the empty implicit section when the file starts with a header
            if name is not None or properties:
                sections.append((name, properties))
            properties = []
        elif item.type is ItemType.SECTION:
            name = trim(item.name)
        elif item.type is ItemType.PROPERTY:
            if item.value is None:
                raise ScanError("property without value", lineno=item.lineno)
            properties.append((trim(item.key), trim(item.value)))

    return sections


if __name__ == "__main__":
    for section, props in group_sections(document):
        print(section or "<top level>")
        for key, value in props:
            print(f"    {key} = {value}")
