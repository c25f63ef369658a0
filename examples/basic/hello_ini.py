"""Scan an INI document and print every item, zero config, zero deps."""

from iniscan import Parser

document = """\
[SECTION]
;this is a comment
Key=Value
"""

for item in Parser(document):
    print(item)
