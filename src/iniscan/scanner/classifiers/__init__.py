"""Line classifiers for the iniscan parser.

Each classifier is a mixin that decides whether a single line matches one
item kind. Classifiers are pure: they read the source between the offsets
they are given and never move the cursor.
"""

from iniscan.scanner.classifiers.comment import (
    CommentClassifierMixin,
)
from iniscan.scanner.classifiers.property import (
    PropertyClassifierMixin,
)
from iniscan.scanner.classifiers.section import (
    SectionClassifierMixin,
)

__all__ = [
    "CommentClassifierMixin",
    "PropertyClassifierMixin",
    "SectionClassifierMixin",
]
