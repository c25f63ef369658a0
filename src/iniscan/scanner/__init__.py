"""Line scanner for the iniscan parser.

Architecture:
scanner/
├── __init__.py          # Re-exports Parser, ScanState
├── core.py              # Parser class (state machine + line navigation)
├── modes.py             # ScanState enum
└── classifiers/         # Line classification mixins
    ├── comment.py       # ;comment
    ├── section.py       # [section] and malformed headers
    └── property.py      # key=value and bare keys

Usage:
    >>> from iniscan.scanner import Parser
    >>> [item.type.name for item in Parser("[a]\\nk=v")]
    ['SECTION_END', 'SECTION', 'PROPERTY', 'SECTION_END']

"""

from iniscan.scanner.core import Parser
from iniscan.scanner.modes import ScanState

__all__ = ["Parser", "ScanState"]
