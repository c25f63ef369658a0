"""Parser scan states.

The parser is a small finite state machine. Each pull inspects the state,
emits at most one item and moves to the next state.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Parser scan states.

    - START: Nothing emitted yet; the leading boundary is owed
    - SCANNING: Classifying lines from the cursor onwards
    - HEADER_PENDING: A boundary was just emitted for a queued section header
    - DONE: The trailing boundary was emitted; the parser is exhausted

    """

    START = auto()
    SCANNING = auto()
    HEADER_PENDING = auto()
    DONE = auto()
