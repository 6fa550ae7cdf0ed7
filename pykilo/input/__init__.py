"""Input-layer public API for key reading and decoding.

``read_key_event`` turns raw stdin bytes into complete ``KeyEvent``s and
``decode`` maps those onto the closed ``LogicalKey`` vocabulary.
"""

from .keys import MOVEMENT_KEYS, QUIT_SEQUENCE, KeyEvent, LogicalKey, Other, decode
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key_event

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyEvent",
    "LogicalKey",
    "MOVEMENT_KEYS",
    "Other",
    "QUIT_SEQUENCE",
    "decode",
    "read_key_event",
]
