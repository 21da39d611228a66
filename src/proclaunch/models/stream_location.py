"""Where a process stream is read from or written to."""

from enum import Enum


class StreamLocation(str, Enum):
    BUFFER = "buffer"
    FILE = "file"
    STANDARD = "standard"
