"""Line-oriented input stream.

The source hands out one line at a time so memory stays bounded by the
longest line, never by the size of the input.
"""

from typing import Iterator, TextIO, Tuple


class LineSource:
    """Read lines from a text stream and count them.

    ``line_number`` is the 1-based number of the line most recently read;
    the driver uses it to tell the header (line 1) from data rows.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.line_number = 0

    def read(self) -> Tuple[str, bool]:
        """Return ``(line, ok)``; ``ok`` is False once the stream is exhausted.

        The line terminator is stripped. Read errors propagate.
        """
        line = self.stream.readline()
        if not line:
            return "", False

        self.line_number += 1
        if line.endswith("\n"):
            line = line[:-1]
        return line, True

    def __iter__(self) -> Iterator[str]:
        while True:
            line, ok = self.read()
            if not ok:
                return
            yield line
