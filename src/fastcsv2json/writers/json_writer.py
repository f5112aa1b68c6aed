"""Streaming JSON array writer."""

from typing import TextIO


class JsonArrayWriter:
    """Write pre-rendered objects to a sink as one JSON array.

    Unlike ``json.dump`` over a list, nothing is buffered: each object is
    written as it arrives, with ``,\\n`` placed only before the second and
    later objects so the array stays valid however the stream ends.

    Usage:
        writer = JsonArrayWriter(sys.stdout)
        writer.begin()
        writer.write('{"a":"1"}')
        writer.end()
    """

    SEPARATOR = ",\n"

    def __init__(self, sink: TextIO):
        self.sink = sink
        self.count = 0

    def begin(self) -> None:
        self.sink.write("[")

    def write(self, fragment: str) -> None:
        if self.count:
            self.sink.write(self.SEPARATOR)
        self.sink.write(fragment)
        self.count += 1

    def end(self) -> None:
        """Close the array and flush the sink (which stays open)."""
        self.sink.write("]")
        self.sink.flush()
