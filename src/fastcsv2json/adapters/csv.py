"""CSV adapter: turn tokenized rows into JSON object fragments."""

from typing import List, Optional, Sequence, Tuple


class HeaderRegistry:
    """Field names taken from the first line of the input.

    The names are copied out of the tokenizer's list, which is reused for
    every later line.
    """

    def __init__(self):
        self.fields: Tuple[str, ...] = ()
        self.captured = False

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def capture(self, tokens: Sequence[str], count: int) -> None:
        """Store the first ``count`` tokens as the header.

        Raises:
            RuntimeError: If a header was already captured
        """
        if self.captured:
            raise RuntimeError("Header already captured")
        self.fields = tuple(tokens[:count])
        self.captured = True


def serialize_row(
    tokens: Sequence[str],
    count: int,
    header: HeaderRegistry,
    buffer: Optional[List[str]] = None,
) -> Optional[str]:
    """Render one row as a JSON object literal keyed by the header.

    Args:
        tokens: Field values of the row
        count: Number of valid entries in ``tokens``
        header: Captured header names
        buffer: Reusable parts list; cleared before use

    Returns:
        ``{"k1":"v1","k2":"v2"}`` text, or None when the field count does
        not match the header (the row is dropped)

    Notes:
        Keys and values are written verbatim between double quotes; quotes,
        backslashes and control characters are not escaped.

    Example:
        >>> header = HeaderRegistry()
        >>> header.capture(["name", "age"], 2)
        >>> serialize_row(["Alice", "30"], 2, header)
        '{"name":"Alice","age":"30"}'
    """
    if count != header.field_count or count == 0:
        return None

    parts = buffer if buffer is not None else []
    parts.clear()
    parts.append("{")
    for index, name in enumerate(header.fields):
        if index:
            parts.append(",")
        parts.append('"')
        parts.append(name)
        parts.append('":"')
        parts.append(tokens[index])
        parts.append('"')
    parts.append("}")
    return "".join(parts)


__all__ = ["HeaderRegistry", "serialize_row"]
