"""Delimiter-based tokenizer with a hard token budget."""

from typing import List

from ..models import MAX_TOKEN_COUNT


class Tokenizer:
    """Split lines on a literal delimiter into a reusable token list.

    ``tokens`` is cleared and refilled on every call rather than replaced,
    so callers holding the tokenizer see the current line's fields.

    Example:
        >>> t = Tokenizer("|")
        >>> t.tokenize("a|b|c")
        3
        >>> t.tokens
        ['a', 'b', 'c']
    """

    def __init__(self, delimiter: str = ",", max_tokens: int = MAX_TOKEN_COUNT):
        if not delimiter:
            raise ValueError("Delimiter must not be empty")
        self.delimiter = delimiter
        self.max_tokens = max_tokens
        self.tokens: List[str] = []

    def tokenize(self, line: str) -> int:
        """Fill ``tokens`` from ``line`` and return the token count.

        Returns 0 (and leaves ``tokens`` empty) when the line holds more than
        ``max_tokens`` fields; such rows are meant to be dropped.
        """
        tokens = self.tokens
        tokens.clear()

        if line.endswith("\n"):
            line = line[:-1]

        delimiter = self.delimiter
        step = len(delimiter)
        limit = self.max_tokens
        start = 0
        end = line.find(delimiter)

        while end != -1:
            if len(tokens) == limit:
                tokens.clear()
                return 0
            tokens.append(line[start:end])
            start = end + step
            end = line.find(delimiter, start)

        if len(tokens) == limit:
            tokens.clear()
            return 0
        tokens.append(line[start:])
        return len(tokens)
