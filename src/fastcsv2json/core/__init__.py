"""Streaming core: line source, sanitizer, tokenizer and pipeline driver."""

from .pipeline import RunContext, convert, run
from .sanitize import Sanitizer
from .streaming import LineSource
from .tokenize import Tokenizer

__all__ = [
    "LineSource",
    "RunContext",
    "Sanitizer",
    "Tokenizer",
    "convert",
    "run",
]
