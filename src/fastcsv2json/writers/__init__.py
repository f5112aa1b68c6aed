"""Writers for the JSON output stream."""

from .json_writer import JsonArrayWriter

__all__ = ["JsonArrayWriter"]
