"""Adapters from delimited rows to JSON object text."""

from .csv import HeaderRegistry, serialize_row

__all__ = ["HeaderRegistry", "serialize_row"]
