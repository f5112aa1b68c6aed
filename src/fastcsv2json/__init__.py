"""fastcsv2json: stream delimited text into a JSON array."""

__all__ = ["__version__"]

__version__ = "0.1.0"
