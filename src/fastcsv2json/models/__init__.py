"""Pydantic models for conversion configuration and results."""

from .config import MAX_TOKEN_COUNT, ConversionConfig
from .errors import ConversionResult, Error

__all__ = [
    "MAX_TOKEN_COUNT",
    "ConversionConfig",
    "ConversionResult",
    "Error",
]
