"""Lookup errors and run summaries returned by the conversion layer."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field


class Error(BaseModel):
    """Failed lookup, e.g. an unknown delimiter or character name."""

    message: str

    def __str__(self) -> str:
        return self.message


class ConversionResult(BaseModel):
    """Summary of one conversion run."""

    lines_read: int = 0
    rows_written: int = 0
    rows_skipped: int = 0
    header: Tuple[str, ...] = Field(default_factory=tuple)


__all__ = ["ConversionResult", "Error"]
