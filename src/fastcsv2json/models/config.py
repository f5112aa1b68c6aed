"""Conversion configuration model."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TOKEN_COUNT = 4096


class ConversionConfig(BaseModel):
    """Settings for one csv to json run.

    Built once by the CLI layer (or by callers of the library) and read-only
    afterwards. ``input_path``/``output_path`` of ``None`` select the
    standard streams.
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default=",", min_length=1)
    input_path: Path | None = None
    output_path: Path | None = None
    replace_chars: Tuple[str, ...] = ()
    erase_chars: Tuple[str, ...] = ()
    encoding: str = "utf-8"
    max_tokens: int = Field(default=MAX_TOKEN_COUNT, ge=1)

    @field_validator("replace_chars", "erase_chars")
    @classmethod
    def single_characters(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure every sanitization entry is exactly one character."""

        for char in v:
            if len(char) != 1:
                raise ValueError(f"Expected a single character, got {char!r}")
        return v

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        """Reject encodings the codec registry does not know."""

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


__all__ = ["MAX_TOKEN_COUNT", "ConversionConfig"]
