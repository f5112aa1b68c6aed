"""Pipeline driver: delimited lines in, JSON array out.

One pass over the input:

    LineSource → Sanitizer → Tokenizer → HeaderRegistry (line 1)
                                       → serialize_row (lines ≥ 2) → JsonArrayWriter

Rows whose field count differs from the header are dropped without any
output or separator; only the aggregate count is kept in the result.
"""

import logging
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import List, TextIO

from ..adapters.csv import HeaderRegistry, serialize_row
from ..models import ConversionConfig, ConversionResult
from ..writers.json_writer import JsonArrayWriter
from .sanitize import Sanitizer
from .streaming import LineSource
from .tokenize import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Per-run state owned by the driver.

    The line, token list and output parts are reused on every iteration;
    nothing here outlives the run.
    """

    config: ConversionConfig
    sanitizer: Sanitizer
    tokenizer: Tokenizer
    header: HeaderRegistry = field(default_factory=HeaderRegistry)
    line: str = ""
    output: List[str] = field(default_factory=list)
    result: ConversionResult = field(default_factory=ConversionResult)

    @classmethod
    def from_config(cls, config: ConversionConfig) -> "RunContext":
        return cls(
            config=config,
            sanitizer=Sanitizer(config.replace_chars, config.erase_chars),
            tokenizer=Tokenizer(config.delimiter, config.max_tokens),
        )


def convert(
    config: ConversionConfig, source: TextIO, sink: TextIO
) -> ConversionResult:
    """Convert an open delimited text stream into a JSON array on ``sink``.

    Args:
        config: Conversion settings (paths are ignored here)
        source: Text stream to read lines from
        sink: Text stream receiving the JSON array

    Returns:
        ConversionResult with line and row counts

    Raises:
        OSError: If reading or writing fails; output is left incomplete
        UnicodeDecodeError: If the input does not match its encoding
    """
    ctx = RunContext.from_config(config)
    lines = LineSource(source)
    writer = JsonArrayWriter(sink)
    tokens = ctx.tokenizer.tokens

    writer.begin()

    for raw in lines:
        ctx.line = ctx.sanitizer.apply(raw) if ctx.sanitizer.active else raw
        count = ctx.tokenizer.tokenize(ctx.line)

        # First line is always the header, whatever it contains
        if lines.line_number == 1:
            if count:
                ctx.header.capture(tokens, count)
            continue

        fragment = serialize_row(tokens, count, ctx.header, ctx.output)
        if fragment is None:
            ctx.result.rows_skipped += 1
            continue
        writer.write(fragment)

    writer.end()

    ctx.result.lines_read = lines.line_number
    ctx.result.rows_written = writer.count
    ctx.result.header = ctx.header.fields
    logger.info(
        "Converted %d lines: %d rows written, %d skipped",
        ctx.result.lines_read,
        ctx.result.rows_written,
        ctx.result.rows_skipped,
    )
    return ctx.result


def run(config: ConversionConfig) -> ConversionResult:
    """Open the configured input/output and convert.

    Named files are closed on every exit path; the standard streams are
    used as-is and left open.
    """
    with ExitStack() as stack:
        if config.input_path is not None:
            logger.debug("Reading %s", config.input_path)
            source = stack.enter_context(
                open(config.input_path, encoding=config.encoding)
            )
        else:
            logger.debug("Reading standard input")
            source = sys.stdin

        if config.output_path is not None:
            logger.debug("Writing %s", config.output_path)
            sink = stack.enter_context(
                open(config.output_path, "w", encoding=config.encoding)
            )
        else:
            sink = sys.stdout

        return convert(config, source, sink)


__all__ = ["RunContext", "convert", "run"]
