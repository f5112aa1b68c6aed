"""Unit tests for line source, sanitizer and tokenizer (no files required)."""

import io

import pytest

from fastcsv2json.core import LineSource, Sanitizer, Tokenizer


# LineSource


def test_line_source_strips_terminator_and_counts():
    source = LineSource(io.StringIO("a,b\n1,2\n"))

    assert source.read() == ("a,b", True)
    assert source.line_number == 1
    assert source.read() == ("1,2", True)
    assert source.line_number == 2
    assert source.read() == ("", False)
    assert source.line_number == 2


def test_line_source_last_line_without_newline():
    assert list(LineSource(io.StringIO("a\nb"))) == ["a", "b"]


def test_line_source_empty_stream():
    source = LineSource(io.StringIO(""))
    assert list(source) == []
    assert source.line_number == 0


def test_line_source_keeps_blank_lines():
    assert list(LineSource(io.StringIO("a\n\nb\n"))) == ["a", "", "b"]


def test_line_source_keeps_carriage_return():
    """StringIO does no newline translation, so CRLF leaves a trailing \\r."""
    assert list(LineSource(io.StringIO("a,b\r\n"))) == ["a,b\r"]


# Sanitizer


def test_sanitizer_noop_without_sets():
    sanitizer = Sanitizer()
    assert not sanitizer.active
    assert sanitizer.apply("a,'b'") == "a,'b'"


def test_sanitizer_replaces_with_space():
    sanitizer = Sanitizer(replace=['"', "/"])
    assert sanitizer.apply('say "hi"/bye') == "say  hi  bye"


def test_sanitizer_erases():
    sanitizer = Sanitizer(erase=["\r", "'"])
    assert sanitizer.apply("it's\r") == "its"


def test_replace_runs_before_erase():
    assert Sanitizer(replace=["x"], erase=["x"]).apply("axb") == "a b"
    assert Sanitizer(replace=[","], erase=[" "]).apply("a,b c") == "abc"


def test_replace_set_order_is_irrelevant():
    line = "a|b;c:d"
    assert Sanitizer(replace=["|", ";"]).apply(line) == Sanitizer(
        replace=[";", "|"]
    ).apply(line)


def test_erase_is_idempotent():
    sanitizer = Sanitizer(erase=["/", "\\", " "])
    once = sanitizer.apply(r"a / b \ c")
    assert once == "abc"
    assert sanitizer.apply(once) == once


# Tokenizer


def test_tokenize_basic():
    tokenizer = Tokenizer(",")
    assert tokenizer.tokenize("a,b,c") == 3
    assert tokenizer.tokens == ["a", "b", "c"]


def test_tokenize_without_delimiter_is_one_token():
    tokenizer = Tokenizer(";")
    assert tokenizer.tokenize("a,b,c") == 1
    assert tokenizer.tokens == ["a,b,c"]


def test_tokenize_empty_line_is_one_empty_token():
    tokenizer = Tokenizer(",")
    assert tokenizer.tokenize("") == 1
    assert tokenizer.tokens == [""]


def test_tokenize_keeps_empty_fields():
    tokenizer = Tokenizer(",")
    assert tokenizer.tokenize(",b,") == 3
    assert tokenizer.tokens == ["", "b", ""]


def test_tokenize_consumes_line_terminator():
    tokenizer = Tokenizer(",")
    assert tokenizer.tokenize("a,b\n") == 2
    assert tokenizer.tokens == ["a", "b"]


def test_tokenize_multi_character_delimiter():
    tokenizer = Tokenizer("::")
    assert tokenizer.tokenize("a::b:c::") == 3
    assert tokenizer.tokens == ["a", "b:c", ""]


def test_delimiter_is_literal_not_regex():
    tokenizer = Tokenizer("|")
    assert tokenizer.tokenize("a|b.c") == 2
    assert tokenizer.tokens == ["a", "b.c"]


def test_tokens_list_is_reused():
    tokenizer = Tokenizer(",")
    tokens = tokenizer.tokens
    tokenizer.tokenize("a,b,c")
    tokenizer.tokenize("x")
    assert tokenizer.tokens is tokens
    assert tokens == ["x"]


def test_tokenize_at_budget():
    tokenizer = Tokenizer(",", max_tokens=3)
    assert tokenizer.tokenize("a,b,c") == 3


def test_tokenize_over_budget_drops_everything():
    tokenizer = Tokenizer(",", max_tokens=3)
    assert tokenizer.tokenize("a,b,c,d") == 0
    assert tokenizer.tokens == []
    assert tokenizer.tokenize("a,b,c,d,e,f,g") == 0


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        Tokenizer("")
