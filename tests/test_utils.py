# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

import unicodedata

import pytest

from propgen.utils import (
    RESERVED_WORDS,
    camel_case_to_pascal_case,
    capitalize_first,
    kebab_case_to_camel_case,
    lower_first,
    normalize_identifier,
    normalize_whitespace,
    remove_control_characters,
    snake_case_to_camel_case,
    space_case_to_camel_case,
    trim_empty_lines,
)

SAMPLES = [
    "",
    "   ",
    "on Click",
    "aria_label",
    "data-testid",
    "is active?",
    "type",
    "\x1b[1mbold\x1b[0m name",
    "line\nbreak",
    "tab\tseparated value",
    "my_big-value name?",
    "__init__",
    "already camelCase",
    "Value-1",
    "\u0085next\u0007bell",
    "-foo",
    "-type",
    "trailing-",
    "ßa b",
]


def test_normalize_identifier_examples() -> None:
    assert normalize_identifier("on Click") == "onClick"
    assert normalize_identifier("aria_label") == "ariaLabel"
    assert normalize_identifier("data-testid") == "dataTestid"
    assert normalize_identifier("is active?") == "isActive"
    assert normalize_identifier("type") == "type'"


def test_normalize_identifier_mixed_styles() -> None:
    assert normalize_identifier("my_big-value name?") == "myBigValueName"
    assert normalize_identifier("  on   click  ") == "onClick"
    assert normalize_identifier("Value-1") == "value1"
    assert normalize_identifier("a__b") == "aB"


def test_normalize_identifier_degenerate_inputs() -> None:
    assert normalize_identifier("") == ""
    assert normalize_identifier("   ") == ""
    assert normalize_identifier("???") == ""


def test_control_characters_are_dropped_before_word_splitting() -> None:
    # newline and tab are control characters themselves, so they vanish
    assert normalize_identifier("on\nclick") == "onclick"
    assert normalize_identifier("on\tclick") == "onclick"
    assert normalize_identifier("\x1bescaped name") == "escapedName"


@pytest.mark.parametrize("raw", SAMPLES)
def test_output_has_no_control_characters_or_question_marks(raw: str) -> None:
    result = normalize_identifier(raw)
    assert "\x1b" not in result
    assert "?" not in result
    assert " " not in result
    assert all(unicodedata.category(ch) != "Cc" for ch in result)


@pytest.mark.parametrize("raw", SAMPLES)
def test_normalize_identifier_is_idempotent(raw: str) -> None:
    once = normalize_identifier(raw)
    assert normalize_identifier(once) == once


@pytest.mark.parametrize("word", sorted(RESERVED_WORDS))
def test_reserved_words_get_apostrophe(word: str) -> None:
    assert normalize_identifier(word) == f"{word}'"


def test_reserved_word_check_runs_after_case_folding() -> None:
    assert normalize_identifier("True") == "true'"
    assert normalize_identifier("in?") == "in'"


def test_plain_camel_case_words_are_fixed_points() -> None:
    for word in ["onClick", "value", "ariaLabel", "types", "integer"]:
        assert normalize_identifier(word) == word


def test_individual_stages() -> None:
    assert remove_control_characters("a\x1bb\x00c\nd") == "abcd"
    assert normalize_whitespace("a \t  b") == "a b"
    assert space_case_to_camel_case(" hello big world ") == "helloBigWorld"
    assert snake_case_to_camel_case("_private_") == "_private_"
    assert snake_case_to_camel_case("snake_case_name") == "snakeCaseName"
    assert kebab_case_to_camel_case("plain") == "plain"
    assert kebab_case_to_camel_case("a--b") == "aB"
    assert camel_case_to_pascal_case("onClick") == "OnClick"
    assert camel_case_to_pascal_case("") == ""


@pytest.mark.parametrize("raw", SAMPLES)
def test_output_never_starts_upper_case(raw: str) -> None:
    result = normalize_identifier(raw)
    assert result[:1] == result[:1].lower()


def test_edge_hyphens_are_not_word_boundaries() -> None:
    assert kebab_case_to_camel_case("-foo") == "-foo"
    assert kebab_case_to_camel_case("foo-") == "foo-"
    assert kebab_case_to_camel_case("-foo-bar-") == "fooBar"
    assert normalize_identifier("-foo") == "-foo"
    assert normalize_identifier("-type") == "-type"


def test_leading_question_mark_is_removed_after_case_folding() -> None:
    # "?" is stripped after the first letter was lowered, so the result keeps
    # the upper-case letter that followed it.
    assert normalize_identifier("?Foo") == "Foo"


def test_case_mapping_keeps_expanding_characters() -> None:
    assert capitalize_first("ß") == "ß"
    assert capitalize_first("ßa") == "ßa"
    assert lower_first("İx") == "İx"
    assert normalize_identifier("ßa b") == "ßaB"
    assert normalize_identifier("a ß") == "aß"


def test_trim_empty_lines() -> None:
    assert trim_empty_lines(["", "", "a", "", "b", ""]) == ["a", "", "b"]
    assert trim_empty_lines(["", ""]) == []
    assert trim_empty_lines([]) == []
