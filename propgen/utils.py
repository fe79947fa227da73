# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

import re
import unicodedata
from typing import Callable, Sequence

ESCAPE = "\x1b"
NEWLINE = "\n"
RESERVED_MARKER = "'"

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "checked",
        "static",
        "fixed",
        "inline",
        "default",
        "component",
        "inherit",
        "open",
        "type",
        "true",
        "false",
        "in",
        "end",
        "global",
        "list",
        "as",
        "base",
        "begin",
        "class",
        "bool",
        "int",
        "member",
        "lazy",
        "virtual",
    }
)

_WHITESPACE_RUN = re.compile(r"\s+")


def trim_empty_lines(items: Sequence[str]) -> list[str]:
    """Drop leading and trailing empty strings, keeping inner ones."""
    start = 0
    end = len(items)
    while start < end and items[start] == "":
        start += 1
    while end > start and items[end - 1] == "":
        end -= 1
    return list(items[start:end])


def _map_first(value: str, convert: Callable[[str], str]) -> str:
    if not value:
        return value
    first = convert(value[0])
    # Characters whose case mapping expands (e.g. "ß" -> "SS") are kept as-is.
    if len(first) != 1:
        return value
    return first + value[1:]


def capitalize_first(value: str) -> str:
    return _map_first(value, str.upper)


def lower_first(value: str) -> str:
    return _map_first(value, str.lower)


def camel_case_to_pascal_case(value: str) -> str:
    return capitalize_first(value)


def remove_control_characters(value: str) -> str:
    return "".join(
        ch for ch in value if ch != ESCAPE and unicodedata.category(ch) != "Cc"
    )


def replace_newline_with_space(value: str) -> str:
    return value.replace(NEWLINE, " ")


def normalize_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value)


def space_case_to_camel_case(value: str) -> str:
    return lower_first("".join(capitalize_first(token) for token in value.split(" ")))


def snake_case_to_camel_case(value: str) -> str:
    # Leading/trailing underscores are not word boundaries.
    pieces = trim_empty_lines(value.split("_"))
    if len(pieces) <= 1:
        return value
    return pieces[0] + "".join(capitalize_first(piece) for piece in pieces[1:])


def kebab_case_to_camel_case(value: str) -> str:
    pieces = trim_empty_lines(value.split("-"))
    if len(pieces) <= 1:
        return value
    return pieces[0] + "".join(capitalize_first(piece) for piece in pieces[1:])


def remove_question_marks(value: str) -> str:
    return value.replace("?", "")


def escape_reserved_word(value: str) -> str:
    if value in RESERVED_WORDS:
        return f"{value}{RESERVED_MARKER}"
    return value


_PIPELINE = (
    remove_control_characters,
    replace_newline_with_space,
    normalize_whitespace,
    space_case_to_camel_case,
    snake_case_to_camel_case,
    kebab_case_to_camel_case,
    remove_question_marks,
    escape_reserved_word,
)


def normalize_identifier(raw: str) -> str:
    """Turn scraped text into a lowerCamelCase identifier for generated code.

    The stages run in a fixed order: control characters are stripped, newlines
    and whitespace runs collapse to single spaces, then space, snake and kebab
    case are folded into camel case in that order. Question marks are dropped
    and reserved words get a trailing apostrophe. Never raises; the empty
    string maps to itself.
    """
    identifier = raw
    for stage in _PIPELINE:
        identifier = stage(identifier)
    return identifier


__all__ = [
    "RESERVED_WORDS",
    "camel_case_to_pascal_case",
    "capitalize_first",
    "escape_reserved_word",
    "kebab_case_to_camel_case",
    "lower_first",
    "normalize_identifier",
    "normalize_whitespace",
    "remove_control_characters",
    "remove_question_marks",
    "replace_newline_with_space",
    "snake_case_to_camel_case",
    "space_case_to_camel_case",
    "trim_empty_lines",
]
