# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

"""Builders that only hand well-formed identifiers and literals to the
binding-generation primitives."""

from __future__ import annotations

import re
from typing import Any

from .models import Primitives, RecordPrimitives
from .utils import normalize_identifier

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_LITERAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")

_default_primitives = RecordPrimitives()


def in_parentheses(code: str) -> str:
    return f"({code})"


def in_quotes(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def parse_int32(value: str) -> int | None:
    """Return the value as an int if it is a base-10 32-bit integer, else None."""
    match = _INTEGER_LITERAL.fullmatch(value)
    if match is None:
        return None
    number = int(match.group(1))
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def enum_value_literal(value_code: str) -> str:
    number = parse_int32(value_code)
    if number is None:
        return in_quotes(value_code)
    return str(number)


def make_overload_from_expressions(
    params_code: str,
    value_code: str,
    *,
    primitives: Primitives | None = None,
) -> Any:
    """Create a regular prop overload from a parameter list and a value
    expression, each wrapped in parentheses."""
    if primitives is None:
        primitives = _default_primitives
    return primitives.regular_prop_overload(
        in_parentheses(params_code), in_parentheses(value_code)
    )


def make_enum_overload(
    method_name: str,
    value_code: str,
    *,
    primitives: Primitives | None = None,
) -> Any:
    """Create an enum prop overload.

    Integers are passed as bare decimal literals, anything else as a quoted
    string literal.
    """
    if primitives is None:
        primitives = _default_primitives
    return primitives.enum_prop_overload(
        normalize_identifier(method_name), enum_value_literal(value_code)
    )


def make_prop(
    real_prop_name: str,
    method_name: str,
    *,
    primitives: Primitives | None = None,
) -> Any:
    if primitives is None:
        primitives = _default_primitives
    return primitives.prop(real_prop_name, normalize_identifier(method_name))


def make_component(
    method_name: str,
    import_selector: str,
    import_path: str,
    *,
    primitives: Primitives | None = None,
) -> Any:
    if primitives is None:
        primitives = _default_primitives
    return primitives.component_import_selector(
        normalize_identifier(method_name), import_selector, import_path
    )


__all__ = [
    "make_overload_from_expressions",
    "make_enum_overload",
    "make_prop",
    "make_component",
    "enum_value_literal",
    "parse_int32",
]
