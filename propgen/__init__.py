# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

r"""
Identifier normalization and safe builders for binding code generation.
"""

from .builders import (
    make_component,
    make_enum_overload,
    make_overload_from_expressions,
    make_prop,
)
from .models import (
    Component,
    ComponentUrlPath,
    EnumPropOverload,
    Primitives,
    Prop,
    RecordPrimitives,
    RefreshConfig,
    RegularPropOverload,
)
from .utils import RESERVED_WORDS, normalize_identifier

__all__ = [
    "normalize_identifier",
    "RESERVED_WORDS",
    "make_overload_from_expressions",
    "make_enum_overload",
    "make_prop",
    "make_component",
    "Primitives",
    "RecordPrimitives",
    "RegularPropOverload",
    "EnumPropOverload",
    "Prop",
    "Component",
    "ComponentUrlPath",
    "RefreshConfig",
]
