# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True, frozen=True)
class RegularPropOverload:
    params_code: str
    value_code: str


@dataclass(slots=True, frozen=True)
class EnumPropOverload:
    method_name: str
    value_code: str


@dataclass(slots=True, frozen=True)
class Prop:
    real_prop_name: str
    method_name: str


@dataclass(slots=True, frozen=True)
class Component:
    method_name: str
    import_selector: str
    import_path: str


class Primitives(Protocol):
    """The binding-generation constructors the safe builders delegate to.

    Implementations receive arguments that are already valid identifiers and
    literal tokens; what they build from them is up to the caller.
    """

    def regular_prop_overload(self, params_code: str, value_code: str) -> Any: ...

    def enum_prop_overload(self, method_name: str, value_code: str) -> Any: ...

    def prop(self, real_prop_name: str, method_name: str) -> Any: ...

    def component_import_selector(
        self, method_name: str, import_selector: str, import_path: str
    ) -> Any: ...


class RecordPrimitives:
    """Default primitives: build plain records for an emitter to render."""

    def regular_prop_overload(
        self, params_code: str, value_code: str
    ) -> RegularPropOverload:
        return RegularPropOverload(params_code=params_code, value_code=value_code)

    def enum_prop_overload(self, method_name: str, value_code: str) -> EnumPropOverload:
        return EnumPropOverload(method_name=method_name, value_code=value_code)

    def prop(self, real_prop_name: str, method_name: str) -> Prop:
        return Prop(real_prop_name=real_prop_name, method_name=method_name)

    def component_import_selector(
        self, method_name: str, import_selector: str, import_path: str
    ) -> Component:
        return Component(
            method_name=method_name,
            import_selector=import_selector,
            import_path=import_path,
        )


@dataclass(slots=True, frozen=True)
class ComponentUrlPath:
    name: str
    url: str


@dataclass(slots=True)
class RefreshConfig:
    timeout: float | None = 30.0


__all__ = [
    "RegularPropOverload",
    "EnumPropOverload",
    "Prop",
    "Component",
    "Primitives",
    "RecordPrimitives",
    "ComponentUrlPath",
    "RefreshConfig",
]
