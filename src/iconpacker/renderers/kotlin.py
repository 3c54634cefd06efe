"""Kotlin renderer.

The icon name property is declared in the primary constructor of the
enum class, properties can implement interface members directly, and the
create function is expression-bodied. No getters or constructor bodies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from iconpacker.renderers.protocol import INDENT, RendererCapabilities

if TYPE_CHECKING:
    from iconpacker.config import PropertyDescriptor
    from iconpacker.writer import SourceWriter


_KOTLIN_ESCAPES = str.maketrans(
    {"\\": "\\\\", '"': '\\"', "$": "\\$", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
)


def kotlin_string(value: str) -> str:
    """Quote a value as a Kotlin string literal (``$`` starts a template)."""
    escaped = value.translate(_KOTLIN_ESCAPES)
    return f'"{escaped}"'


def _modifier(override: bool) -> str:
    return "override " if override else ""


class KotlinRenderer:
    """Render icon enums as Kotlin source."""

    __slots__ = ()

    name: ClassVar[str] = "kotlin"
    capabilities: ClassVar[RendererCapabilities] = RendererCapabilities(
        file_extension=".kt",
        supports_property_in_constructor=True,
        constructor_in_declaration=True,
        require_getters=False,
    )

    def open_file(self, out: SourceWriter, package_name: str) -> None:
        out.write_line(f"package {package_name}")

    def write_imports(self, out: SourceWriter, classes: list[str]) -> None:
        for class_name in classes:
            out.write_line(f"import {class_name}")

    def open_enum(
        self,
        out: SourceWriter,
        name: str,
        interfaces: list[str],
        icon_name_property: PropertyDescriptor,
        generated_on: str,
    ) -> None:
        out.write_lines(["/**", f" * Generated on {generated_on}", " */"])
        prop = icon_name_property
        out.write(f"enum class {name}({_modifier(prop.override)}val {prop.name}: String) ")
        if interfaces:
            out.write(f": {', '.join(interfaces)} ")
        out.write_line("{")

    def write_constant(self, out: SourceWriter, constant: str, icon_name: str, last: bool) -> None:
        terminator = ";" if last else ","
        out.write_line(f"{INDENT}{constant}({kotlin_string(icon_name)}){terminator}")

    def write_property(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        initializer = f" = {kotlin_string(value)}" if value is not None else ""
        out.write_line(f"{INDENT}{_modifier(override)}val {name}: {type_name}{initializer}")

    def write_getter(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        # Properties are accessed directly
        pass

    def write_constructor(
        self, out: SourceWriter, class_name: str, icon_name_property: PropertyDescriptor
    ) -> None:
        # Primary constructor is part of open_enum
        pass

    def open_method(self, out: SourceWriter, name: str, override: bool, return_type: str) -> None:
        out.write(f"{INDENT}{_modifier(override)}fun {name}(): {return_type} = ")

    def write_create_body(
        self, out: SourceWriter, type_name: str, set_name: str, icon_name_property: str
    ) -> None:
        out.write_line(f"{type_name}({kotlin_string(set_name)}, this.{icon_name_property})")

    def close_method(self, out: SourceWriter) -> None:
        pass

    def close_enum(self, out: SourceWriter) -> None:
        out.write("}")
