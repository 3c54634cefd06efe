"""Java renderer.

Java enums cannot declare fields in the constructor signature and cannot
satisfy interface methods with fields, so this renderer relies on a
private final field, an explicit constructor and getter methods.

Output shape:
    package com.example;

    import com.vaadin.flow.component.icon.Icon;

    /**
     * Generated on 2024-01-31 12:00:00
     */
    public enum VaadinIcon implements IconFactory {
        THREE_D_ROTATE("3d-rotate"),
        ALARM("alarm");

        private final String iconName;

        VaadinIcon(String iconName) {
            this.iconName = iconName;
        }
        ...
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from iconpacker.renderers.protocol import INDENT, RendererCapabilities
from iconpacker.utils.text import getter_name

if TYPE_CHECKING:
    from iconpacker.config import PropertyDescriptor
    from iconpacker.writer import SourceWriter


# Backslash, quote and the control characters that would break a literal across lines
_JAVA_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})


def java_string(value: str) -> str:
    """Quote a value as a Java string literal."""
    escaped = value.translate(_JAVA_ESCAPES)
    return f'"{escaped}"'


class JavaRenderer:
    """Render icon enums as Java source."""

    __slots__ = ()

    name: ClassVar[str] = "java"
    capabilities: ClassVar[RendererCapabilities] = RendererCapabilities(
        file_extension=".java",
        supports_property_in_constructor=False,
        constructor_in_declaration=False,
        require_getters=True,
    )

    def open_file(self, out: SourceWriter, package_name: str) -> None:
        out.write_line(f"package {package_name};")

    def write_imports(self, out: SourceWriter, classes: list[str]) -> None:
        for class_name in classes:
            out.write_line(f"import {class_name};")

    def open_enum(
        self,
        out: SourceWriter,
        name: str,
        interfaces: list[str],
        icon_name_property: PropertyDescriptor,
        generated_on: str,
    ) -> None:
        out.write_lines(["/**", f" * Generated on {generated_on}", " */"])
        out.write(f"public enum {name} ")
        if interfaces:
            out.write(f"implements {', '.join(interfaces)} ")
        out.write_line("{")

    def write_constant(self, out: SourceWriter, constant: str, icon_name: str, last: bool) -> None:
        terminator = ";" if last else ","
        out.write_line(f"{INDENT}{constant}({java_string(icon_name)}){terminator}")

    def write_property(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        # Fields carry no override marker in Java
        initializer = f" = {java_string(value)}" if value is not None else ""
        out.write_line(f"{INDENT}private final {type_name} {name}{initializer};")

    def write_getter(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        self.open_method(out, getter_name(name), override, type_name)
        returned = java_string(value) if value is not None else f"this.{name}"
        out.write_line(f"{INDENT}{INDENT}return {returned};")
        self.close_method(out)

    def write_constructor(
        self, out: SourceWriter, class_name: str, icon_name_property: PropertyDescriptor
    ) -> None:
        prop = icon_name_property.name
        out.write_lines(
            [
                f"{INDENT}{class_name}(String {prop}) {{",
                f"{INDENT}{INDENT}this.{prop} = {prop};",
                f"{INDENT}}}",
            ]
        )

    def open_method(self, out: SourceWriter, name: str, override: bool, return_type: str) -> None:
        if override:
            out.write_line(f"{INDENT}@Override")
        out.write_line(f"{INDENT}public {return_type} {name}() {{")

    def write_create_body(
        self, out: SourceWriter, type_name: str, set_name: str, icon_name_property: str
    ) -> None:
        out.write_line(
            f"{INDENT}{INDENT}return new {type_name}({java_string(set_name)}, this.{icon_name_property});"
        )

    def close_method(self, out: SourceWriter) -> None:
        out.write_line(f"{INDENT}}}")

    def close_enum(self, out: SourceWriter) -> None:
        out.write("}")
