"""EnumRenderer protocol: the emission primitives of one target language.

A renderer fixes the file extension, the capability flags and every piece
of syntax the generator emits. It never owns the output: each primitive
receives the run's SourceWriter as its first argument.

Example:
    from iconpacker.renderers.protocol import EnumRenderer

    def header(renderer: EnumRenderer, out: SourceWriter) -> None:
        renderer.open_file(out, "com.example")

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol

if TYPE_CHECKING:
    from iconpacker.config import PropertyDescriptor
    from iconpacker.writer import SourceWriter

# Four-space member indent shared by both target languages
INDENT = "    "


@dataclass(frozen=True, slots=True)
class RendererCapabilities:
    """What a target language can express; drives the generator's branches.

    Attributes:
        file_extension: Extension of generated files, including the dot
        supports_property_in_constructor: The icon name property is declared
            by the enum constructor itself, no separate field needed
        constructor_in_declaration: The constructor parameter list is part
            of the type declaration, no constructor body is emitted
        require_getters: Fields cannot satisfy interface members, so
            accessor methods are emitted instead of stored properties

    """

    file_extension: str
    supports_property_in_constructor: bool
    constructor_in_declaration: bool
    require_getters: bool


class EnumRenderer(Protocol):
    """Protocol for target-language renderers.

    Implementations are stateless. The built-in ``JavaRenderer`` and
    ``KotlinRenderer`` are the only variants.

    """

    name: ClassVar[str]
    capabilities: ClassVar[RendererCapabilities]

    def open_file(self, out: SourceWriter, package_name: str) -> None:
        """Write the package / namespace declaration."""
        ...

    def write_imports(self, out: SourceWriter, classes: list[str]) -> None:
        """Write one import statement per qualified class name."""
        ...

    def open_enum(
        self,
        out: SourceWriter,
        name: str,
        interfaces: list[str],
        icon_name_property: PropertyDescriptor,
        generated_on: str,
    ) -> None:
        """Write the doc comment and the enum declaration up to its opening brace.

        Args:
            out: Destination writer
            name: Enum type name
            interfaces: Unqualified interface names to implement
            icon_name_property: Used when the constructor is part of the declaration
            generated_on: Formatted generation timestamp

        """
        ...

    def write_constant(self, out: SourceWriter, constant: str, icon_name: str, last: bool) -> None:
        """Write one enum member; ``last`` selects the terminator."""
        ...

    def write_property(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        """Write a stored property, optionally with a fixed string value."""
        ...

    def write_getter(
        self,
        out: SourceWriter,
        name: str,
        override: bool,
        type_name: str,
        value: str | None = None,
    ) -> None:
        """Write an accessor returning the property or a fixed string value."""
        ...

    def write_constructor(
        self, out: SourceWriter, class_name: str, icon_name_property: PropertyDescriptor
    ) -> None:
        """Write a constructor assigning the icon name property."""
        ...

    def open_method(self, out: SourceWriter, name: str, override: bool, return_type: str) -> None:
        """Write a no-argument method signature up to its body."""
        ...

    def write_create_body(
        self, out: SourceWriter, type_name: str, set_name: str, icon_name_property: str
    ) -> None:
        """Write the body constructing an icon from the set and icon names."""
        ...

    def close_method(self, out: SourceWriter) -> None:
        """Write whatever ends a method opened by ``open_method``."""
        ...

    def close_enum(self, out: SourceWriter) -> None:
        """Write the closing brace of the enum."""
        ...
