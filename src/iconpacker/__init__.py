"""
iconpacker: icon-name enum generator for Java and Kotlin

Renders a list of icon names into one source file defining an enum whose
members map a constant identifier to the original icon name. The enum can
implement interfaces and expose an icon-construction method.

Quick Start:
    >>> from iconpacker import GenerationConfig, generate_icon_enum
    >>> config = GenerationConfig.from_dict({
    ...     "className": "VaadinIcon",
    ...     "package": "com.example.icons",
    ...     "interfaces": ["com.vaadin.flow.component.icon.IconFactory"],
    ...     "iconNameProperty": {"name": "iconName"},
    ...     "createFunction": {"name": "create", "override": True},
    ... })
    >>> generate_icon_enum(config, ["3d-rotate", "alarm"], "vaadin", "dist")
    PosixPath('dist/VaadinIcon.java')

    >>> # Step by step, e.g. while streaming icon names
    >>> from iconpacker import CodeGenerator
    >>> gen = CodeGenerator("kotlin")
    >>> gen.start(config, "dist")
    >>> gen.write_icon("alarm", last=True)
    >>> gen.end(config, "vaadin")
"""

from iconpacker.config import DEFAULT_ICON_CLASS, GenerationConfig, PropertyDescriptor
from iconpacker.errors import (
    ConfigError,
    DuplicateConstantError,
    GeneratorStateError,
    IconNameError,
    IconPackerError,
)
from iconpacker.generator import (
    GENERATED_HEADER,
    CodeGenerator,
    GeneratorState,
    generate_icon_enum,
    resolve_imports,
)
from iconpacker.renderers import (
    RENDERERS,
    EnumRenderer,
    JavaRenderer,
    KotlinRenderer,
    RendererCapabilities,
    get_renderer,
)
from iconpacker.utils.text import constant_name, to_constant_case
from iconpacker.writer import SourceWriter

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ICON_CLASS",
    "GENERATED_HEADER",
    "RENDERERS",
    "CodeGenerator",
    "ConfigError",
    "DuplicateConstantError",
    "EnumRenderer",
    "GenerationConfig",
    "GeneratorState",
    "GeneratorStateError",
    "IconNameError",
    "IconPackerError",
    "JavaRenderer",
    "KotlinRenderer",
    "PropertyDescriptor",
    "RendererCapabilities",
    "SourceWriter",
    "__version__",
    "constant_name",
    "generate_icon_enum",
    "get_renderer",
    "resolve_imports",
    "to_constant_case",
]
