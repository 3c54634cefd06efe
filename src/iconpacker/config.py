"""Generation configuration for iconpacker.

Immutable value objects describing one generated enum. A config is built
once by the caller (typically from a JSON file via ``from_dict``) and is
read-only for the whole start/write_icon/end run.

Thread Safety:
    Frozen dataclasses. Safe to share one config between concurrent runs.

Usage:
    from iconpacker.config import GenerationConfig

    config = GenerationConfig.from_dict({
        "className": "VaadinIcon",
        "package": "com.example.icons",
        "interfaces": ["com.vaadin.flow.component.icon.IconFactory"],
        "iconNameProperty": {"name": "iconName"},
        "createFunction": {"name": "create", "override": True},
    })

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from iconpacker.errors import ConfigError
from iconpacker.utils.text import class_name_of

# Icon construction type imported when a create function is configured
DEFAULT_ICON_CLASS = "com.vaadin.flow.component.icon.Icon"

# JSON configuration keys mapped onto dataclass fields
_CAMEL_CASE_KEYS = {
    "className": "class_name",
    "iconNameProperty": "icon_name_property",
    "iconSetNameProperty": "icon_set_name_property",
    "createFunction": "create_function",
    "outputDir": "output_dir",
    "iconClass": "icon_class",
}


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """A named member of the generated type.

    Used for the icon name property, the icon set name property and the
    create function.

    Attributes:
        name: Member name in the generated source
        override: Whether the member overrides an interface member and
            needs the target language's override marker

    """

    name: str
    override: bool = False

    @classmethod
    def from_value(cls, value: Any) -> PropertyDescriptor | None:
        """Coerce a descriptor, a bare name or a ``{"name", "override"}`` mapping.

        Returns None for None so optional members stay optional.
        """
        if value is None or isinstance(value, PropertyDescriptor):
            return value
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, Mapping):
            if "name" not in value:
                raise ConfigError("property descriptor requires a 'name'")
            return cls(name=value["name"], override=bool(value.get("override", False)))
        raise ConfigError(f"cannot build a property descriptor from {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Immutable description of one generated icon enum.

    Attributes:
        class_name: Name of the generated enum type (and file stem)
        package: Target package / namespace
        interfaces: Interfaces the enum implements, optionally package-qualified
        icon_name_property: Property holding each member's icon name
        icon_set_name_property: Optional property returning the icon set name
        create_function: Optional method constructing an icon object
        output_dir: Default destination directory for generated files
        icon_class: Qualified icon type imported for the create function

    Raises:
        ConfigError: If the values cannot describe a renderable enum

    """

    class_name: str
    package: str
    icon_name_property: PropertyDescriptor
    interfaces: tuple[str, ...] = ()
    icon_set_name_property: PropertyDescriptor | None = None
    create_function: PropertyDescriptor | None = None
    output_dir: Path | None = None
    icon_class: str = DEFAULT_ICON_CLASS

    def __post_init__(self) -> None:
        # Normalize loosely-typed inputs; frozen, so go through object.__setattr__
        object.__setattr__(self, "interfaces", tuple(self.interfaces or ()))
        for name in ("icon_name_property", "icon_set_name_property", "create_function"):
            object.__setattr__(self, name, PropertyDescriptor.from_value(getattr(self, name)))
        if self.output_dir is not None:
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        self._validate()

    def _validate(self) -> None:
        if not self.class_name or not self.class_name.isidentifier():
            raise ConfigError(f"'{self.class_name}' is not a valid type name", "class_name")

        if not self.package or not all(part.isidentifier() for part in self.package.split(".")):
            raise ConfigError(f"'{self.package}' is not a valid package name", "package")

        if self.icon_name_property is None or not self.icon_name_property.name:
            raise ConfigError("an icon name property is required", "icon_name_property")

        for field_name in ("icon_set_name_property", "create_function"):
            descriptor = getattr(self, field_name)
            if descriptor is not None and not descriptor.name:
                raise ConfigError("member name must not be empty", field_name)

        for interface in self.interfaces:
            if not interface or not class_name_of(interface):
                raise ConfigError(f"invalid interface name '{interface}'", "interfaces")

        if self.create_function is not None and not self.icon_class:
            raise ConfigError(
                "a create function needs an icon class to construct", "create_function"
            )

    @property
    def interface_names(self) -> list[str]:
        """Interface names without their package qualification."""
        return [class_name_of(interface) for interface in self.interfaces]

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> GenerationConfig:
        """Create GenerationConfig from a dictionary.

        Accepts snake_case field names and the camelCase keys of the JSON
        configuration format. Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values

        Returns:
            New GenerationConfig instance

        Raises:
            ConfigError: If a required key is missing or a value is invalid

        Example:
            >>> config = GenerationConfig.from_dict({
            ...     "className": "VaadinIcon",
            ...     "package": "com.example",
            ...     "iconNameProperty": "iconName",
            ... })
            >>> config.icon_name_property.name
            'iconName'

        """
        valid_fields = {f for f in cls.__dataclass_fields__}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            key = _CAMEL_CASE_KEYS.get(key, key)
            if key in valid_fields:
                filtered[key] = value

        missing = [f for f in ("class_name", "package", "icon_name_property") if f not in filtered]
        if missing:
            raise ConfigError(f"missing required key(s): {', '.join(missing)}")

        interfaces = filtered.get("interfaces")
        if interfaces is not None:
            filtered["interfaces"] = _as_tuple(interfaces)
        return cls(**filtered)


def _as_tuple(values: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(values)
