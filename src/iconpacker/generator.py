"""CodeGenerator: the language-agnostic emission protocol.

A run is strictly sequential::

    start(config, dist_dir)
    write_icon(name, last=False)  # once per icon
    write_icon(name, last=True)   # final icon only
    end(config, set_name)

The generator owns the output stream for the whole run and delegates every
piece of syntax to its renderer. Which optional members get emitted is
decided here, from the renderer's capability flags.

State machine:
    IDLE --start--> OPEN --end--> CLOSED --start--> OPEN ...

Any failure while OPEN closes the stream and leaves the generator CLOSED.
The original exception propagates; a half-written file is left in place
and must be discarded by the caller.

Thread Safety:
    One CodeGenerator per run. Independent runs (different class names or
    destinations) can proceed concurrently, each with its own generator;
    renderers and configs are immutable and may be shared.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from pathlib import Path

from iconpacker.config import GenerationConfig
from iconpacker.errors import ConfigError, DuplicateConstantError, GeneratorStateError
from iconpacker.renderers import EnumRenderer, get_renderer
from iconpacker.renderers.protocol import RendererCapabilities
from iconpacker.utils.files import copy_into, package_path
from iconpacker.utils.logger import get_logger
from iconpacker.utils.text import class_name_of, constant_name, package_of
from iconpacker.writer import SourceWriter

logger = get_logger(__name__)

GENERATED_HEADER = (
    "// DO NOT EDIT THIS FILE!\n"
    "// This file was generated by icon-packer. To update your icon set\n"
    "// run the icon-packer script again.\n"
)

# Type of the icon name and icon set name properties in every target language
STRING_TYPE = "String"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class GeneratorState(Enum):
    """Lifecycle of a CodeGenerator."""

    IDLE = "idle"
    OPEN = "open"
    CLOSED = "closed"


def format_generated_on(moment: datetime) -> str:
    """Format the timestamp embedded in the enum's doc comment."""
    return moment.strftime(TIMESTAMP_FORMAT)


def resolve_imports(config: GenerationConfig) -> list[str]:
    """Compute the import list for a generated enum.

    The configured interfaces, plus the icon class when a create function
    is configured, minus anything living in the target package itself and
    unqualified names, which cannot be imported.

    Example:
        >>> config = GenerationConfig.from_dict({
        ...     "className": "Icons",
        ...     "package": "com.example",
        ...     "interfaces": ["com.example.Named", "com.vaadin.IconFactory"],
        ...     "iconNameProperty": "iconName",
        ... })
        >>> resolve_imports(config)
        ['com.vaadin.IconFactory']
    """
    imports = list(config.interfaces)
    if config.create_function is not None:
        imports.append(config.icon_class)
    return [name for name in imports if package_of(name) not in ("", config.package)]


class CodeGenerator:
    """Drive one renderer through the start / write_icon / end protocol.

    Usage:
        >>> gen = CodeGenerator("kotlin")
        >>> gen.start(config, dist_dir)
        >>> gen.write_icon("3d-rotate", last=False)
        >>> gen.write_icon("alarm", last=True)
        >>> gen.end(config, "vaadin")

    Args:
        renderer: Language name or renderer instance
        clock: Returns the generation timestamp (defaults to ``datetime.now``)

    Raises:
        ConfigError: If the renderer name is unknown

    """

    __slots__ = ("_renderer", "_clock", "_out", "_state", "_constants", "_terminated")

    def __init__(
        self,
        renderer: str | EnumRenderer = "java",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._renderer = get_renderer(renderer)
        self._clock = clock or datetime.now
        self._out: SourceWriter | None = None
        self._state = GeneratorState.IDLE
        # constant -> icon name that produced it, for the current run
        self._constants: dict[str, str] = {}
        self._terminated = False

    @property
    def renderer(self) -> EnumRenderer:
        return self._renderer

    @property
    def capabilities(self) -> RendererCapabilities:
        return self._renderer.capabilities

    @property
    def state(self) -> GeneratorState:
        return self._state

    def output_filename(self, class_name: str) -> str:
        """File name generated for ``class_name`` by this renderer."""
        return class_name + self.capabilities.file_extension

    def start(self, config: GenerationConfig, destination_dir: str | Path) -> Path:
        """Open the output file and write everything up to the first member.

        Args:
            config: Generation configuration
            destination_dir: Existing, writable directory for the file

        Returns:
            Path of the file being generated

        Raises:
            GeneratorStateError: If a run is already open
            OSError: If the file cannot be created or written

        """
        self._require("start", GeneratorState.IDLE, GeneratorState.CLOSED)

        path = Path(destination_dir) / self.output_filename(config.class_name)
        self._out = SourceWriter.open(path)
        self._state = GeneratorState.OPEN
        self._constants = {}
        self._terminated = False
        logger.debug("Opened %s for %s renderer", path, self._renderer.name)

        with self._failure_guard():
            out = self._out
            out.write(GENERATED_HEADER)
            self._renderer.open_file(out, config.package)
            out.write_line()

            imports = resolve_imports(config)
            if imports:
                self._renderer.write_imports(out, imports)
                out.write_line()

            self._renderer.open_enum(
                out,
                config.class_name,
                config.interface_names,
                config.icon_name_property,
                format_generated_on(self._clock()),
            )
        return path

    def write_icon(self, icon_name: str, last: bool = False) -> str:
        """Emit one enum member for ``icon_name``.

        Args:
            icon_name: Original icon name, kept verbatim as the member's value
            last: True for the final member only

        Returns:
            The constant identifier that was emitted

        Raises:
            GeneratorStateError: Outside an open run, or after the last member
            IconNameError: If no constant can be derived from the name
            DuplicateConstantError: If another icon already produced the constant

        """
        self._require("write_icon", GeneratorState.OPEN)
        if self._terminated:
            raise GeneratorStateError(
                "write_icon", self._state.value, "the last member was already written"
            )

        with self._failure_guard():
            constant = constant_name(icon_name)
            first = self._constants.get(constant)
            if first is not None:
                raise DuplicateConstantError(constant, first, icon_name)
            self._constants[constant] = icon_name

            self._renderer.write_constant(self._out, constant, icon_name, last)
            self._terminated = last
        return constant

    def end(self, config: GenerationConfig, set_name: str) -> Path:
        """Write the supporting members, close the enum and the file.

        Args:
            config: The configuration passed to ``start``
            set_name: Icon set name, fixed into the set name property and
                the create function

        Returns:
            Path of the completed file

        Raises:
            GeneratorStateError: Outside an open run, or before the last member
            OSError: If writing or closing the file fails

        """
        self._require("end", GeneratorState.OPEN)
        if not self._terminated:
            raise GeneratorStateError(
                "end", self._state.value, "no member was written with last=True"
            )

        caps = self.capabilities
        renderer = self._renderer
        out = self._out
        icon_name = config.icon_name_property
        set_name_property = config.icon_set_name_property
        members: list[Callable[[], None]] = []

        if not caps.supports_property_in_constructor:
            members.append(
                lambda: renderer.write_property(out, icon_name.name, icon_name.override, STRING_TYPE)
            )

        if not caps.require_getters and set_name_property is not None:
            members.append(
                lambda: renderer.write_property(
                    out, set_name_property.name, set_name_property.override, STRING_TYPE, set_name
                )
            )

        if not caps.constructor_in_declaration:
            members.append(lambda: renderer.write_constructor(out, config.class_name, icon_name))

        if caps.require_getters:
            members.append(
                lambda: renderer.write_getter(out, icon_name.name, icon_name.override, STRING_TYPE)
            )
            if set_name_property is not None:
                members.append(
                    lambda: renderer.write_getter(
                        out,
                        set_name_property.name,
                        set_name_property.override,
                        STRING_TYPE,
                        set_name,
                    )
                )

        if config.create_function is not None:
            members.append(lambda: self._write_create_function(config, set_name))

        with self._failure_guard():
            for member in members:
                out.write_line()
                member()
            renderer.close_enum(out)
            out.write_line()
            out.close()

        self._state = GeneratorState.CLOSED
        logger.info(
            "Generated %s with %d icons (%d trailing members)",
            out.path,
            len(self._constants),
            len(members),
        )
        return out.path

    def copy_to_sources(
        self,
        dist_dir: str | Path,
        sources_root: str | Path,
        package_name: str,
        class_name: str,
    ) -> Path:
        """Copy a generated file into its package directory under ``sources_root``.

        ``com.example.icons`` resolves to ``<sources_root>/com/example/icons``,
        created if missing.

        Returns:
            Path of the copy

        Raises:
            OSError: If the directory cannot be created or the copy fails

        """
        source = Path(dist_dir) / self.output_filename(class_name)
        target = copy_into(source, package_path(sources_root, package_name))
        logger.info("Copied %s to %s", source.name, target.parent)
        return target

    def _write_create_function(self, config: GenerationConfig, set_name: str) -> None:
        create = config.create_function
        icon_type = class_name_of(config.icon_class)
        self._renderer.open_method(self._out, create.name, create.override, icon_type)
        self._renderer.write_create_body(
            self._out, icon_type, set_name, config.icon_name_property.name
        )
        self._renderer.close_method(self._out)

    def _require(self, operation: str, *allowed: GeneratorState) -> None:
        if self._state not in allowed:
            raise GeneratorStateError(operation, self._state.value)

    @contextmanager
    def _failure_guard(self) -> Iterator[None]:
        try:
            yield
        except BaseException:
            self._abort()
            raise

    def _abort(self) -> None:
        out = self._out
        self._state = GeneratorState.CLOSED
        if out is not None and not out.closed:
            try:
                out.close()
            except OSError:
                logger.warning("Failed to close %s after an aborted run", out.path)
        logger.debug("Aborted generation of %s", out.path if out else None)


def generate_icon_enum(
    config: GenerationConfig,
    icons: Iterable[str],
    set_name: str,
    destination_dir: str | Path | None = None,
    *,
    renderer: str | EnumRenderer = "java",
    sources_root: str | Path | None = None,
    clock: Callable[[], datetime] | None = None,
) -> Path:
    """Generate one icon enum file from a list of icon names.

    Runs start, write_icon for each icon (``last`` on the final one) and
    end, then optionally copies the file into ``sources_root``.

    Args:
        config: Generation configuration
        icons: Icon names, in member order
        set_name: Icon set name
        destination_dir: Output directory (defaults to ``config.output_dir``)
        renderer: Target language name or renderer instance
        sources_root: When given, also copy the file into its package directory
        clock: Timestamp source for the doc comment

    Returns:
        Path of the generated file (the copy, when ``sources_root`` is given)

    Raises:
        ConfigError: No icons, or no destination directory
        OSError: If a file cannot be written or copied

    """
    icons = list(icons)
    if not icons:
        raise ConfigError("at least one icon is required", "icons")

    if destination_dir is None:
        destination_dir = config.output_dir
    if destination_dir is None:
        raise ConfigError("no destination directory given", "output_dir")

    generator = CodeGenerator(renderer, clock=clock)
    generator.start(config, destination_dir)
    last_index = len(icons) - 1
    for index, icon in enumerate(icons):
        generator.write_icon(icon, last=index == last_index)
    path = generator.end(config, set_name)

    if sources_root is not None:
        path = generator.copy_to_sources(
            destination_dir, sources_root, config.package, config.class_name
        )
    return path
