"""Exception classes for iconpacker.

Provides standardized exceptions for error handling throughout iconpacker.
Filesystem failures are not wrapped: ``OSError`` reaches the caller as-is.
"""

from __future__ import annotations


class IconPackerError(Exception):
    """Base exception for all iconpacker errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(IconPackerError):
    """Malformed or incomplete generation configuration.

    Raised before any file is opened, when a GenerationConfig cannot
    describe a renderable enum.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            field: Name of the offending config field (optional)
        """
        self.field = field
        prefix = f"{field}: " if field else ""
        super().__init__(f"{prefix}{message}")


class IconNameError(IconPackerError):
    """Icon name that cannot be turned into a constant identifier."""

    def __init__(self, icon_name: str, message: str) -> None:
        self.icon_name = icon_name
        super().__init__(f"Icon '{icon_name}': {message}")


class DuplicateConstantError(IconPackerError):
    """Two distinct icon names normalize to the same constant.

    Raised on the second occurrence; the enum would not compile.
    """

    def __init__(self, constant: str, first: str, second: str) -> None:
        """Initialize duplicate constant error.

        Args:
            constant: The colliding constant identifier
            first: Icon name that produced the constant first
            second: Icon name that collided with it
        """
        self.constant = constant
        self.first = first
        self.second = second
        super().__init__(
            f"Constant '{constant}' for icon '{second}' "
            f"was already emitted for icon '{first}'"
        )


class GeneratorStateError(IconPackerError):
    """Generator operation called outside the state that permits it."""

    def __init__(self, operation: str, state: str, message: str = "") -> None:
        self.operation = operation
        self.state = state
        detail = f": {message}" if message else ""
        super().__init__(f"Cannot {operation}() while generator is {state}{detail}")
