"""Identifier utilities for iconpacker.

Turns free-form icon names into constant identifiers that are legal in
every target language, and splits qualified type names.

Example:
    >>> from iconpacker.utils.text import constant_name
    >>> constant_name("3d-rotate")
    'THREE_D_ROTATE'
"""

from __future__ import annotations

import re

from iconpacker.errors import IconNameError

# Word prefixes for constants that would otherwise start with a digit.
DIGIT_PREFIXES: tuple[str, ...] = (
    "ZERO_",
    "ONE_",
    "TWO_",
    "THREE_",
    "FOUR_",
    "FIVE_",
    "SIX_",
    "SEVEN_",
    "EIGHT_",
    "NINE_",
)

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BREAK = re.compile(r"[^0-9A-Za-z]+")


def to_constant_case(text: str) -> str:
    """Convert text to CONSTANT_CASE.

    camelCase humps and every run of non-alphanumeric characters become
    word breaks. Words are joined with underscores and upper-cased.

    Args:
        text: Text to convert

    Returns:
        Upper-cased, underscore-separated identifier (may be empty)

    Examples:
        >>> to_constant_case("arrow-circle-up")
        'ARROW_CIRCLE_UP'
        >>> to_constant_case("fileTextO")
        'FILE_TEXT_O'
        >>> to_constant_case("HTMLFile")
        'HTML_FILE'
        >>> to_constant_case("--")
        ''
    """
    if not text:
        return ""

    text = _ACRONYM_WORD.sub(r"\1 \2", text)
    text = _LOWER_UPPER.sub(r"\1 \2", text)
    words = [word for word in _WORD_BREAK.split(text) if word]
    return "_".join(words).upper()


def constant_name(icon_name: str) -> str:
    """Derive the enum constant for an icon name.

    Applies :func:`to_constant_case`, then replaces a leading digit with
    its word prefix from :data:`DIGIT_PREFIXES`.

    Raises:
        IconNameError: If the icon name contains no letters or digits

    Examples:
        >>> constant_name("alarm")
        'ALARM'
        >>> constant_name("3d-rotate")
        'THREE_D_ROTATE'
        >>> constant_name("500px")
        'FIVE_00PX'
    """
    name = to_constant_case(icon_name)
    if not name:
        raise IconNameError(icon_name, "no letters or digits to build a constant from")
    if name[0].isdigit():
        name = DIGIT_PREFIXES[int(name[0])] + name[1:]
    return name


def class_name_of(qualified_name: str) -> str:
    """Return the simple type name of a possibly package-qualified name.

    >>> class_name_of("com.vaadin.flow.component.icon.IconFactory")
    'IconFactory'
    >>> class_name_of("IconFactory")
    'IconFactory'
    """
    return qualified_name.rpartition(".")[2]


def package_of(qualified_name: str) -> str:
    """Return the package part of a qualified name ('' when unqualified).

    >>> package_of("com.vaadin.flow.component.icon.Icon")
    'com.vaadin.flow.component.icon'
    """
    return qualified_name.rpartition(".")[0]


def getter_name(property_name: str) -> str:
    """Return the accessor method name for a property.

    >>> getter_name("iconName")
    'getIconName'
    """
    if not property_name:
        return "get"
    return "get" + property_name[0].upper() + property_name[1:]
