"""Utility modules for iconpacker.

Provides:
- text: constant_name, to_constant_case, getter_name, class/package splitting
- files: package_path, copy_into for source-tree placement
- logger: get_logger for logging
"""

from iconpacker.utils.files import copy_into, package_path
from iconpacker.utils.logger import get_logger
from iconpacker.utils.text import (
    DIGIT_PREFIXES,
    class_name_of,
    constant_name,
    getter_name,
    package_of,
    to_constant_case,
)

__all__ = [
    "DIGIT_PREFIXES",
    "class_name_of",
    "constant_name",
    "copy_into",
    "get_logger",
    "getter_name",
    "package_of",
    "package_path",
    "to_constant_case",
]
