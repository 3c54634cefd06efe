"""Filesystem helpers for placing generated files into a source tree."""

from __future__ import annotations

import shutil
from pathlib import Path


def package_path(sources_root: str | Path, package_name: str) -> Path:
    """Map a dotted package name onto a directory under ``sources_root``.

    >>> package_path("src/main/java", "com.example.icons").as_posix()
    'src/main/java/com/example/icons'
    """
    segments = [segment for segment in package_name.split(".") if segment]
    return Path(sources_root).joinpath(*segments)


def copy_into(source: str | Path, target_dir: str | Path) -> Path:
    """Copy ``source`` into ``target_dir``, creating the directory first.

    Returns:
        Path of the copied file

    Raises:
        OSError: If the directory cannot be created or the copy fails
    """
    source = Path(source)
    target_dir = Path(target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / source.name
    shutil.copyfile(source, target)
    return target
