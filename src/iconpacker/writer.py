"""SourceWriter: append-only text sink for one generated file.

Follows the StringBuilder shape (append / append_line, chaining) but
writes straight through to an open file instead of joining in memory,
so a generated enum with thousands of members never lives in RAM twice.

Thread Safety:
    A SourceWriter belongs to exactly one CodeGenerator run.
    Never share an instance between threads.

"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


class SourceWriter:
    """Sequential writer bound to a single destination file.

    Usage:
            >>> out = SourceWriter.open(tmp_dir / "VaadinIcon.java")
            >>> out.write_line("package com.example;")
            >>> out.close()

    Raises:
        OSError: From the underlying file on open, write or close

    """

    __slots__ = ("_stream", "_path", "_written")

    def __init__(self, stream: TextIO, path: Path | None = None) -> None:
        self._stream = stream
        self._path = path
        self._written = 0

    @classmethod
    def open(cls, path: str | Path) -> SourceWriter:
        """Create (or truncate) ``path`` and bind a writer to it."""
        path = Path(path)
        stream = path.open("w", encoding="utf-8", newline="\n")
        return cls(stream, path)

    @property
    def path(self) -> Path | None:
        """Destination file, if the writer was opened from a path."""
        return self._path

    @property
    def written(self) -> int:
        """Number of characters written so far."""
        return self._written

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def write(self, s: str) -> SourceWriter:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._stream.write(s)
            self._written += len(s)
        return self

    def write_line(self, s: str = "") -> SourceWriter:
        """Append a string followed by newline (empty = just newline)."""
        return self.write(s).write("\n")

    def write_lines(self, lines: list[str]) -> SourceWriter:
        """Append each string as its own line."""
        for line in lines:
            self.write_line(line)
        return self

    def close(self) -> None:
        """Flush and close the underlying stream. Idempotent."""
        if not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> SourceWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
