"""Iteration over the entry names of a directory."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator


class DirectoryIterator:
    """Yield the names in a directory, including ``.`` and ``..``.

    The directory is opened on construction and closed when iteration ends,
    on ``close()``, or on leaving a ``with`` block.
    """

    def __init__(self, path) -> None:
        self._entries = None
        path = os.fspath(path)
        nul, dot = ("\0", ".") if isinstance(path, str) else (b"\0", b".")
        if nul in path:
            raise ValueError(f"Invalid path: {path!r} contains a nul byte")
        self.path = path
        try:
            self._entries = os.scandir(path)
        except OSError as err:
            raise OSError(err.errno, f"Could not open {path!r}") from err
        self._special: Iterator = iter((dot, dot + dot))

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self):
        if self._entries is None:
            raise StopIteration
        name = next(self._special, None)
        if name is not None:
            return name
        entry = next(self._entries, None)
        if entry is None:
            self.close()
            raise StopIteration
        return entry.name

    def close(self) -> None:
        """Close the directory; further iteration yields nothing."""
        if self._entries is not None:
            self._entries.close()
            self._entries = None

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


def main(argv=None) -> int:
    """List the current directory."""
    try:
        with DirectoryIterator(".") as entries:
            names = list(entries)
    except (OSError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print("files: [")
    for name in names:
        print(f"    {name!r},")
    print("]")
    return 0


if __name__ == "__main__":
    sys.exit(main())