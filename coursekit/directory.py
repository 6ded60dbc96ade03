"""Iteration over the entries of a directory."""

from __future__ import annotations

import os
import sys
from typing import AnyStr, Generic


class DirectoryIterator(Generic[AnyStr]):
    """Yield every entry name of a directory, including ``.`` and ``..``."""

    def __init__(self, path: AnyStr | os.PathLike[AnyStr]) -> None:
        path = os.fspath(path)
        nul = b"\0" if isinstance(path, bytes) else "\0"
        if nul in path:
            raise ValueError(f"Invalid path: nul byte found in {path!r}")
        try:
            self._entries = os.scandir(path)
        except OSError as exc:
            raise OSError(exc.errno, f"Could not open {path!r}") from exc
        self.path = path
        dots = (b".", b"..") if isinstance(path, bytes) else (".", "..")
        self._dots = iter(dots)

    def __iter__(self) -> DirectoryIterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        for name in self._dots:
            return name
        return next(self._entries).name

    def close(self) -> None:
        """Release the directory handle; iteration then ends."""
        self._dots = iter(())
        self._entries.close()

    def __enter__(self) -> DirectoryIterator[AnyStr]:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """List the entries of a directory (the current one by default)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "."
    try:
        with DirectoryIterator(path) as entries:
            names = list(entries)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"files: {names!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())