# src/stylepack/core/walker.py
import os
from typing import List, Optional, Set

from stylepack.errors import DirectoryAccessError

def walk_files(root: str) -> List[str]:
    """
    Depth-first listing of every regular file under root.

    Entries are visited in directory-listing order (not sorted), so the result is
    only stable within a single run. Paths are built by joining onto root, which
    means a relative root yields relative paths.

    Any OS error aborts the whole walk with DirectoryAccessError.
    """
    root = os.fspath(root)
    if not os.path.isdir(root):
        # scandir() on a regular file gives a platform-dependent error; be explicit
        raise DirectoryAccessError(root, NotADirectoryError(f"not a directory: {root}"))

    try:
        return _walk(root, set())
    except OSError as e:
        raise DirectoryAccessError(e.filename or root, e) from e

def _walk(directory: str, visited: Set[str], buf: Optional[List[str]] = None) -> List[str]:
    if buf is None:
        buf = []

    # Symlinked directories can form cycles; never enter the same real directory twice
    real = os.path.realpath(directory)
    if real in visited:
        return buf
    visited.add(real)

    with os.scandir(directory) as entries:
        for entry in entries:
            path = os.path.join(directory, entry.name)
            if entry.is_dir():
                _walk(path, visited, buf)
            elif entry.is_file():
                buf.append(path)
    return buf
