# src/stylepack/core/selector.py
from typing import Iterable, List, Optional

import pathspec

from stylepack.core.ignore import is_path_ignored

def select_files(
    paths: Iterable[str],
    extension: str,
    destination: str,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    root: Optional[str] = None,
) -> List[str]:
    """
    Keeps the paths that end with `extension` and do not contain `destination`.

    The suffix test is a plain, case-sensitive string comparison. The destination
    check is a substring test so the output file is never read back into itself,
    even when it sits in the scanned tree. Input order is preserved.
    """
    selected = []
    for path in paths:
        if not path.endswith(extension):
            continue
        if destination in path:
            continue
        if is_path_ignored(path, ignore_spec, root):
            continue
        selected.append(path)
    return selected
