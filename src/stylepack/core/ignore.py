# src/stylepack/core/ignore.py
import sys
from pathlib import Path
from typing import Optional
import pathspec

from stylepack.errors import IgnoreFileError

def load_ignore_spec(ignore_file: Path) -> Optional[pathspec.PathSpec]:
    """
    Loads gitwildmatch rules from an ignore file (e.g. .minifyignore).
    Returns None when the file is missing or holds no rules, so callers can skip matching.
    An unreadable file is fatal.
    """
    if not ignore_file.is_file():
        return None

    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(str(ignore_file), e) from e

    if not any(line.strip() and not line.lstrip().startswith("#") for line in lines):
        return None

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception as e:
        print(f"Warning: ignoring invalid rules in '{ignore_file.name}': {e}", file=sys.stderr)
        return None

def is_path_ignored(path: str, spec: Optional[pathspec.PathSpec], root: Optional[str] = None) -> bool:
    """Matches path against spec, relative to root when given."""
    if spec is None:
        return False
    rel = Path(path)
    if root is not None:
        try:
            rel = rel.relative_to(root)
        except ValueError:
            pass
    return spec.match_file(rel.as_posix())
