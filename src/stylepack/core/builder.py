# src/stylepack/core/builder.py
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import pathspec

from stylepack.config import DEFAULT_DESTINATION_NAME, DEFAULT_EXTENSION
from stylepack.core.rules import RuleEngine
from stylepack.core.selector import select_files
from stylepack.core.walker import walk_files
from stylepack.errors import FileReadError, FileWriteError
from stylepack.models import BundleReport

def destination_path(folder: str, name: str) -> str:
    return os.path.join(os.fspath(folder), name)

def _read_and_minify(path: str, engine: RuleEngine) -> Tuple[int, str]:
    try:
        # Binary read keeps CRLF intact for the size count
        with open(path, "rb") as f:
            raw = f.read()
        content = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e
    return len(raw), engine.minify(content)

def minify_files(files: List[str], engine: RuleEngine, jobs: int = 1) -> List[Tuple[int, str]]:
    """
    Reads and minifies each file. Results come back in the order of `files`,
    whether or not a thread pool is used.
    """
    if jobs <= 1 or len(files) <= 1:
        return [_read_and_minify(path, engine) for path in files]
    with ThreadPoolExecutor(max_workers=min(jobs, len(files))) as pool:
        return list(pool.map(lambda p: _read_and_minify(p, engine), files))

def write_bundle(path: str, bundle: str) -> None:
    # Create + truncate; a missing destination is created
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(bundle)
    except OSError as e:
        raise FileWriteError(path, e) from e

def build_bundle(
    folder: str,
    name: str = DEFAULT_DESTINATION_NAME,
    extension: str = DEFAULT_EXTENSION,
    ignore_spec: Optional[pathspec.PathSpec] = None,
    jobs: int = 1,
    engine: Optional[RuleEngine] = None,
) -> BundleReport:
    """
    Minifies every `extension` file under `folder` into `folder/name`.

    The complete bundle is built in memory before the destination is opened, so a
    failed read leaves the previous destination content untouched.
    """
    folder = os.fspath(folder)
    destination = destination_path(folder, name)
    if engine is None:
        engine = RuleEngine.for_extension(extension)

    discovered = walk_files(folder)
    files = select_files(discovered, extension, destination, ignore_spec, root=folder)

    results = minify_files(files, engine, jobs)
    bundle = "".join(text for _, text in results)

    write_bundle(destination, bundle)

    return BundleReport(
        destination=destination,
        files=files,
        source_bytes=sum(size for size, _ in results),
        bundle_bytes=len(bundle.encode("utf-8")),
    )
