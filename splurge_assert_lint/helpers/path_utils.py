"""Path validation and source file discovery.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import glob
import logging
import os
import platform
from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class PathValidationError(ValidationError):
    """Raised when path validation fails."""

    def __init__(self, message: str, path: str, validation_type: str = "path"):
        self.path = path
        self.validation_type = validation_type
        super().__init__(message, validation_type, field=path)


def validate_source_path(source_path: str | Path) -> Path:
    """Validate and normalize a source file path.

    Args:
        source_path: Path to validate (string or Path object)

    Returns:
        Normalized Path object

    Raises:
        PathValidationError: If the path is empty, too long for the
            platform, missing, or not a regular file.
    """
    try:
        path = Path(source_path)
        path_str = str(source_path)

        if not path_str.strip():
            raise PathValidationError("Source path cannot be empty", path_str, "empty_path")

        # Windows has a 260 character limit
        if len(path_str) > 260 and platform.system() == "Windows":
            raise PathValidationError(
                f"Path length exceeds Windows limit of 260 characters: {len(path_str)}", path_str, "path_length"
            )

        if not path.exists():
            raise PathValidationError(f"Source file not found: {path_str}", path_str, "not_found")
        if not path.is_file():
            raise PathValidationError(f"Source path is not a file: {path_str}", path_str, "not_a_file")

        return path

    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid path format: {e}", str(source_path), "path_format") from e


def _matches_any(path: Path, root: Path, patterns: list[str]) -> bool:
    relative = path.relative_to(root).as_posix()
    return any(fnmatch(path.name, pattern) or fnmatch(relative, pattern) for pattern in patterns)


def discover_files(
    paths: Iterable[str],
    file_patterns: list[str],
    recurse: bool = True,
    exclude_dirs: Iterable[str] = (),
) -> list[str]:
    """Expand files, directories and glob patterns into a list of files.

    Explicit files are always kept. Directories contribute the files whose
    name (or path relative to the directory) matches one of
    ``file_patterns``, descending into subdirectories when ``recurse`` is
    set and never into ``exclude_dirs``. Anything else is treated as a
    glob pattern. Order is preserved and duplicates are dropped.
    """
    excluded = set(exclude_dirs)
    found: list[str] = []

    for entry in paths:
        if os.path.isfile(entry):
            found.append(entry)
        elif os.path.isdir(entry):
            root = Path(entry)
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = sorted(d for d in dirnames if d not in excluded) if recurse else []
                for filename in sorted(filenames):
                    candidate = Path(dirpath) / filename
                    if _matches_any(candidate, root, file_patterns):
                        found.append(str(candidate))
        else:
            matched = sorted(p for p in glob.glob(entry, recursive=True) if os.path.isfile(p))
            if not matched:
                logger.warning("No files match %s", entry)
            found.extend(matched)

    seen: set[str] = set()
    unique: list[str] = []
    for file_path in found:
        if file_path not in seen:
            seen.add(file_path)
            unique.append(file_path)
    return unique
