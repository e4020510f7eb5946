"""Writing generated artifacts to disk.

Three write disciplines exist and each artifact uses exactly one:

- ``write_file``: truncate and write. Used for every file dev-nerves owns.
- ``append_if_absent``: append unless a marker is already in the file.
  Used for the project's ``.gitignore``.
- ``append_file``: append unconditionally. Used for the WiFi block in
  ``config/target.exs``. Calling it twice appends twice; a re-run is
  blocked earlier by the project directory check.

Every ``OSError`` surfaces as ``FileSystemError``.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from dev_nerves.errors import FileSystemError

logger = logging.getLogger(__name__)


def create_directory(path: Path) -> None:
    """Create ``path`` and its parents. Existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"Could not create directory {path}: {e}", path) from e
    logger.debug("Ensured directory %s", path)


def write_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, replacing anything already there."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Could not write {path}: {e}", path) from e
    logger.debug("Wrote %s (%d bytes)", path, len(content))


def append_if_absent(path: Path, content: str, marker: str) -> bool:
    """Append ``content`` unless ``marker`` already occurs in the file.

    A missing file is left alone.

    Returns:
        True if the content was appended
    """
    if not path.exists():
        logger.debug("%s does not exist, nothing to merge", path)
        return False

    try:
        current = path.read_text(encoding="utf-8")
        if marker in current:
            logger.debug("%s already contains %r, skipping", path, marker)
            return False
        path.write_text(current + content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Could not update {path}: {e}", path) from e

    logger.debug("Appended %d bytes to %s", len(content), path)
    return True


def append_file(path: Path, content: str) -> None:
    """Append ``content`` to an existing file without any duplicate check."""
    try:
        current = path.read_text(encoding="utf-8")
        path.write_text(current + content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Could not append to {path}: {e}", path) from e
    logger.debug("Appended %d bytes to %s", len(content), path)


class WriteMode(Enum):
    """How an artifact reaches disk."""
    OVERWRITE = "overwrite"
    APPEND_IF_ABSENT = "append_if_absent"
    APPEND = "append"


def materialize(path: Path, content: str, mode: WriteMode, marker: Optional[str] = None) -> bool:
    """Write ``content`` to ``path`` using ``mode``.

    Returns:
        False if an ``APPEND_IF_ABSENT`` write was skipped, True otherwise
    """
    if mode is WriteMode.OVERWRITE:
        write_file(path, content)
        return True
    if mode is WriteMode.APPEND_IF_ABSENT:
        if marker is None:
            raise ValueError(f"{path}: APPEND_IF_ABSENT needs a marker")
        return append_if_absent(path, content, marker)
    append_file(path, content)
    return True
