"""Transient local files for downloaded images."""

import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from exam_bot.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def scratch_file(suffix: str = ".jpg", directory: Path | None = None) -> Iterator[Path]:
    """
    Reserve a scratch file path that is removed on exit, success or failure.

    Args:
        suffix: File extension
        directory: Where to create the file (system temp dir if None)

    Yields:
        Path to an empty file owned by the caller
    """
    try:
        if directory is not None:
            directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(suffix=suffix, dir=directory, delete=False) as temp_file:
            temp_path = Path(temp_file.name)
    except OSError as e:
        raise StorageError(f"failed to create scratch file: {e}") from e

    try:
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)
        logger.debug(f"Removed scratch file {temp_path}")


def read_scratch(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise StorageError(f"failed to read scratch file {path}: {e}") from e
