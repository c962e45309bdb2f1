"""Atomic writer for downloaded collection documents."""
import contextlib
import logging
import os
import tempfile
from pathlib import Path

from collection_fetch.core.errors import WriteError

logger = logging.getLogger(__name__)


def write_document(data: bytes, destination: Path) -> Path:
    """Write ``data`` verbatim to ``destination``.

    Bytes go to a temporary file in the destination directory which is then
    renamed over the target, so the destination either holds the complete
    payload or is left as it was.

    Args:
        data: Document bytes exactly as downloaded
        destination: Output file path; its directory must already exist

    Returns:
        The destination path

    Raises:
        WriteError: If the file cannot be written
    """
    destination = Path(destination)
    tmp_path = None

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.",
            suffix=".tmp",
            dir=destination.parent,
        )
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.chmod(0o644)
        tmp_path.replace(destination)
    except OSError as e:
        if tmp_path is not None:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
        raise WriteError(f"Cannot write {destination}: {e}") from e

    logger.info(f"Wrote {len(data)} bytes to {destination}")
    return destination
