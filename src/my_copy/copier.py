"""Chunked file copy."""
import logging
import os

from my_copy.constants import BUFFER_SIZE, DESTINATION_MODE
from my_copy.exceptions import (
    CloseError,
    DestinationOpenError,
    ReadError,
    ShortWriteError,
    SourceOpenError,
    WriteError,
)
from my_copy.utils import close_quietly, log

L = logging.getLogger(__name__)

_DESTINATION_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC


def destination_exists(destination: os.PathLike) -> bool:
    """Return True if something already exists at the destination path."""
    return os.path.exists(destination)


@log
def copy_file(
    source: os.PathLike,
    destination: os.PathLike,
    *,
    buffer_size: int = BUFFER_SIZE,
    mode: int = DESTINATION_MODE,
) -> int:
    """Copy the bytes of source into destination.

    The destination is created with ``mode`` if missing, truncated otherwise. Data is
    moved through a single reusable buffer of ``buffer_size`` bytes. A write that stores
    fewer bytes than requested is treated as an error and is not retried.

    Both file descriptors are closed on every path. If the copy fails after the
    destination was opened, whatever was written so far is left in place.

    Args:
        source: Path of the file to read.
        destination: Path of the file to write.
        buffer_size: Maximum number of bytes moved per read/write cycle.
        mode: Permission bits for a newly created destination.

    Returns:
        The number of bytes copied.

    Raises:
        SourceOpenError, DestinationOpenError: If either file cannot be opened.
        ReadError, WriteError, ShortWriteError: If the transfer fails.
        CloseError: If either file cannot be closed afterwards.
    """
    if buffer_size < 1:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    buffer = bytearray(buffer_size)

    try:
        source_fd = os.open(source, os.O_RDONLY)
    except OSError as e:
        raise SourceOpenError(source) from e

    try:
        destination_fd = os.open(destination, _DESTINATION_FLAGS, mode)
    except OSError as e:
        close_quietly(source_fd)
        raise DestinationOpenError(destination) from e

    L.debug("Opened %s (fd %d) -> %s (fd %d)", source, source_fd, destination, destination_fd)

    try:
        total = _transfer(source_fd, destination_fd, source, destination, buffer)
    except BaseException:
        close_quietly(source_fd)
        close_quietly(destination_fd)
        raise

    try:
        os.close(source_fd)
    except OSError as e:
        close_quietly(destination_fd)
        raise CloseError(source, role="source") from e

    try:
        os.close(destination_fd)
    except OSError as e:
        # buffered data may not have reached the disk
        raise CloseError(destination, role="destination") from e

    L.info("Copied %d bytes from %s to %s", total, source, destination)
    return total


def _transfer(source_fd, destination_fd, source, destination, buffer):
    view = memoryview(buffer)

    total = 0
    while True:
        try:
            n_read = os.readv(source_fd, [buffer])
        except OSError as e:
            raise ReadError(source) from e

        if n_read == 0:
            break

        try:
            n_written = os.write(destination_fd, view[:n_read])
        except OSError as e:
            raise WriteError(destination) from e

        if n_written != n_read:
            raise ShortWriteError(destination, requested=n_read, written=n_written)

        total += n_written

    return total
