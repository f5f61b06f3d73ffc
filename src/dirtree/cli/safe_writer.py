"""Safe output writing utilities for dirtree CLI."""

import errno
import os
import types
from typing import Optional, Type

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for a file descriptor.

    Text is encoded as UTF-8 and written straight to the descriptor, so each tree line
    reaches the terminal or pipe as soon as it is rendered. A closed pipe surfaces as
    ``BrokenPipeError`` for the caller to stop on.

    Attributes:
        fd (int): The file descriptor being written to.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: File descriptor to write to, normally ``sys.stdout.fileno()``.

        Raises:
            TypeError: If fd is not an int.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected int file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self._closed = False

    def write(self, data: str) -> None:
        """Write data, checking for interruption first.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8", errors="surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Mark the writer closed. The descriptor itself belongs to the caller."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
