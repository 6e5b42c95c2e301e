"""Buffered output sink for the lstree command line.

Rendered lines are collected in memory and written in a single flush when the
writer is closed, including when the block using it exits with an exception.
"""

import errno
import os
import types
from pathlib import Path
from typing import List, Optional, Type, Union

from lstree.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware, buffered writer for a file descriptor or a file path.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or Path object for writing output.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False
        self._buffer: List[str] = []

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write_line(self, line: str) -> None:
        """Queue one line of output.

        Raises:
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        self._buffer.append(line + "\n")

    def flush(self) -> None:
        """Write all queued output.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If an I/O error occurs during writing.
        """
        if not self._buffer:
            return
        data = "".join(self._buffer).encode("utf-8")
        self._buffer.clear()

        if signal_handler.interrupted():
            raise BrokenPipeError()

        try:
            while data:
                written = os.write(self.fd, data)
                data = data[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Flush queued output and close the file if this writer opened it.

        The writer is marked closed even when flushing fails with a broken pipe.
        """
        if self._closed:
            return

        try:
            self.flush()
        except BrokenPipeError:
            pass
        finally:
            self._closed = True
            if self._file_obj is not None:
                try:
                    self._file_obj.close()
                except OSError as e:
                    if e.errno != errno.EPIPE:
                        raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, giving priority to an exception raised in the block."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
