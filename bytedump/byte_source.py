"""This module provides the ByteSource protocol used by the hex dumper, the
   SourceReadError exception which is raised when a byte can't be read, and
   adapters for the common kinds of byte containers.

"""

from typing import Protocol, Union


class SourceReadError(Exception):
    """Exception which is raised when a source can't supply a byte."""

    def __init__(self, index: int, reason: Union[str, None] = None) -> None:
        super().__init__(index, reason)
        self.index = index
        self.reason = reason

    def get_index(self) -> int:
        """Retrieves the index of the byte which couldn't be read."""
        return self.index

    def __str__(self) -> str:
        msg = f'Unable to read byte at index {self.index}'
        if self.reason:
            msg += ': ' + self.reason
        return msg


class ByteSource(Protocol):
    """Anything which can return the byte at an absolute index."""

    def get(self, index: int) -> int:
        """Returns the byte at index, or raises SourceReadError."""


class ArraySource:
    """Reads bytes from bytes, bytearray, array.array or a list of ints."""

    def __init__(self, buf) -> None:
        self.buf = buf

    def __len__(self) -> int:
        return len(self.buf)

    def get(self, index: int) -> int:
        # Don't let python wrap negative indices around to the end
        if index < 0 or index >= len(self.buf):
            raise SourceReadError(index, f'out of range for length {len(self.buf)}')
        return self.buf[index] & 0xff


class StreamSource:
    """Reads bytes by position from a seekable binary stream, like an
       io.BytesIO being filled or a file opened in binary mode.

       The stream position is restored after every read, so dumping a
       buffer doesn't disturb whoever is writing into it.
    """

    def __init__(self, stream) -> None:
        self.stream = stream

    def get(self, index: int) -> int:
        if index < 0:
            raise SourceReadError(index, 'negative index')
        try:
            saved_pos = self.stream.tell()
            try:
                self.stream.seek(index)
                data = self.stream.read(1)
            finally:
                self.stream.seek(saved_pos)
        except (OSError, ValueError) as ex:
            raise SourceReadError(index, str(ex)) from ex
        if not data:
            raise SourceReadError(index, 'past the end of the stream')
        return data[0]


class BufferSource:
    """Reads bytes directly from the storage of a fixed sized buffer."""

    def __init__(self, view) -> None:
        # Use a byte formatted memoryview so that array.array('H') and
        # friends are indexed a byte at a time.
        self.view = memoryview(view).cast('B')

    def __len__(self) -> int:
        return self.view.nbytes

    def get(self, index: int) -> int:
        try:
            if index < 0 or index >= self.view.nbytes:
                raise SourceReadError(index, f'out of range for capacity {self.view.nbytes}')
            return self.view[index]
        except ValueError as ex:
            # Raised when the view has been released
            raise SourceReadError(index, str(ex)) from ex
