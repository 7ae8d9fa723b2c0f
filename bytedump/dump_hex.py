"""Provides the dump_as_hex function, which dumps a region of a ByteSource
   as rows of 8 hex bytes followed by their ASCII representation, along
   with wrappers for dumping bytes, streams and buffers.

   Rows look like this (the last row is only padded on the hex side):

   30 31 32 00 01 1e 1f 34     0 1 2 . . . . 4
   35 36                       5 6
"""

from typing import Callable, Union

from bytedump.byte_source import ArraySource, BufferSource, ByteSource, StreamSource
from bytedump.log import log as default_log

BYTES_PER_ROW = 8
COLUMN_GAP = '    '
HEX_FILLER = '   '


class InvalidRegionError(ValueError):
    """Exception which is raised when asked to dump a negative region."""

    def __init__(self, offset: int, end: int) -> None:
        super().__init__(offset, end)
        self.offset = offset
        self.end = end

    def __str__(self) -> str:
        return f'Invalid region: offset {self.offset} end {self.end}'


def hex_token(byte: int) -> str:
    """Returns the 2 digit lowercase hex for a byte, followed by a space."""
    return f'{byte & 0xff:02x} '


def ascii_token(byte: int) -> str:
    """Returns the printable character for a byte followed by a space.
       Space, DEL and anything outside of 7-bit ASCII show up as a dot.
    """
    byte &= 0xff
    if 32 < byte < 127:
        return chr(byte) + ' '
    return '. '


def dump_as_hex(source: ByteSource, offset: int, end: int) -> str:
    """Dumps the bytes from index offset up to (but not including) index end.

       end is an absolute index, not a count. The number of full rows is
       worked out from end - offset, so dumping from a non-zero offset lines
       the rows up with the offset rather than with index 0.

       Any SourceReadError raised by source is passed straight through and
       nothing is returned.
    """
    if offset < 0 or end < 0:
        raise InvalidRegionError(offset, end)
    out = []
    pos = offset
    rows = max(end - offset, 0) // BYTES_PER_ROW

    for _ in range(rows):
        out.extend(hex_token(source.get(k)) for k in range(pos, pos + BYTES_PER_ROW))
        out.append(COLUMN_GAP)
        for _ in range(BYTES_PER_ROW):
            out.append(ascii_token(source.get(pos)))
            pos += 1
        out.append('\n')

    # Remaining bytes, which make up a partial row
    remain = max(end - pos, 0)
    out.extend(hex_token(source.get(k)) for k in range(pos, end))
    out.append(HEX_FILLER * (BYTES_PER_ROW - remain))
    out.append(COLUMN_GAP)
    out.extend(ascii_token(source.get(k)) for k in range(pos, end))
    if remain > 0:
        out.append('\n')
    return ''.join(out)


def dump_bytes(buf, offset: int = 0, end: Union[int, None] = None) -> str:
    """Dumps bytes, a bytearray, an array.array or a list of ints.
       end defaults to the length of buf.
    """
    if end is None:
        end = len(buf)
    return dump_as_hex(ArraySource(buf), offset, end)


def dump_stream(stream, offset: int = 0, end: Union[int, None] = None) -> str:
    """Dumps a seekable binary stream. end defaults to the current stream
       position, which for a buffer being written to is everything written
       so far.
    """
    if end is None:
        end = stream.tell()
    return dump_as_hex(StreamSource(stream), offset, end)


def dump_buffer(view, offset: int = 0, end: Union[int, None] = None) -> str:
    """Dumps a fixed size buffer such as a memoryview. end defaults to the
       capacity of the buffer, since a memoryview has no write position to
       stop at. Pass end to dump only the part that has been filled.
    """
    source = BufferSource(view)
    if end is None:
        end = len(source)
    return dump_as_hex(source, offset, end)


def log_hex(text: str,
            prefix: str = '',
            log: Callable[..., None] = default_log) -> None:
    """Sends each line of a dump produced by dump_as_hex to log."""
    if len(prefix) > 0:
        prefix += ':'
    # A dump always ends with the hex padding, which is blank when the data
    # was a multiple of the row size.
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        log(prefix + 'No data')
        return
    for line in lines:
        if prefix:
            log(prefix, line)
        else:
            log(line)
