"""
BufferView - random-access reads over an immutable byte buffer

Every multi-byte read takes its byte order as an argument: the TIFF block
embedded in a JPEG decides its own endianness, independent of the file.
"""

import struct

from ..errors import OutOfRangeError


class BufferView:
    """
    Read-only view over a byte buffer with bounds-checked typed reads
    """

    def __init__(self, data):
        """
        Initialize BufferView

        Args:
            data: bytes, bytearray, memoryview, or BufferView
        """
        if isinstance(data, BufferView):
            self._data = data._data
        elif isinstance(data, (bytes, bytearray)):
            self._data = memoryview(data)
        elif isinstance(data, memoryview):
            self._data = data.cast("B") if data.format != "B" else data
        else:
            raise TypeError("Data must be bytes, bytearray, memoryview, or BufferView")

        self._length = len(self._data)

    @property
    def byte_length(self):
        """Total length of the view"""
        return self._length

    def __len__(self):
        return self._length

    def _check_bounds(self, offset, size):
        """Check if read is within bounds"""
        if offset < 0 or size < 0 or offset + size > self._length:
            raise OutOfRangeError(offset, size, self._length)

    def _unpack(self, fmt, offset, size, little_endian):
        self._check_bounds(offset, size)
        prefix = "<" if little_endian else ">"
        return struct.unpack_from(prefix + fmt, self._data, offset)[0]

    def get_uint8(self, offset):
        """Read unsigned 8-bit integer"""
        self._check_bounds(offset, 1)
        return self._data[offset]

    def get_int8(self, offset):
        """Read signed 8-bit integer"""
        val = self.get_uint8(offset)
        return val if val < 128 else val - 256

    def get_uint16(self, offset, little_endian=False):
        """Read unsigned 16-bit integer"""
        return self._unpack("H", offset, 2, little_endian)

    def get_int16(self, offset, little_endian=False):
        """Read signed 16-bit integer"""
        return self._unpack("h", offset, 2, little_endian)

    def get_uint32(self, offset, little_endian=False):
        """Read unsigned 32-bit integer"""
        return self._unpack("I", offset, 4, little_endian)

    def get_int32(self, offset, little_endian=False):
        """Read signed 32-bit integer"""
        return self._unpack("i", offset, 4, little_endian)

    def get_bytes(self, offset, length):
        """Copy `length` bytes starting at `offset`"""
        self._check_bounds(offset, length)
        return bytes(self._data[offset : offset + length])

    def get_latin1_string(self, offset, length):
        """
        Read `length` bytes as a Latin-1 string, one character per byte.

        Embedded NUL bytes are kept; callers decide how many bytes belong
        to the value.
        """
        if length <= 0:
            return ""
        return self.get_bytes(offset, length).decode("latin-1")

    def starts_with(self, offset, pattern):
        """Check whether `pattern` occurs at `offset` without raising at the end"""
        end = offset + len(pattern)
        if offset < 0 or end > self._length:
            return False
        return self._data[offset:end] == pattern

    def find(self, pattern, start=0, end=None):
        """Return the first offset of `pattern` in [start, end), or -1"""
        if end is None or end > self._length:
            end = self._length
        start = max(start, 0)
        if start >= end:
            return -1
        index = bytes(self._data[start:end]).find(pattern)
        return index if index < 0 else start + index
