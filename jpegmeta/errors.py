"""Exceptions raised while decoding JPEG metadata."""


class JpegMetaError(Exception):
    """Base exception for metadata decoding errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StructuralMismatchError(JpegMetaError):
    """A fixed marker, signature or header field does not have its expected value."""

    def __init__(self, message: str = "Structural mismatch", details: str = None):
        super().__init__(message, details)


class InvalidJpegError(StructuralMismatchError):
    """Raised when the buffer does not start with the JPEG SOI marker."""

    def __init__(self, details: str = None):
        super().__init__("Not a valid JPEG", details)


class MarkerMismatchError(StructuralMismatchError):
    """Raised when a JPEG marker does not start with 0xFF."""

    def __init__(self, offset: int, found: int):
        self.offset = offset
        self.found = found
        super().__init__(
            "Not a valid marker",
            f"offset {offset}, found 0x{found:02X}",
        )


class InvalidExifError(StructuralMismatchError):
    """Raised when an APP1 segment does not carry the Exif identifier."""

    def __init__(self, details: str = None):
        super().__init__("Not valid EXIF data", details)


class InvalidTiffError(StructuralMismatchError):
    """Raised for a bad byte-order mark, TIFF magic or first IFD offset."""

    def __init__(self, details: str = None):
        super().__init__("Not valid TIFF data", details)


class OutOfRangeError(JpegMetaError, IndexError):
    """Raised when a read or a computed offset falls outside the buffer."""

    def __init__(self, offset: int, size: int, length: int):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(
            "Read out of bounds",
            f"offset {offset} with size {size} exceeds length {length}",
        )


class UnsupportedTypeError(JpegMetaError):
    """Raised when an IFD entry carries a type code the decoder does not handle."""

    def __init__(self, type_code: int, tag: int = None):
        self.type_code = type_code
        self.tag = tag
        details = f"type {type_code}"
        if tag is not None:
            details = f"tag 0x{tag:04X}, {details}"
        super().__init__("Unsupported TIFF value type", details)
