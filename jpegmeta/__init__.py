"""
jpegmeta - EXIF, GPS, IPTC and XMP metadata extraction from JPEG files
"""

from .core import Exif, parse, read_from_binary_file

# Load tag dictionaries on import
from .dicts import load_all_dictionaries
from .errors import (
    InvalidExifError,
    InvalidJpegError,
    InvalidTiffError,
    JpegMetaError,
    MarkerMismatchError,
    OutOfRangeError,
    StructuralMismatchError,
    UnsupportedTypeError,
)
from .formatting import pretty
from .highlevel import gps, orientation, thumbnail
from .models import MetadataResult, Rational, Thumbnail
from .version import __version__

load_all_dictionaries()

from .file_parsers import JpegFileParser

# Register file parsers
from .plugins import file_parsers as file_parser_registry

file_parser_registry.register("jpeg", JpegFileParser)

# Register segment parsers
from .plugins import segment_parsers as segment_parser_registry
from .segment_parsers import Iptc, TiffExif, Xmp

segment_parser_registry.register("tiff", TiffExif)
segment_parser_registry.register("iptc", Iptc)
segment_parser_registry.register("xmp", Xmp)

__all__ = [
    "Exif",
    "parse",
    "read_from_binary_file",
    "pretty",
    "gps",
    "orientation",
    "thumbnail",
    "MetadataResult",
    "Rational",
    "Thumbnail",
    "JpegMetaError",
    "StructuralMismatchError",
    "InvalidJpegError",
    "MarkerMismatchError",
    "InvalidExifError",
    "InvalidTiffError",
    "OutOfRangeError",
    "UnsupportedTypeError",
    "__version__",
]
