"""
Segment parsers for different metadata formats
"""

from .iptc import Iptc
from .tiff_exif import TiffExif
from .xmp import Xmp

__all__ = [
    "TiffExif",
    "Iptc",
    "Xmp",
]
