"""
Tag dictionaries for translating tag ids to names and values to strings
"""

from .iptc_keys import load_iptc_keys
from .tiff_exif_keys import load_exif_keys
from .tiff_exif_values import load_exif_values
from .tiff_gps_keys import load_gps_keys
from .tiff_ifd0_keys import load_ifd0_keys
from .tiff_ifd1_keys import load_ifd1_keys
from .tiff_revivers import load_tiff_revivers

__all__ = [
    "load_ifd0_keys",
    "load_ifd1_keys",
    "load_exif_keys",
    "load_gps_keys",
    "load_exif_values",
    "load_tiff_revivers",
    "load_iptc_keys",
    "load_all_dictionaries",
]


def load_all_dictionaries():
    """Load all tag dictionaries into the global registry"""
    # TIFF/EXIF tag name dictionaries
    load_ifd0_keys()
    load_ifd1_keys()
    load_exif_keys()
    load_gps_keys()

    # Enum-to-string tables and byte-array revivers
    load_exif_values()
    load_tiff_revivers()

    # IPTC field names
    load_iptc_keys()
