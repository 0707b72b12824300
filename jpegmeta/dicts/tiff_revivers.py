"""
TIFF tag value revivers

Revivers reassemble raw byte arrays into the strings they encode
(version codes, component layout, GPS version).
"""

from ..tags import EXIF, GPS, create_dictionary, tag_revivers
from .tiff_exif_values import COMPONENTS


def revive_version(data):
    """Convert a 4-byte ASCII version code (e.g. [48, 50, 51, 48]) to '0230'"""
    if isinstance(data, (list, tuple)) and len(data) >= 4:
        return "".join(chr(code) for code in data[:4])
    return data


def revive_components(data):
    """Map each of the four component ids to its name and concatenate them"""
    if isinstance(data, (list, tuple)) and len(data) >= 4:
        return "".join(COMPONENTS.get(code, "") for code in data[:4])
    return data


def revive_gps_version_id(val):
    """Convert GPS version ID array to dotted string"""
    if isinstance(val, (list, tuple)) and len(val) >= 4:
        return ".".join(str(x) for x in val[:4])
    return val


def load_tiff_revivers():
    """Load TIFF tag value revivers"""
    create_dictionary(
        tag_revivers,
        EXIF,
        [
            ("ExifVersion", revive_version),
            ("FlashpixVersion", revive_version),
            ("ComponentsConfiguration", revive_components),
        ],
    )

    create_dictionary(
        tag_revivers,
        GPS,
        [
            ("GPSVersionID", revive_gps_version_id),
        ],
    )
