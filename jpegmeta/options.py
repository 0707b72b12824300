"""
Options handling system
"""

import os

# Segments located by the JPEG scanner
SEGMENTS = ["tiff", "iptc", "xmp"]

# TIFF IFD blocks (order is the decode order)
TIFF_BLOCKS = ["exif", "gps", "ifd1"]

# Output formatters
FORMATTERS = ["translateValues", "silentErrors", "debug"]

ALL_KEYS = SEGMENTS + TIFF_BLOCKS + FORMATTERS

DEBUG_ENV = "JPEGMETA_DEBUG"


def _env_flag(name):
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def default_options():
    """Default values, read fresh so environment changes are honoured"""
    return {
        # Segments
        "tiff": True,
        "iptc": True,
        "xmp": False,
        # TIFF blocks
        "exif": True,
        "gps": True,
        "ifd1": True,
        # Output formatters
        "translateValues": True,
        "silentErrors": True,
        "debug": _env_flag(DEBUG_ENV),
    }


class Options:
    """
    Decoder configuration, fixed when an Exif instance is created

    Accepts None (defaults), True (everything enabled, XMP included) or a
    dict overriding individual keys.
    """

    def __init__(self, user_options=None):
        values = default_options()

        if user_options is True:
            for key in SEGMENTS + TIFF_BLOCKS:
                values[key] = True
        elif isinstance(user_options, Options):
            values.update(user_options.as_dict())
        elif isinstance(user_options, dict):
            unknown = set(user_options) - set(ALL_KEYS)
            if unknown:
                raise ValueError(f"Unknown options: {', '.join(sorted(unknown))}")
            values.update(user_options)
        elif user_options is not None:
            raise ValueError(f"Invalid options argument: {user_options!r}")

        for key in ALL_KEYS:
            setattr(self, key, bool(values[key]))

    def __repr__(self):
        enabled = ", ".join(f"{key}={getattr(self, key)}" for key in ALL_KEYS)
        return f"Options({enabled})"

    def as_dict(self):
        return {key: getattr(self, key) for key in ALL_KEYS}

    def is_enabled(self, segment_type):
        """Check whether a segment or block should be decoded"""
        return bool(getattr(self, segment_type, False))
