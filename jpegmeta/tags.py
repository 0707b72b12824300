"""
Tag dictionaries and constants

Three registries, each keyed by block (ifd0, exif, gps, ifd1, iptc):
- tag_keys: numeric tag id -> name
- tag_values: tag name -> {raw value: description}
- tag_revivers: tag name -> callable(raw value)

They are filled once by `dicts.load_all_dictionaries()` on package import.
"""

tag_keys = {}
tag_values = {}
tag_revivers = {}


def create_dictionary(group, key, entries):
    """
    Build a block dictionary and store it in a registry

    Args:
        group: One of tag_keys, tag_values, tag_revivers
        key: Block key, or a list of block keys sharing the dictionary
        entries: List of (key, value) tuples

    Returns:
        dict: the new dictionary
    """
    dictionary = dict(entries)
    for block_key in key if isinstance(key, list) else [key]:
        group[block_key] = dictionary
    return dictionary


# Block keys
IFD0 = "ifd0"
EXIF = "exif"
GPS = "gps"
IFD1 = "ifd1"
IPTC = "iptc"

# Names the decoder relies on after the ids are resolved
EXIF_POINTER = "ExifIFDPointer"
GPS_POINTER = "GPSInfoIFDPointer"
THUMB_OFFSET = "JpegIFOffset"
THUMB_LENGTH = "JpegIFByteCount"
COMPRESSION = "Compression"
PHOTOMETRIC = "PhotometricInterpretation"

COMPRESSION_UNCOMPRESSED = 1
COMPRESSION_JPEG = 6
PHOTOMETRIC_RGB = 2
