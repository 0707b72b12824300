"""
Single-purpose readers

Each helper decodes only the blocks it needs and returns a plain value.
"""

from .core import parse

# Everything off; helpers switch on what they read
_NARROW = {
    "exif": False,
    "gps": False,
    "ifd1": False,
    "iptc": False,
    "translateValues": False,
}


async def _decode(file, **enabled):
    options = dict(_NARROW)
    options.update(enabled)
    return await parse(file, options)


async def gps(file):
    """
    Read the GPS position in decimal degrees

    Args:
        file: bytes, path, file-like object, data URI or URL

    Returns:
        dict: {'latitude': float, 'longitude': float}, or None without a fix
    """
    tags = (await _decode(file, gps=True)).tags
    lat = tags.get("GPSLatitude")
    lon = tags.get("GPSLongitude")
    if lat is None or lon is None:
        return None

    return {
        "latitude": _dms_to_decimal(lat, tags.get("GPSLatitudeRef", "N")),
        "longitude": _dms_to_decimal(lon, tags.get("GPSLongitudeRef", "E")),
    }


async def orientation(file):
    """Orientation tag of IFD0 (1-8), or None"""
    return (await _decode(file)).get_tag("Orientation")


async def thumbnail(file):
    """Embedded JPEG thumbnail bytes, or None"""
    result = await _decode(file, ifd1=True)
    if result.thumbnail is None:
        return None
    return result.thumbnail.blob


def _dms_to_decimal(dms, ref):
    """
    Degrees/minutes/seconds to signed decimal degrees

    Args:
        dms: [degrees, minutes, seconds] of rationals or numbers, or a
            single value already in degrees
        ref: 'N', 'S', 'E' or 'W'; south and west are negative
    """
    if isinstance(dms, (list, tuple)):
        if len(dms) < 3:
            return 0.0
        degrees, minutes, seconds = (float(part) for part in dms[:3])
        decimal = degrees + minutes / 60.0 + seconds / 3600.0
    else:
        decimal = float(dms)

    if ref in ("S", "W"):
        decimal = -decimal
    return decimal
