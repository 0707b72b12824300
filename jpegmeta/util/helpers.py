"""
Helper utility functions
"""

# TIFF byte order markers
TIFF_LITTLE_ENDIAN = 0x4949  # 'II'
TIFF_BIG_ENDIAN = 0x4D4D  # 'MM'
TIFF_MAGIC = 0x002A


def pluralize_value(existing_val, new_val):
    """
    Merge a repeated value into an ordered sequence

    First occurrence is stored as-is, the second turns it into a list and
    later ones are appended.
    """
    if existing_val is None:
        return new_val
    if isinstance(existing_val, list):
        existing_val.append(new_val)
        return existing_val
    return [existing_val, new_val]


def format_error(error):
    """Render an exception for the errors list of a result"""
    if isinstance(error, Exception):
        return f"{type(error).__name__}: {error}"
    return str(error)
