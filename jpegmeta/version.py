"""Version information for jpegmeta."""

__version__ = "1.0.0"
