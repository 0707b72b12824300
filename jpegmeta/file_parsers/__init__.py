"""
File format parsers
"""

from .jpeg import JpegFileParser

__all__ = [
    "JpegFileParser",
]
