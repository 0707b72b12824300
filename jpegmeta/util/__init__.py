"""
Utility modules for jpegmeta
"""

from .buffer_view import BufferView
from .helpers import format_error, pluralize_value

__all__ = [
    "BufferView",
    "format_error",
    "pluralize_value",
]
