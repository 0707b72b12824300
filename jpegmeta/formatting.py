"""
Output formatting helpers.

Human-readable rendering of decoded tags and conversion of a
MetadataResult into JSON-serializable structures.
"""

import base64
from typing import Any, Dict

from .models import MetadataResult, Rational

LINE_END = "\r\n"


def format_number(value: float) -> str:
    """Render a ratio without a trailing .0 for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def pretty(tags: Any) -> str:
    """
    Render tags as one "Name : value" line each.

    Rationals show their ratio and the raw fraction, sequences only their
    length. Every line ends with CRLF.

    Args:
        tags: MetadataResult or a tag dict

    Returns:
        Rendered text, or "" when there are no tags

    Examples:
        >>> pretty({"Orientation": 1, "FNumber": Rational(28, 10, 2.8)})
        "Orientation : 1\\r\\nFNumber : 2.8 [28/10]\\r\\n"
    """
    if isinstance(tags, MetadataResult):
        tags = tags.tags
    if not tags:
        return ""

    lines = []
    for name, value in tags.items():
        if isinstance(value, Rational):
            rendered = (
                f"{format_number(value.value)} [{value.numerator}/{value.denominator}]"
            )
        elif isinstance(value, (list, tuple, bytes)):
            rendered = f"[{len(value)} values]"
        else:
            rendered = str(value)
        lines.append(f"{name} : {rendered}{LINE_END}")
    return "".join(lines)


def to_json_safe(obj: Any) -> Any:
    """
    Convert decoded metadata into JSON-serializable values.

    - MetadataResult -> its to_dict() form, converted recursively
    - Rational -> {"numerator", "denominator", "value"}
    - bytes -> base64 string
    - integer tag ids used as keys -> strings
    """
    if isinstance(obj, MetadataResult):
        return to_json_safe(obj.to_dict())

    if isinstance(obj, Rational):
        return obj.to_dict()

    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")

    if isinstance(obj, dict):
        converted: Dict[str, Any] = {}
        for key, value in obj.items():
            converted[str(key)] = to_json_safe(value)
        return converted

    if isinstance(obj, (list, tuple)):
        return [to_json_safe(item) for item in obj]

    return obj
