"""Data models for decoded JPEG metadata."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

JPEG_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class Rational:
    """A TIFF RATIONAL or SRATIONAL value.

    Keeps the raw fraction next to its ratio: some tags are shown as
    fractions (ExposureTime 1/250), others as plain numbers (FNumber 2.8).
    """

    numerator: int
    denominator: int
    value: float

    @classmethod
    def from_pair(cls, numerator: int, denominator: int) -> "Rational":
        value = numerator / denominator if denominator != 0 else 0.0
        return cls(numerator, denominator, value)

    def __float__(self) -> float:
        return float(self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numerator": self.numerator,
            "denominator": self.denominator,
            "value": self.value,
        }


@dataclass
class Thumbnail:
    """Tags of IFD1 plus the embedded JPEG thumbnail, when one could be sliced."""

    tags: Dict[Any, Any] = field(default_factory=dict)
    blob: Optional[bytes] = None
    mime_type: Optional[str] = None
    format: Optional[str] = None  # "jpeg", "tiff", "rgb" or None

    @property
    def has_blob(self) -> bool:
        return self.blob is not None


@dataclass
class MetadataResult:
    """Everything decoded from one JPEG buffer."""

    tags: Dict[Any, Any] = field(default_factory=dict)
    thumbnail: Optional[Thumbnail] = None
    iptc: Optional[Dict[str, Any]] = None
    xmp: Optional[str] = None
    xmp_data: Optional[Dict[str, Any]] = None
    errors: List[str] = field(default_factory=list)

    def get_tag(self, name):
        return self.tags.get(name)

    def get_all_tags(self) -> Dict[Any, Any]:
        return dict(self.tags)

    def get_iptc_tag(self, name):
        if not self.iptc:
            return None
        return self.iptc.get(name)

    def get_all_iptc_tags(self) -> Dict[str, Any]:
        return dict(self.iptc) if self.iptc else {}

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form; rationals become numerator/denominator/value mappings."""
        output: Dict[str, Any] = {"tags": _plain(self.tags)}
        if self.thumbnail is not None:
            thumb = {"tags": _plain(self.thumbnail.tags), "format": self.thumbnail.format}
            if self.thumbnail.blob is not None:
                thumb["blob"] = self.thumbnail.blob
                thumb["mimeType"] = self.thumbnail.mime_type
            output["thumbnail"] = thumb
        if self.iptc is not None:
            output["iptc"] = _plain(self.iptc)
        if self.xmp is not None:
            output["xmp"] = self.xmp
        if self.xmp_data is not None:
            output["xmpData"] = self.xmp_data
        if self.errors:
            output["errors"] = list(self.errors)
        return output


def _plain(value):
    if isinstance(value, Rational):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _plain(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(val) for val in value]
    return value
