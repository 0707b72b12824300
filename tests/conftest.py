"""
Shared fixtures: synthetic TIFF, IPTC, XMP and JPEG byte builders.
"""

import struct

import pytest

BYTE = 1
ASCII = 2
SHORT = 3
LONG = 4
RATIONAL = 5
UNDEFINED = 7
SLONG = 9
SRATIONAL = 10
FLOAT = 11

TAG_EXIF_POINTER = 0x8769
TAG_GPS_POINTER = 0x8825
TAG_THUMB_OFFSET = 0x0201
TAG_THUMB_LENGTH = 0x0202

THUMBNAIL_JPEG = b"\xff\xd8\xff\xdbthumbnail\xff\xd9"


class Entry:
    """One IFD entry; `values` is a list, a str (ASCII) or raw bytes."""

    def __init__(self, tag, type_code, values, count=None):
        self.tag = tag
        self.type_code = type_code
        self.values = values
        self.count = count

    def payload(self, prefix):
        values = self.values
        if isinstance(values, bytes):
            return values, self.count if self.count is not None else len(values)
        if self.type_code == ASCII:
            data = values.encode("latin-1") + b"\x00"
            return data, len(data)
        if not isinstance(values, (list, tuple)):
            values = [values]
        if self.type_code in (RATIONAL, SRATIONAL):
            code = "L" if self.type_code == RATIONAL else "l"
            data = b"".join(struct.pack(prefix + code * 2, n, d) for n, d in values)
            return data, len(values)
        code = {BYTE: "B", UNDEFINED: "B", SHORT: "H", LONG: "L", SLONG: "l"}[
            self.type_code
        ]
        return struct.pack(prefix + code * len(values), *values), len(values)


def _ifd_size(entries):
    return 2 + 12 * len(entries) + 4


def build_tiff(
    ifd0,
    exif=None,
    gps=None,
    ifd1=None,
    thumbnail=None,
    little_endian=True,
    first_ifd_offset=None,
):
    """
    Lay out a TIFF structure: header, IFD0, EXIF, GPS, IFD1, value area,
    thumbnail. Pointer entries and thumbnail offset/length entries are
    added automatically; offsets are relative to the header.
    """
    prefix = "<" if little_endian else ">"
    ifd0 = list(ifd0)
    ifd1 = list(ifd1) if ifd1 is not None else None

    if exif is not None:
        ifd0.append(Entry(TAG_EXIF_POINTER, LONG, [0]))
    if gps is not None:
        ifd0.append(Entry(TAG_GPS_POINTER, LONG, [0]))
    if thumbnail is not None and ifd1 is not None:
        ifd1.append(Entry(TAG_THUMB_OFFSET, LONG, [0]))
        ifd1.append(Entry(TAG_THUMB_LENGTH, LONG, [len(thumbnail)]))

    blocks = [("ifd0", ifd0), ("exif", exif), ("gps", gps), ("ifd1", ifd1)]
    positions = {}
    cursor = 8
    for name, entries in blocks:
        if entries is not None:
            positions[name] = cursor
            cursor += _ifd_size(entries)
    data_start = cursor

    # Size the value area first so the thumbnail offset is known
    data_size = 0
    for name, entries in blocks:
        for entry in entries or []:
            payload, _ = entry.payload(prefix)
            if len(payload) > 4:
                data_size += len(payload) + (len(payload) % 2)
    thumbnail_offset = data_start + data_size

    pointer_values = {
        TAG_EXIF_POINTER: positions.get("exif"),
        TAG_GPS_POINTER: positions.get("gps"),
        TAG_THUMB_OFFSET: thumbnail_offset,
    }

    out = bytearray()
    out += b"II" if little_endian else b"MM"
    out += struct.pack(prefix + "H", 0x002A)
    out += struct.pack(prefix + "L", 8 if first_ifd_offset is None else first_ifd_offset)

    data_area = bytearray()
    for name, entries in blocks:
        if entries is None:
            continue
        out += struct.pack(prefix + "H", len(entries))
        for entry in entries:
            if entry.tag in pointer_values and entry.values == [0]:
                entry = Entry(entry.tag, entry.type_code, [pointer_values[entry.tag]])
            payload, count = entry.payload(prefix)
            out += struct.pack(prefix + "HHL", entry.tag, entry.type_code, count)
            if len(payload) <= 4:
                out += payload.ljust(4, b"\x00")
            else:
                out += struct.pack(prefix + "L", data_start + len(data_area))
                data_area += payload
                if len(payload) % 2:
                    data_area += b"\x00"
        next_ifd = positions["ifd1"] if name == "ifd0" and ifd1 is not None else 0
        out += struct.pack(prefix + "L", next_ifd)

    out += data_area
    if thumbnail is not None:
        out += thumbnail
    return bytes(out)


def build_iptc(records):
    """IPTC application records: [(dataset, value), ...]"""
    out = bytearray()
    for dataset, value in records:
        data = value.encode("latin-1")
        out += b"\x1c\x02" + bytes([dataset]) + struct.pack(">H", len(data)) + data
    return bytes(out)


def _segment(marker, payload):
    return b"\xff" + bytes([marker]) + struct.pack(">H", len(payload) + 2) + payload


def exif_segment(tiff):
    return _segment(0xE1, b"Exif\x00\x00" + tiff)


def iptc_segment(iptc, name_length_byte=0):
    resource = (
        b"8BIM\x04\x04"
        + b"\x00"
        + bytes([name_length_byte])
        + struct.pack(">L", len(iptc))
        + iptc
    )
    if len(iptc) % 2:
        resource += b"\x00"
    return _segment(0xED, b"Photoshop 3.0\x00" + resource)


def xmp_segment(packet):
    return _segment(0xE1, b"http://ns.adobe.com/xap/1.0/\x00" + packet.encode("utf-8"))


JFIF_SEGMENT = _segment(0xE0, b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00")
DQT_SEGMENT = _segment(0xDB, b"\x00" + bytes(64))
SOS_SEGMENT = _segment(0xDA, b"\x01\x01\x00\x00\x3f\x00")
SCAN_DATA = b"\x12\x34\x56\x78"


def build_jpeg(tiff=None, iptc=None, xmp=None, segments=()):
    """Assemble SOI, APP0, the metadata segments, DQT, SOS, scan data and EOI"""
    out = bytearray(b"\xff\xd8")
    out += JFIF_SEGMENT
    for segment in segments:
        out += segment
    if tiff is not None:
        out += exif_segment(tiff)
    if xmp is not None:
        out += xmp_segment(xmp)
    if iptc is not None:
        out += iptc_segment(iptc)
    out += DQT_SEGMENT
    out += SOS_SEGMENT
    out += SCAN_DATA
    out += b"\xff\xd9"
    return bytes(out)


SAMPLE_XMP = (
    '<x:xmpmeta xmlns:x="adobe:ns:meta/">'
    '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
    '<rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/"'
    ' tiff:Orientation="1">'
    "<dc:creator>Jane Doe</dc:creator>"
    "<dc:subject>beach</dc:subject>"
    "<dc:subject>sunset</dc:subject>"
    "</rdf:Description>"
    "</rdf:RDF>"
    "</x:xmpmeta>"
)


def sample_tiff(little_endian=True):
    """IFD0 + EXIF + GPS + IFD1 with a JPEG thumbnail"""
    return build_tiff(
        ifd0=[
            Entry(0x010F, ASCII, "Canon"),
            Entry(0x0110, ASCII, "EOS 5D"),
            Entry(0x0112, SHORT, [6]),
            Entry(0x011A, RATIONAL, [(72, 1)]),
        ],
        exif=[
            Entry(0x829A, RATIONAL, [(1, 250)]),
            Entry(0x829D, RATIONAL, [(28, 10)]),
            Entry(0x8827, SHORT, [400]),
            Entry(0x9000, UNDEFINED, b"0230"),
            Entry(0x9101, UNDEFINED, bytes([1, 2, 3, 0])),
            Entry(0x9204, SRATIONAL, [(-1, 3)]),
            Entry(0x9209, SHORT, [16]),
            Entry(0xA002, LONG, [4000]),
            Entry(0xA403, SHORT, [1]),
            Entry(0xA000, UNDEFINED, b"0100"),
        ],
        gps=[
            Entry(0x0000, BYTE, [2, 3, 0, 0]),
            Entry(0x0001, ASCII, "S"),
            Entry(0x0002, RATIONAL, [(33, 1), (52, 1), (0, 1)]),
            Entry(0x0003, ASCII, "E"),
            Entry(0x0004, RATIONAL, [(151, 1), (12, 1), (36, 1)]),
        ],
        ifd1=[
            Entry(0x0103, SHORT, [6]),
            Entry(0x011A, RATIONAL, [(72, 1)]),
        ],
        thumbnail=THUMBNAIL_JPEG,
        little_endian=little_endian,
    )


@pytest.fixture
def tiff_bytes():
    return sample_tiff()


@pytest.fixture
def jpeg_bytes():
    """A JPEG carrying EXIF, IPTC and XMP"""
    iptc = build_iptc(
        [
            (0x78, "A day at the beach"),
            (0x19, "beach"),
            (0x19, "sunset"),
            (0x74, "(c) Jane Doe"),
        ]
    )
    return build_jpeg(tiff=sample_tiff(), iptc=iptc, xmp=SAMPLE_XMP)


@pytest.fixture
def lambda_context():
    """Minimal Lambda context for logger.inject_lambda_context"""

    class LambdaContext:
        function_name = "jpegmeta-test"
        function_version = "$LATEST"
        memory_limit_in_mb = 128
        invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:jpegmeta-test"
        aws_request_id = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
