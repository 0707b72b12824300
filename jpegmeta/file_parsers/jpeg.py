"""
JPEG file parser

Walks the marker segments to find the Exif APP1, and searches the byte
stream for the Photoshop IPTC resource and the XMP packet.
"""

from ..errors import JpegMetaError, MarkerMismatchError
from ..parser import FileParserBase
from ..segment_parsers.tiff_exif import TiffExif
from ..util.helpers import format_error

# JPEG markers
JPEG_SOI = b"\xff\xd8"

MARKER_1 = 0xFF
MARKER_2_APP1 = 0xE1  # FF E1
MARKER_2_SOS = 0xDA  # FF DA
MARKER_2_EOI = 0xD9  # FF D9

# Photoshop "8BIM" image resource 0x0404 (IPTC-NAA record)
IPTC_RESOURCE = b"8BIM\x04\x04"

XMP_NEEDLE = b"http"
XMP_OPEN = b"<x:xmpmeta"
XMP_CLOSE = b"</x:xmpmeta>"


class JpegFileParser(FileParserBase):
    """
    JPEG file format parser

    Structure:
    - SOI (Start of Image)
    - APP0-APP15 segments (metadata)
    - DQT, DHT, and other JPEG segments
    - SOS (Start of Scan) followed by image data

    Metadata locations:
    - APP1: TIFF/EXIF data
    - APP1: XMP packet (found by pattern search)
    - APP13: Photoshop resources carrying IPTC
    """

    type = "jpeg"

    @classmethod
    def can_handle(cls, file):
        """Check if file starts with the SOI marker"""
        return file.starts_with(0, JPEG_SOI)

    def find_exif_segment(self):
        """
        Walk markers from offset 2 up to the Exif APP1

        Returns:
            dict with offset, start (the Exif identifier) and length
            (segment length without its length field), or None
        """
        file = self.file
        offset = 2

        while offset + 4 <= file.byte_length:
            marker1 = file.get_uint8(offset)
            if marker1 != MARKER_1:
                raise MarkerMismatchError(offset, marker1)

            marker2 = file.get_uint8(offset + 1)
            if marker2 in (MARKER_2_SOS, MARKER_2_EOI):
                self.log_debug("No Exif segment before image data", offset=offset)
                return None

            length = file.get_uint16(offset + 2)
            if marker2 == MARKER_2_APP1:
                if TiffExif.can_handle(file, offset):
                    self.log_debug("Found Exif segment", offset=offset, length=length)
                    return {"offset": offset, "start": offset + 4, "length": length - 2}
                self.log_debug("Skipping non-Exif APP1", offset=offset)

            offset += 2 + length

        return None

    def find_iptc_segment(self):
        """
        Search for the 8BIM IPTC resource

        Returns:
            dict with offset, start and length of the IPTC records, or None
        """
        file = self.file
        offset = file.find(IPTC_RESOURCE, 2)
        if offset < 0:
            return None

        name_header_length = file.get_uint8(offset + 7)
        if name_header_length % 2 != 0:
            name_header_length += 1
        # Photoshop 6 and earlier store 0 here
        if name_header_length == 0:
            name_header_length = 4

        start = offset + 8 + name_header_length
        length = file.get_uint16(offset + 6 + name_header_length)
        self.log_debug("Found IPTC resource", offset=offset, start=start, length=length)
        return {"offset": offset, "start": start, "length": length}

    def find_xmp_segment(self):
        """
        Search for the XMP packet

        Each `http` hit is taken as the namespace URI of an XMP APP1: the
        segment length sits two bytes before it. Hits whose window holds no
        x:xmpmeta element are skipped.

        Returns:
            dict with offset, start and length of the x:xmpmeta element, or None
        """
        file = self.file
        offset = file.find(XMP_NEEDLE, 2)

        while offset >= 0:
            start = offset - 1
            length = file.get_uint16(offset - 2) - 1
            end = min(start + length, file.byte_length)

            if end > start:
                window = file.get_bytes(start, end - start)
                xmp_start = window.find(XMP_OPEN)
                xmp_end = window.find(XMP_CLOSE, xmp_start + 1)
                if xmp_start >= 0 and xmp_end >= 0:
                    xmp_end += len(XMP_CLOSE)
                    self.log_debug("Found XMP packet", offset=offset)
                    return {
                        "offset": offset,
                        "start": start + xmp_start,
                        "length": xmp_end - xmp_start,
                    }

            self.log_debug("Skipping http hit without XMP packet", offset=offset)
            offset = file.find(XMP_NEEDLE, offset + 1)

        return None

    def find_segment(self, method_name):
        """Run a finder; a broken marker chain is recorded, never raised"""
        try:
            return getattr(self, method_name)()
        except MarkerMismatchError as e:
            self.errors.append(format_error(e))
            self.log_debug("Marker chain broken", error=format_error(e))
            return None
        except JpegMetaError as e:
            self.handle_error(e)
            return None

    def parse(self):
        """Locate enabled segments and create their parsers"""
        options = self.options
        if options.tiff:
            self.inject_segment("tiff", self.find_segment("find_exif_segment"))
        if options.iptc:
            self.inject_segment("iptc", self.find_segment("find_iptc_segment"))
        if options.xmp:
            self.inject_segment("xmp", self.find_segment("find_xmp_segment"))
