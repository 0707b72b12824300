"""
TIFF/EXIF segment parser

Decodes the TIFF structure carried by the Exif APP1 segment: IFD0, the
EXIF and GPS sub-IFDs, and IFD1 with its embedded thumbnail.
"""

from aws_lambda_powertools import Logger

from ..errors import (
    InvalidExifError,
    InvalidTiffError,
    OutOfRangeError,
    UnsupportedTypeError,
)
from ..models import JPEG_MIME_TYPE, Rational, Thumbnail
from ..parser import AppSegmentParserBase
from ..tags import (
    COMPRESSION,
    COMPRESSION_JPEG,
    COMPRESSION_UNCOMPRESSED,
    EXIF,
    EXIF_POINTER,
    GPS,
    GPS_POINTER,
    IFD0,
    IFD1,
    PHOTOMETRIC,
    PHOTOMETRIC_RGB,
    THUMB_LENGTH,
    THUMB_OFFSET,
    tag_keys,
)
from ..util.helpers import TIFF_BIG_ENDIAN, TIFF_LITTLE_ENDIAN, TIFF_MAGIC

EXIF_HEADER = b"Exif\x00\x00"
APP1_MARKER = b"\xff\xe1"

logger = Logger(service="jpegmeta", child=True)

# Size of one IFD entry: tag, type, count, value/offset
ENTRY_SIZE = 12

# TIFF data types
BYTE = 1
ASCII = 2
SHORT = 3
LONG = 4
RATIONAL = 5
UNDEFINED = 7
SLONG = 9
SRATIONAL = 10


class TiffExif(AppSegmentParserBase):
    """
    TIFF/EXIF segment parser

    `segment["start"]` is the offset of the `Exif\\0\\0` identifier; the TIFF
    header follows six bytes later and every value offset inside the
    structure is relative to it.
    """

    type = "tiff"

    @classmethod
    def can_handle(cls, file, offset):
        """Check if segment at offset is an Exif APP1"""
        return file.starts_with(offset, APP1_MARKER) and file.starts_with(
            offset + 4, EXIF_HEADER
        )

    def __init__(self, file, segment=None, options=None):
        super().__init__(file, segment, options)
        self.le = False
        self.tiff_start = None
        self.first_ifd_offset = None
        self.ifd0 = None
        self.exif = None
        self.gps = None
        self.thumbnail = None

    def parse_header(self):
        """Validate the Exif identifier and TIFF header, fix endianness"""
        file = self.file
        start = self.segment.get("start", 0)

        if not file.starts_with(start, EXIF_HEADER[:4]):
            raise InvalidExifError(f"offset {start}")

        tiff_start = start + 6
        byte_order = file.get_uint16(tiff_start)
        if byte_order == TIFF_LITTLE_ENDIAN:
            self.le = True
        elif byte_order == TIFF_BIG_ENDIAN:
            self.le = False
        else:
            raise InvalidTiffError(f"byte order 0x{byte_order:04X}")

        magic = file.get_uint16(tiff_start + 2, self.le)
        if magic != TIFF_MAGIC:
            raise InvalidTiffError(f"magic 0x{magic:04X}")

        first_ifd_offset = file.get_uint32(tiff_start + 4, self.le)
        if first_ifd_offset < 8:
            raise InvalidTiffError(f"first IFD offset {first_ifd_offset}")

        self.tiff_start = tiff_start
        self.first_ifd_offset = first_ifd_offset
        self.log_debug(
            "TIFF header parsed",
            tiff_start=tiff_start,
            little_endian=self.le,
            first_ifd_offset=first_ifd_offset,
        )

    def read_tags(self, dir_start, block_key):
        """
        Decode every entry of the IFD at dir_start

        Args:
            dir_start: Absolute offset of the entry count
            block_key: Dictionary used to name the tags (ifd0, exif, gps, ifd1)

        Returns:
            dict: tag name (or numeric id when unknown) -> value. Unknown
            ids share one namespace once blocks are merged, so an id seen in
            several blocks keeps the value of the last one decoded (IFD0,
            then EXIF, then GPS).
        """
        names = tag_keys.get(block_key, {})
        entries = self.file.get_uint16(dir_start, self.le)
        tags = {}

        for i in range(entries):
            entry_offset = dir_start + 2 + i * ENTRY_SIZE
            tag_id = self.file.get_uint16(entry_offset, self.le)
            name = names.get(tag_id)
            if name is None:
                self.log_debug(
                    "Unknown tag", block=block_key, tag=f"0x{tag_id:04X}"
                )
                name = tag_id
            tags[name] = self.read_tag_value(entry_offset)

        return tags

    def read_tag_value(self, entry_offset):
        """Decode the value of the 12-byte entry at entry_offset"""
        file = self.file
        le = self.le

        tag_id = file.get_uint16(entry_offset, le)
        tag_type = file.get_uint16(entry_offset + 2, le)
        count = file.get_uint32(entry_offset + 4, le)
        inline = entry_offset + 8

        if tag_type in (BYTE, UNDEFINED):
            if count == 1:
                return file.get_uint8(inline)
            offset = self._value_offset(inline) if count > 4 else inline
            return [file.get_uint8(offset + i) for i in range(count)]

        if tag_type == ASCII:
            offset = self._value_offset(inline) if count > 4 else inline
            return file.get_latin1_string(offset, count - 1)

        if tag_type == SHORT:
            if count == 1:
                return file.get_uint16(inline, le)
            offset = self._value_offset(inline) if count > 2 else inline
            return [file.get_uint16(offset + 2 * i, le) for i in range(count)]

        if tag_type == LONG:
            if count == 1:
                return file.get_uint32(inline, le)
            offset = self._value_offset(inline)
            return [file.get_uint32(offset + 4 * i, le) for i in range(count)]

        if tag_type == SLONG:
            if count == 1:
                return file.get_int32(inline, le)
            offset = self._value_offset(inline)
            return [file.get_int32(offset + 4 * i, le) for i in range(count)]

        if tag_type in (RATIONAL, SRATIONAL):
            offset = self._value_offset(inline)
            signed = tag_type == SRATIONAL
            if count == 1:
                return self._read_rational(offset, signed)
            return [self._read_rational(offset + 8 * i, signed) for i in range(count)]

        raise UnsupportedTypeError(tag_type, tag_id)

    def _value_offset(self, inline):
        return self.file.get_uint32(inline, self.le) + self.tiff_start

    def _read_rational(self, offset, signed):
        read = self.file.get_int32 if signed else self.file.get_uint32
        return Rational.from_pair(read(offset, self.le), read(offset + 4, self.le))

    def get_next_ifd_offset(self, dir_start):
        """Read the link to the next IFD, stored right after the last entry"""
        entries = self.file.get_uint16(dir_start, self.le)
        return self.file.get_uint32(dir_start + 2 + entries * ENTRY_SIZE, self.le)

    def parse_ifd0_block(self):
        """Parse IFD0 block (main image info)"""
        self.ifd0 = self.read_tags(self.tiff_start + self.first_ifd_offset, IFD0)
        return self.ifd0

    def parse_exif_block(self):
        """Parse the EXIF sub-IFD referenced by IFD0"""
        return self._parse_sub_ifd(EXIF_POINTER, EXIF)

    def parse_gps_block(self):
        """Parse the GPS sub-IFD referenced by IFD0"""
        return self._parse_sub_ifd(GPS_POINTER, GPS)

    def _parse_sub_ifd(self, pointer_name, block_key):
        pointer = (self.ifd0 or {}).get(pointer_name)
        # a zero pointer means the block is absent
        if not isinstance(pointer, int) or not pointer:
            return None
        block = self.read_tags(self.tiff_start + pointer, block_key)
        block = self.translate_block(block, block_key)
        setattr(self, block_key, block)
        return block

    def extract_thumbnail(self):
        """
        Decode IFD1 and slice the embedded JPEG thumbnail

        Returns:
            Thumbnail or None when there is no IFD1
        """
        file = self.file
        ifd1_offset = self.get_next_ifd_offset(self.tiff_start + self.first_ifd_offset)
        if ifd1_offset == 0 or self.tiff_start + ifd1_offset > file.byte_length:
            self.log_debug("No IFD1", ifd1_offset=ifd1_offset)
            return None

        tags = self.read_tags(self.tiff_start + ifd1_offset, IFD1)
        thumbnail = Thumbnail(tags=tags)
        compression = tags.get(COMPRESSION)

        if compression is not None:
            if compression == COMPRESSION_JPEG:
                thumbnail.format = "jpeg"
                if tags.get(THUMB_OFFSET) and THUMB_LENGTH in tags:
                    try:
                        thumbnail.blob = file.get_bytes(
                            self.tiff_start + tags[THUMB_OFFSET], tags[THUMB_LENGTH]
                        )
                        thumbnail.mime_type = JPEG_MIME_TYPE
                    except OutOfRangeError as e:
                        self.handle_error(e)
            elif compression == COMPRESSION_UNCOMPRESSED:
                thumbnail.format = "tiff"
                logger.info("Thumbnail image format is TIFF, which is not implemented")
            else:
                logger.info(
                    "Unknown thumbnail image format",
                    extra={"compression": compression},
                )
        elif tags.get(PHOTOMETRIC) == PHOTOMETRIC_RGB:
            thumbnail.format = "rgb"
            logger.info("Thumbnail image format is RGB, which is not implemented")

        self.thumbnail = thumbnail
        return thumbnail

    def parse(self):
        """
        Parse TIFF/EXIF data

        Header and IFD0 failures propagate; a failing sub-IFD or IFD1 only
        drops that block.
        """
        self.parse_header()
        options = self.options

        tags = dict(self.parse_ifd0_block())
        if options.exif:
            tags.update(self.safe_parse("parse_exif_block") or {})
        if options.gps:
            tags.update(self.safe_parse("parse_gps_block") or {})

        thumbnail = None
        if options.ifd1:
            thumbnail = self.safe_parse("extract_thumbnail")

        return {"tags": tags, "thumbnail": thumbnail}

    def assign_to_output(self, result, parser_output):
        result.tags.update(parser_output["tags"])
        result.thumbnail = parser_output["thumbnail"]
