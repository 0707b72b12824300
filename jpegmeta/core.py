"""
Core Exif class and parse function
"""

from aws_lambda_powertools import Logger

from .errors import InvalidJpegError
from .models import MetadataResult
from .options import Options
from .plugins import file_parsers
from .reader import read
from .util.buffer_view import BufferView
from .util.helpers import format_error

logger = Logger(service="jpegmeta", child=True)


class Exif:
    """
    Main metadata reader

    Options are fixed per instance; each decode builds its own parsers and
    result, so one instance may decode many buffers.
    """

    def __init__(self, options=None):
        """
        Initialize Exif

        Args:
            options: Options dict, True, Options instance or None
        """
        self.options = Options(options)

    def enable_xmp(self):
        self.options.xmp = True

    def disable_xmp(self):
        self.options.xmp = False

    def setup(self, file):
        """Pick the file parser from the header"""
        for file_type, FileParser in file_parsers:
            if FileParser.can_handle(file):
                self.log_debug("Detected file type", file_type=file_type)
                return FileParser
        found = file.get_bytes(0, min(2, file.byte_length)).hex()
        raise InvalidJpegError(f"expected SOI ffd8, found {found or 'nothing'}")

    def read_from_binary_file(self, buffer):
        """
        Decode all enabled metadata from a JPEG buffer

        Args:
            buffer: bytes, bytearray, memoryview or BufferView

        Returns:
            MetadataResult

        Raises:
            InvalidJpegError: when the buffer does not start with SOI
        """
        file = buffer if isinstance(buffer, BufferView) else BufferView(buffer)
        FileParser = self.setup(file)

        result = MetadataResult()
        parsers = {}
        file_parser = FileParser(self.options, file, parsers)

        self.run(result, file_parser.parse)
        result.errors.extend(file_parser.errors)

        for parser in parsers.values():
            self.run(result, self._parse_segment, parser, result)
            result.errors.extend(parser.errors)

        self.log_debug(
            "Decoded metadata",
            tags=len(result.tags),
            iptc=result.iptc is not None,
            xmp=result.xmp is not None,
            thumbnail=result.thumbnail is not None,
            errors=len(result.errors),
        )
        return result

    def _parse_segment(self, parser, result):
        """Parse a single segment and merge its output"""
        parser_output = parser.parse()
        parser.assign_to_output(result, parser_output)

    def run(self, result, step, *args):
        """Run one extraction step; failures are collected in silent mode"""
        if not self.options.silentErrors:
            step(*args)
            return
        try:
            step(*args)
        except Exception as e:
            result.errors.append(format_error(e))
            self.log_debug("Extraction step failed", error=format_error(e))

    def log_debug(self, message, **extra):
        if self.options.debug:
            logger.debug(message, extra=extra)


def read_from_binary_file(buffer, options=None):
    """Decode a JPEG buffer with a one-off Exif instance"""
    return Exif(options).read_from_binary_file(buffer)


async def parse(source, options=None):
    """
    Acquire a buffer and decode it

    Args:
        source: bytes, path, file-like object, data URI, http(s) or s3 URL
        options: Options dict, True, Options instance or None

    Returns:
        MetadataResult
    """
    buffer = await read(source)
    return Exif(options).read_from_binary_file(buffer)
