"""
Parser base classes
"""

from aws_lambda_powertools import Logger

from .options import Options
from .plugins import segment_parsers
from .tags import tag_revivers, tag_values
from .util.buffer_view import BufferView
from .util.helpers import format_error

logger = Logger(service="jpegmeta", child=True)


class FileParserBase:
    """
    Base class for file format parsers

    A file parser locates metadata segments and creates one segment parser
    per enabled segment type through the plugin registry.
    """

    def __init__(self, options, file, parsers):
        self.options = options
        self.file = file
        self.parsers = parsers
        self.errors = []

    def create_parser(self, segment_type, segment):
        """Create a segment parser"""
        Parser = segment_parsers.get(segment_type)
        parser = Parser(self.file, segment, self.options)
        self.parsers[segment_type] = parser
        return parser

    def inject_segment(self, segment_type, segment):
        """Create a parser for a located segment when its type is enabled"""
        if segment is not None and self.options.is_enabled(segment_type):
            self.create_parser(segment_type, segment)

    def handle_error(self, error):
        if self.options.silentErrors:
            self.errors.append(format_error(error))
        else:
            raise error

    def log_debug(self, message, **extra):
        if self.options.debug:
            logger.debug(message, extra=extra)


class AppSegmentParserBase:
    """
    Base class for segment parsers (TIFF/EXIF, IPTC, XMP)

    Parsers read the whole file view with absolute offsets; `segment` holds
    the position dict produced by the file parser.
    """

    type = None

    @classmethod
    def can_handle(cls, file, offset):
        """Check if this parser can handle the segment at offset"""
        return False

    def __init__(self, file, segment=None, options=None):
        self.file = self.normalize_input(file)
        self.segment = segment or {}
        self.options = options or Options()
        self.errors = []

    def normalize_input(self, input_data):
        """Normalize input to BufferView"""
        if isinstance(input_data, BufferView):
            return input_data
        return BufferView(input_data)

    def translate_block(self, raw_tags, block_key):
        """
        Translate enum values and revive byte-array values of a block

        Args:
            raw_tags: Dict of tag name to decoded value
            block_key: Block identifier (ifd0, exif, gps, ...)

        Returns:
            dict: Block with translated values (keys are unchanged)
        """
        if not self.options.translateValues:
            return raw_tags

        revivers = tag_revivers.get(block_key, {})
        val_dict = tag_values.get(block_key, {})

        output = {}
        for key, val in raw_tags.items():
            if key in revivers:
                val = revivers[key](val)
            elif key in val_dict:
                val = self.translate_value(val, val_dict[key])
            output[key] = val
        return output

    def translate_value(self, val, tag_enum):
        """Translate a value using tag enum; unmapped values stay raw"""
        try:
            return tag_enum.get(val, val)
        except TypeError:
            # unhashable (array) values are never enum members
            return val

    def handle_error(self, error):
        """Handle parsing error"""
        if self.options.silentErrors:
            self.record_error(error)
        else:
            raise error

    def record_error(self, error):
        self.errors.append(format_error(error))
        self.log_debug(
            "Segment decode error", segment=self.type, error=format_error(error)
        )

    def safe_parse(self, method_name, *args):
        """Call a parse method, routing failures through handle_error"""
        try:
            return getattr(self, method_name)(*args)
        except Exception as e:
            self.handle_error(e)
            return None

    def log_debug(self, message, **extra):
        """Emit decode tracing only when the debug option is set"""
        if self.options.debug:
            logger.debug(message, extra=extra)

    def parse(self):
        raise NotImplementedError

    def assign_to_output(self, result, parser_output):
        """Assign parser output to the MetadataResult"""
        setattr(result, self.type, parser_output)
