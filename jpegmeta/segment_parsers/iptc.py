"""
IPTC segment parser - IPTC metadata (captions, keywords, credits)

IPTC is embedded in Photoshop APP13 segments inside the 8BIM resource
0x0404. Each dataset starts with the tag marker 0x1C followed by the
record number (2 for the application record), the dataset number and a
big-endian 16-bit size.

Reference: http://fileformats.archiveteam.org/wiki/Photoshop_Image_Resources
"""

from ..errors import OutOfRangeError
from ..parser import AppSegmentParserBase
from ..tags import IPTC, tag_keys
from ..util.helpers import pluralize_value

# Tag marker + application record number
DATASET_MARKER = b"\x1c\x02"

# High bit of the size field marks an extended dataset
EXTENDED_SIZE_FLAG = 0x8000


class Iptc(AppSegmentParserBase):
    """Parser for IPTC records located by the JPEG file parser"""

    type = "iptc"

    def parse(self):
        """
        Walk the block one byte at a time looking for dataset markers

        Datasets are not guaranteed to be aligned, so a miss advances by a
        single byte. Repeated fields accumulate into a list. Extended
        datasets (size field with the high bit set) are skipped.

        Returns:
            dict: field name -> str, or list of str for repeated fields
        """
        file = self.file
        names = tag_keys.get(IPTC, {})
        start = self.segment["start"]
        end = start + self.segment["length"]
        output = {}

        offset = start
        while offset < end:
            if file.starts_with(offset, DATASET_MARKER) and offset + 2 < file.byte_length:
                name = names.get(file.get_uint8(offset + 2))
                if name is not None:
                    try:
                        size = file.get_uint16(offset + 3)
                        if size & EXTENDED_SIZE_FLAG:
                            # extended dataset: the low bits give the width of
                            # the real length field, which is not decoded
                            self.log_debug(
                                "Skipping extended IPTC dataset",
                                field=name,
                                offset=offset,
                            )
                            offset += 1
                            continue
                        value = file.get_latin1_string(offset + 5, size)
                    except OutOfRangeError as e:
                        # truncated record: keep what was decoded so far
                        self.record_error(e)
                        break
                    output[name] = pluralize_value(output.get(name), value)
            offset += 1

        return output
