"""
IPTC field name dictionary

Maps the dataset number of an application record (record 2) to the field
name stored in the output. Datasets not listed here are skipped.
"""

from ..tags import IPTC, create_dictionary, tag_keys


def load_iptc_keys():
    """Load IPTC field names into global registry"""
    create_dictionary(
        tag_keys,
        IPTC,
        [
            (0x78, "caption"),
            (0x6E, "credit"),
            (0x19, "keywords"),
            (0x37, "dateCreated"),
            (0x50, "byline"),
            (0x55, "bylineTitle"),
            (0x7A, "captionWriter"),
            (0x69, "headline"),
            (0x74, "copyright"),
            (0x0F, "category"),
        ],
    )
