"""
IFD1 tag name dictionary

IFD1 describes the embedded thumbnail. Names follow the EXIF 2.3
standard; a JPEG thumbnail is located by JpegIFOffset and
JpegIFByteCount (aka ThumbnailOffset / ThumbnailLength).
"""

from ..tags import IFD1, create_dictionary, tag_keys


def load_ifd1_keys():
    """Load IFD1 (thumbnail) tag names into global registry"""
    create_dictionary(
        tag_keys,
        IFD1,
        [
            (0x0100, "ImageWidth"),
            (0x0101, "ImageHeight"),
            (0x0102, "BitsPerSample"),
            (0x0103, "Compression"),
            (0x0106, "PhotometricInterpretation"),
            (0x0111, "StripOffsets"),
            (0x0112, "Orientation"),
            (0x0115, "SamplesPerPixel"),
            (0x0116, "RowsPerStrip"),
            (0x0117, "StripByteCounts"),
            (0x011A, "XResolution"),
            (0x011B, "YResolution"),
            (0x011C, "PlanarConfiguration"),
            (0x0128, "ResolutionUnit"),
            (0x0201, "JpegIFOffset"),
            (0x0202, "JpegIFByteCount"),
            (0x0211, "YCbCrCoefficients"),
            (0x0212, "YCbCrSubSampling"),
            (0x0213, "YCbCrPositioning"),
            (0x0214, "ReferenceBlackWhite"),
        ],
    )
