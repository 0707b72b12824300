"""
IFD0 tag name dictionary

IFD0 contains basic image information like Make, Model, Orientation, etc.
and the pointers to the EXIF and GPS sub-IFDs.
"""

from ..tags import IFD0, create_dictionary, tag_keys


def load_ifd0_keys():
    """Load IFD0 tag names into global registry"""
    create_dictionary(
        tag_keys,
        IFD0,
        [
            (0x0100, "ImageWidth"),
            (0x0101, "ImageHeight"),
            # Pointers to sub-IFDs
            (0x8769, "ExifIFDPointer"),
            (0x8825, "GPSInfoIFDPointer"),
            (0xA005, "InteroperabilityIFDPointer"),
            # Image data structure
            (0x0102, "BitsPerSample"),
            (0x0103, "Compression"),
            (0x0106, "PhotometricInterpretation"),
            (0x0112, "Orientation"),
            (0x0115, "SamplesPerPixel"),
            (0x011C, "PlanarConfiguration"),
            (0x0212, "YCbCrSubSampling"),
            (0x0213, "YCbCrPositioning"),
            (0x011A, "XResolution"),
            (0x011B, "YResolution"),
            (0x0128, "ResolutionUnit"),
            # Recording offset
            (0x0111, "StripOffsets"),
            (0x0116, "RowsPerStrip"),
            (0x0117, "StripByteCounts"),
            (0x0201, "JPEGInterchangeFormat"),
            (0x0202, "JPEGInterchangeFormatLength"),
            # Image data characteristics
            (0x012D, "TransferFunction"),
            (0x013E, "WhitePoint"),
            (0x013F, "PrimaryChromaticities"),
            (0x0211, "YCbCrCoefficients"),
            (0x0214, "ReferenceBlackWhite"),
            # Other tags
            (0x0132, "DateTime"),
            (0x010E, "ImageDescription"),
            (0x010F, "Make"),
            (0x0110, "Model"),
            (0x0131, "Software"),
            (0x013B, "Artist"),
            (0x8298, "Copyright"),
        ],
    )
