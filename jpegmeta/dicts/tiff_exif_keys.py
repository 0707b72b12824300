"""
EXIF tag name dictionary

EXIF (Exchangeable Image File Format) contains detailed camera settings
like ISO, aperture, shutter speed, focal length, etc.
"""

from ..tags import EXIF, create_dictionary, tag_keys


def load_exif_keys():
    """Load EXIF tag names into global registry"""
    create_dictionary(
        tag_keys,
        EXIF,
        [
            # Version tags
            (0x9000, "ExifVersion"),
            (0xA000, "FlashpixVersion"),
            # Colorspace
            (0xA001, "ColorSpace"),
            # Image configuration
            (0xA002, "PixelXDimension"),
            (0xA003, "PixelYDimension"),
            (0x9101, "ComponentsConfiguration"),
            (0x9102, "CompressedBitsPerPixel"),
            # User information
            (0x927C, "MakerNote"),
            (0x9286, "UserComment"),
            # Related file
            (0xA004, "RelatedSoundFile"),
            # Date and time
            (0x9003, "DateTimeOriginal"),
            (0x9004, "DateTimeDigitized"),
            (0x9290, "SubsecTime"),
            (0x9291, "SubsecTimeOriginal"),
            (0x9292, "SubsecTimeDigitized"),
            # Picture-taking conditions
            (0x829A, "ExposureTime"),
            (0x829D, "FNumber"),
            (0x8822, "ExposureProgram"),
            (0x8824, "SpectralSensitivity"),
            (0x8827, "ISOSpeedRatings"),
            (0x8828, "OECF"),
            (0x9201, "ShutterSpeedValue"),
            (0x9202, "ApertureValue"),
            (0x9203, "BrightnessValue"),
            (0x9204, "ExposureBias"),
            (0x9205, "MaxApertureValue"),
            (0x9206, "SubjectDistance"),
            (0x9207, "MeteringMode"),
            (0x9208, "LightSource"),
            (0x9209, "Flash"),
            (0x9214, "SubjectArea"),
            (0x920A, "FocalLength"),
            (0xA20B, "FlashEnergy"),
            (0xA20C, "SpatialFrequencyResponse"),
            (0xA20E, "FocalPlaneXResolution"),
            (0xA20F, "FocalPlaneYResolution"),
            (0xA210, "FocalPlaneResolutionUnit"),
            (0xA214, "SubjectLocation"),
            (0xA215, "ExposureIndex"),
            (0xA217, "SensingMethod"),
            (0xA300, "FileSource"),
            (0xA301, "SceneType"),
            (0xA302, "CFAPattern"),
            (0xA401, "CustomRendered"),
            (0xA402, "ExposureMode"),
            (0xA403, "WhiteBalance"),
            (0xA404, "DigitalZoomRation"),
            (0xA405, "FocalLengthIn35mmFilm"),
            (0xA406, "SceneCaptureType"),
            (0xA407, "GainControl"),
            (0xA408, "Contrast"),
            (0xA409, "Saturation"),
            (0xA40A, "Sharpness"),
            (0xA40B, "DeviceSettingDescription"),
            (0xA40C, "SubjectDistanceRange"),
            # Other tags
            (0xA005, "InteroperabilityIFDPointer"),
            (0xA420, "ImageUniqueID"),
        ],
    )
