"""
XMP segment parser - Adobe XMP (Extensible Metadata Platform)

The JPEG file parser hands over the span of the x:xmpmeta element. Many
producers rely on namespaces declared elsewhere in the packet, so a fixed
set of well-known declarations is added to the root element before the
text is parsed.

Reference: https://www.adobe.com/devnet/xmp.html
"""

from lxml import etree

from ..parser import AppSegmentParserBase
from ..xml_tree import xmp_to_dict

XMP_ROOT = "<x:xmpmeta"

# Declarations added to the root when absent
NAMESPACES = [
    ("Iptc4xmpCore", "http://iptc.org/std/Iptc4xmpCore/1.0/xmlns/"),
    ("xsi", "http://www.w3.org/2001/XMLSchema-instance"),
    ("tiff", "http://ns.adobe.com/tiff/1.0/"),
    ("plus", "http://schemas.android.com/apk/lib/com.google.android.gms.plus"),
    ("ext", "http://www.gettyimages.com/xsltExtension/1.0"),
    ("exif", "http://ns.adobe.com/exif/1.0/"),
    ("stEvt", "http://ns.adobe.com/xap/1.0/sType/ResourceEvent#"),
    ("stRef", "http://ns.adobe.com/xap/1.0/sType/ResourceRef#"),
    ("crs", "http://ns.adobe.com/camera-raw-settings/1.0/"),
    ("xapGImg", "http://ns.adobe.com/xap/1.0/g/img/"),
    ("Iptc4xmpExt", "http://iptc.org/std/Iptc4xmpExt/2008-02-29/"),
]


def inject_namespaces(xmp):
    """
    Declare the well-known namespaces on the x:xmpmeta root

    Prefixes already declared on the root are left alone.
    """
    if not xmp.startswith(XMP_ROOT):
        return xmp

    root_tag = xmp[: xmp.find(">") + 1]
    declarations = [
        f'xmlns:{prefix}="{uri}"'
        for prefix, uri in NAMESPACES
        if f"xmlns:{prefix}=" not in root_tag
    ]
    if not declarations:
        return xmp

    index = len(XMP_ROOT)
    return xmp[:index] + " " + " ".join(declarations) + xmp[index:]


class Xmp(AppSegmentParserBase):
    """Parser for Adobe XMP metadata"""

    type = "xmp"

    def extract(self):
        """Read the x:xmpmeta span and patch its namespace declarations"""
        raw = self.file.get_bytes(self.segment["start"], self.segment["length"])
        return inject_namespaces(raw.decode("utf-8", errors="replace"))

    def parse(self):
        """
        Returns:
            dict with the patched XML text under "xmp" and its tree under
            "xmp_data" (None when the text is not well-formed)
        """
        xmp = self.extract()
        xmp_data = None
        try:
            xmp_data = xmp_to_dict(xmp)
        except etree.XMLSyntaxError as e:
            self.handle_error(e)
        return {"xmp": xmp, "xmp_data": xmp_data}

    def assign_to_output(self, result, parser_output):
        result.xmp = parser_output["xmp"]
        result.xmp_data = parser_output["xmp_data"]
