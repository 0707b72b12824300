"""
Unit tests for XMP namespace patching and tree conversion.
"""

import pytest
from lxml import etree

import jpegmeta  # noqa: F401
from jpegmeta.options import Options
from jpegmeta.segment_parsers.xmp import NAMESPACES, Xmp, inject_namespaces
from jpegmeta.xml_tree import xmp_to_dict

from conftest import SAMPLE_XMP

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


def make_parser(packet, options=None):
    data = packet.encode("utf-8")
    return Xmp(data, {"start": 0, "length": len(data)}, Options(options))


class TestInjectNamespaces:
    """Tests for the root namespace declarations."""

    def test_declarations_follow_root_name(self):
        patched = inject_namespaces('<x:xmpmeta xmlns:x="adobe:ns:meta/"></x:xmpmeta>')
        assert patched.startswith('<x:xmpmeta xmlns:Iptc4xmpCore="')
        for prefix, uri in NAMESPACES:
            assert f'xmlns:{prefix}="{uri}"' in patched
        assert patched.endswith(' xmlns:x="adobe:ns:meta/"></x:xmpmeta>')

    def test_existing_prefix_is_not_redeclared(self):
        xmp = '<x:xmpmeta xmlns:tiff="http://ns.adobe.com/tiff/1.0/"></x:xmpmeta>'
        patched = inject_namespaces(xmp)
        assert patched.count("xmlns:tiff=") == 1
        assert "xmlns:exif=" in patched

    def test_other_text_is_unchanged(self):
        assert inject_namespaces("<rdf:RDF/>") == "<rdf:RDF/>"

    def test_patched_packet_is_well_formed(self):
        etree.fromstring(inject_namespaces(SAMPLE_XMP).encode("utf-8"))


class TestXmpToDict:
    """Tests for the nested dict rendering."""

    def test_root_attributes_copied_to_top_level(self):
        tree = xmp_to_dict('<x:xmpmeta xmlns:x="adobe:ns:meta/" x:xmptk="XMP Core"/>')
        assert tree["xmlns:x"] == "adobe:ns:meta/"
        assert tree["x:xmptk"] == "XMP Core"
        assert tree["x:xmpmeta"]["@attributes"]["x:xmptk"] == "XMP Core"

    def test_text_children_and_repeats(self):
        tree = xmp_to_dict(inject_namespaces(SAMPLE_XMP))
        description = tree["x:xmpmeta"]["rdf:RDF"]["rdf:Description"]
        assert description["dc:creator"] == {"#text": "Jane Doe"}
        assert description["dc:subject"] == [{"#text": "beach"}, {"#text": "sunset"}]

    def test_qualified_attribute_names(self):
        tree = xmp_to_dict(inject_namespaces(SAMPLE_XMP))
        description = tree["x:xmpmeta"]["rdf:RDF"]["rdf:Description"]
        attributes = description["@attributes"]
        assert attributes["rdf:about"] == ""
        assert attributes["tiff:Orientation"] == "1"
        assert attributes["xmlns:dc"] == "http://purl.org/dc/elements/1.1/"

    def test_namespace_declared_once(self):
        tree = xmp_to_dict(inject_namespaces(SAMPLE_XMP))
        rdf = tree["x:xmpmeta"]["rdf:RDF"]
        assert rdf["@attributes"] == {"xmlns:rdf": RDF}
        assert "xmlns:rdf" not in rdf["rdf:Description"]["@attributes"]

    def test_comments_and_whitespace_are_dropped(self):
        tree = xmp_to_dict(
            '<x:xmpmeta xmlns:x="adobe:ns:meta/">\n  <!-- note -->\n  <x:a>1</x:a>\n</x:xmpmeta>'
        )
        assert tree["x:xmpmeta"] == {
            "@attributes": {"xmlns:x": "adobe:ns:meta/"},
            "x:a": {"#text": "1"},
        }

    def test_malformed_raises(self):
        with pytest.raises(etree.XMLSyntaxError):
            xmp_to_dict("<x:xmpmeta>")


class TestXmpParser:
    """Tests for the segment parser."""

    def test_parse(self):
        output = make_parser(SAMPLE_XMP).parse()
        assert output["xmp"].startswith("<x:xmpmeta xmlns:Iptc4xmpCore=")
        assert output["xmp"].endswith("</x:xmpmeta>")
        assert "x:xmpmeta" in output["xmp_data"]

    def test_malformed_is_collected_when_silent(self):
        parser = make_parser('<x:xmpmeta xmlns:x="adobe:ns:meta/"><a></x:xmpmeta>')
        output = parser.parse()
        assert output["xmp_data"] is None
        assert output["xmp"].startswith("<x:xmpmeta")
        assert parser.errors[0].startswith("XMLSyntaxError")

    def test_malformed_raises_when_not_silent(self):
        parser = make_parser(
            '<x:xmpmeta xmlns:x="adobe:ns:meta/"><a></x:xmpmeta>', {"silentErrors": False}
        )
        with pytest.raises(etree.XMLSyntaxError):
            parser.parse()

    def test_invalid_utf8_is_replaced(self):
        packet = '<x:xmpmeta xmlns:x="adobe:ns:meta/"><x:a>A\udcffB</x:a></x:xmpmeta>'
        data = packet.encode("utf-8", errors="surrogateescape")
        parser = Xmp(data, {"start": 0, "length": len(data)}, Options())
        output = parser.parse()
        assert "�" in output["xmp"]
        tree = output["xmp_data"]["x:xmpmeta"]
        assert tree["x:a"] == {"#text": "A�B"}
