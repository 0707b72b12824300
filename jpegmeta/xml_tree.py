"""
XML tree conversion for XMP packets.

Turns the x:xmpmeta document into nested dicts: element attributes go under
"@attributes" (qualified prefix:name keys, namespace declarations included),
child elements under their qualified name, text under "#text". A name seen
twice collapses into a list.
"""

from typing import Optional, Union

from lxml import etree

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
TEXT_KEY = "#text"
ATTRIBUTES_KEY = "@attributes"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def _prefix_for(element, uri: Optional[str]) -> Optional[str]:
    if uri is None:
        return None
    if uri == XML_NAMESPACE:
        return "xml"
    for prefix, ns in element.nsmap.items():
        if ns == uri:
            return prefix
    return None


def qualified_name(element, name: str) -> str:
    """Render a Clark-notation name ({uri}local) as prefix:local"""
    qname = etree.QName(name)
    prefix = _prefix_for(element, qname.namespace)
    return f"{prefix}:{qname.localname}" if prefix else qname.localname


def _declared_namespaces(element) -> dict:
    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}
    declared = {}
    for prefix, uri in element.nsmap.items():
        if inherited.get(prefix) != uri:
            key = f"xmlns:{prefix}" if prefix else "xmlns"
            declared[key] = uri
    return declared


def element_attributes(element) -> dict:
    """Namespace declarations followed by the element's own attributes"""
    attributes = _declared_namespaces(element)
    for name, value in element.attrib.items():
        attributes[qualified_name(element, name)] = value
    return attributes


def _append(output: dict, key: str, value) -> None:
    if key not in output:
        output[key] = value
    elif isinstance(output[key], list):
        output[key].append(value)
    else:
        output[key] = [output[key], value]


def _append_text(output: dict, text: Optional[str]) -> None:
    if text and text.strip():
        _append(output, TEXT_KEY, text)


def element_to_dict(element) -> dict:
    """Convert one element and its subtree"""
    output = {}
    attributes = element_attributes(element)
    if attributes:
        output[ATTRIBUTES_KEY] = attributes

    _append_text(output, element.text)
    for child in element:
        # comments and processing instructions carry no metadata
        if isinstance(child.tag, str):
            _append(output, qualified_name(child, child.tag), element_to_dict(child))
        _append_text(output, child.tail)

    return output


def xmp_to_dict(xml: Union[str, bytes]) -> dict:
    """
    Parse an XMP packet and flatten it

    The root element's attributes are copied to the top level next to the
    converted root itself.

    Raises:
        lxml.etree.XMLSyntaxError: when the packet is not well-formed
    """
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    root = etree.fromstring(xml, _parser())

    output = dict(element_attributes(root))
    _append(output, qualified_name(root, root.tag), element_to_dict(root))
    return output
