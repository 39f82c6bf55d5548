import xml.etree.ElementTree as ET
import io
import re

ATTRIBUTES_KEY = "$"
TEXT_KEY = "_"


class XMLParseError(ValueError):
    pass


def _strip_namespace(name) -> str:
    return name.split("}")[-1] if isinstance(name, str) else str(name)


def _local_name(tag) -> str:
    #tag names are case-insensitive, attribute names are not
    return _strip_namespace(tag).lower()


def _clean_text(text) -> str:
    #collapse runs of whitespace and trim, like a normalizing body parser
    return re.sub(r"\s+", " ", text or "").strip()


def _occurrence(element):
    attributes = {_strip_namespace(k): v for k, v in element.attrib.items()}
    children = list(element)
    text = _clean_text(element.text)
    if not attributes and not children:
        return text

    node = {}
    if attributes:
        node[ATTRIBUTES_KEY] = attributes
    if text:
        node[TEXT_KEY] = text
    for child in children:
        node.setdefault(_local_name(child.tag), []).append(_occurrence(child))
    return node


def _read_root(xml_bytes: bytes):
    try:
        return ET.parse(io.BytesIO(xml_bytes)).getroot()
    except ET.ParseError:
        b = xml_bytes[3:] if xml_bytes.startswith(b'\xef\xbb\xbf') else xml_bytes
        b = re.sub(rb'[\x00-\x08\x0B\x0C\x0E-\x1F]', b'', b)
        b = re.sub(rb'&(?!amp;|lt;|gt;|quot;|apos;|#\d+;|#x[0-9A-Fa-f]+;)', b'&amp;', b)
        try:
            return ET.parse(io.BytesIO(b)).getroot()
        except ET.ParseError as e:
            raise XMLParseError(str(e)) from e


def parse(xml_bytes) -> dict:
    if isinstance(xml_bytes, str):
        xml_bytes = xml_bytes.encode("utf-8")
    if not (xml_bytes or b"").strip():
        return {}
    root_element = _read_root(xml_bytes)
    return {_local_name(root_element.tag): _occurrence(root_element)}
