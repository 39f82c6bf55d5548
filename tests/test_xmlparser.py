import pytest

from xmlparser import ATTRIBUTES_KEY, TEXT_KEY, XMLParseError, parse


def test_elements_become_occurrence_lists():
    tree = parse(b"<Request><Control><SenderID> sender </SenderID></Control></Request>")
    assert tree == {"request": {"control": [{"senderid": ["sender"]}]}}


def test_empty_tag_is_empty_string():
    tree = parse(b"<request><function><getapisession/></function></request>")
    assert tree["request"]["function"] == [{"getapisession": [""]}]


def test_attributes_are_kept_under_attribute_key():
    tree = parse(b'<request><function controlid="fn-1"><getapisession/></function></request>')
    function = tree["request"]["function"][0]
    assert function[ATTRIBUTES_KEY] == {"controlid": "fn-1"}
    assert function["getapisession"] == [""]


def test_leaf_with_attribute_keeps_text():
    tree = parse(b'<request><keys type="int"> 1 </keys></request>')
    assert tree["request"]["keys"] == [{ATTRIBUTES_KEY: {"type": "int"}, TEXT_KEY: "1"}]


def test_repeated_children_keep_document_order():
    tree = parse(b"<request><keys>1</keys><keys>2</keys></request>")
    assert tree["request"]["keys"] == ["1", "2"]


def test_namespaces_are_dropped():
    tree = parse(b'<request xmlns="urn:example"><control><senderid>a</senderid></control></request>')
    assert tree == {"request": {"control": [{"senderid": ["a"]}]}}


def test_text_whitespace_is_normalized():
    tree = parse(b"<request><object>\n   CUSTOMER\n   RECORD  </object></request>")
    assert tree["request"]["object"] == ["CUSTOMER RECORD"]


def test_bare_ampersand_is_recovered():
    tree = parse(b"<request><senderid>A & B</senderid></request>")
    assert tree["request"]["senderid"] == ["A & B"]


def test_str_input_is_accepted():
    assert parse("<request><a>1</a></request>") == {"request": {"a": ["1"]}}


@pytest.mark.parametrize("body", [b"", b"   \n", None])
def test_empty_body_gives_empty_tree(body):
    assert parse(body) == {}


@pytest.mark.parametrize("body", [b"<request><control></request>", b"not xml at all"])
def test_malformed_xml_raises(body):
    with pytest.raises(XMLParseError):
        parse(body)


def test_parse_error_is_value_error():
    assert issubclass(XMLParseError, ValueError)


def test_attribute_names_keep_their_case():
    tree = parse(b'<Request><Function CONTROLID="fn-1" xmlns:x="urn:x" x:Mode="a"/></Request>')
    assert tree["request"]["function"] == [{ATTRIBUTES_KEY: {"CONTROLID": "fn-1", "Mode": "a"}}]
