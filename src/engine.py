import logging
from xmlparser import parse, XMLParseError
from validator import validate
from outcome import Error, ValidationOutcome
from renderer import render, RenderedResponse


def validate_xml_bytes(xml_bytes: bytes) -> ValidationOutcome:
    try:
        tree = parse(xml_bytes)
    except XMLParseError as e:
        return Error(f"Invalid XML: {e}")
    return validate(tree)


def handle_xml_bytes(xml_bytes: bytes) -> RenderedResponse:
    outcome = validate_xml_bytes(xml_bytes)
    if outcome.ok:
        logging.info("Accepted %s request (controlid=%s)", outcome.function_variant.value, outcome.control_id)
    else:
        logging.info("Rejected request: %s", outcome.message)
    return render(outcome)
