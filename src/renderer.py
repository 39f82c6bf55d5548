from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Mapping

from outcome import Error, ValidationOutcome

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
MEDIA_TYPE = "application/xml"
SUCCESS_MESSAGE = "Request processed successfully"
PLACEHOLDER_CUSTOMER_ID = "CUST-12345"


@dataclass(frozen=True)
class RenderedResponse:
    status_code: int
    body: bytes
    media_type: str = MEDIA_TYPE


def _build(parent: ET.Element, name: str, value: Any) -> None:
    element = ET.SubElement(parent, name)
    if isinstance(value, Mapping):
        for key, child in value.items():
            _build(element, key, child)
    elif value is not None:
        element.text = str(value)


def _document(response: Mapping[str, Any]) -> bytes:
    root = ET.Element("response")
    for key, value in response.items():
        _build(root, key, value)
    ET.indent(root, space="  ")
    return (XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n").encode("utf-8")


def render_error(message: str, status_code: int = 400) -> RenderedResponse:
    body = _document({"status": "error", "message": message})
    return RenderedResponse(status_code=status_code, body=body)


def render_success() -> RenderedResponse:
    body = _document({
        "status": "success",
        "message": SUCCESS_MESSAGE,
        "data": {
            "CUSTOMER": {
                "CUSTOMERID": PLACEHOLDER_CUSTOMER_ID,
            }
        },
    })
    return RenderedResponse(status_code=200, body=body)


def render(outcome: ValidationOutcome) -> RenderedResponse:
    if isinstance(outcome, Error):
        return render_error(outcome.message)
    return render_success()
