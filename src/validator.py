from __future__ import annotations

import logging
from typing import Any, Optional

from envelope import CONTROL_FIELDS, FunctionCall, decode
from outcome import Error, FunctionVariant, Success, ValidationOutcome

MISSING_REQUEST = "Missing <request> element"
MISSING_CONTROL = "Missing <control> element"
INVALID_CONTROL_FIELD = "Missing or invalid <{field}> in <control>"
MISSING_OPERATION = "Missing <operation> element"
MISSING_AUTHENTICATION = "Missing <authentication> element"
INVALID_CREDENTIALS = "Missing or invalid <sessionid> in <authentication>"
MISSING_CONTENT = "Missing <content> element"
MISSING_FUNCTION = "Missing <function> element"
MISSING_VARIANT = "Missing <getapisession>, <readbyname>, or <create> element in <function>"
MISSING_FUNCTION_CONTROLID = "Missing controlid attribute in <function>"
INVALID_READBYNAME = "Missing required fields in <readbyname>: object, keys, or fields"
GETAPISESSION_NOT_EMPTY = "<getapisession> should be a tag without fields"


def _present_variants(function: FunctionCall) -> list[FunctionVariant]:
    #getapisession counts as soon as the tag appears; the others need content
    variants: list[FunctionVariant] = []
    if function.getapisession.present:
        variants.append(FunctionVariant.GET_API_SESSION)
    if function.readbyname.has_content:
        variants.append(FunctionVariant.READ_BY_NAME)
    if function.create.has_content:
        variants.append(FunctionVariant.CREATE)
    return variants


def _check_variants(function: FunctionCall) -> Optional[str]:
    if function.readbyname.has_content and not function.read_by_name().complete:
        return INVALID_READBYNAME
    if function.getapisession.has_content:
        return GETAPISESSION_NOT_EMPTY
    #create payloads are accepted as-is; no field rules exist for them yet
    return None


def _payload(function: FunctionCall, variant: FunctionVariant) -> Any:
    return getattr(function, variant.value).value


def validate(tree: Any) -> ValidationOutcome:
    request = decode(tree)
    if request is None:
        return Error(MISSING_REQUEST)

    control = request.control
    if control is None:
        return Error(MISSING_CONTROL)
    for field in CONTROL_FIELDS:
        if getattr(control, field) is None:
            return Error(INVALID_CONTROL_FIELD.format(field=field))

    operation = request.operation
    if operation is None:
        return Error(MISSING_OPERATION)

    authentication = operation.authentication
    if authentication is None:
        return Error(MISSING_AUTHENTICATION)
    login = authentication.login
    if authentication.sessionid is None and not (login is not None and login.complete):
        return Error(INVALID_CREDENTIALS)

    content = operation.content
    if content is None:
        return Error(MISSING_CONTENT)

    function = content.function
    if function is None:
        return Error(MISSING_FUNCTION)
    logging.debug("Parsed function element: %s", function.raw)

    variants = _present_variants(function)
    if not variants:
        logging.error("Function element is missing or in an unexpected format: %s", function.raw)
        return Error(MISSING_VARIANT)

    if function.controlid is None:
        return Error(MISSING_FUNCTION_CONTROLID)

    problem = _check_variants(function)
    if problem is not None:
        return Error(problem)

    variant = variants[0]
    return Success(function_variant=variant, control_id=function.controlid, payload=_payload(function, variant))
