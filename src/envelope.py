from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from xmlparser import ATTRIBUTES_KEY, TEXT_KEY

CONTROL_FIELDS: tuple[str, ...] = (
    "senderid",
    "password",
    "controlid",
    "uniqueid",
    "dtdversion",
    "includewhitespace",
)

LOGIN_FIELDS: tuple[str, ...] = ("userid", "companyid", "password")

READBYNAME_FIELDS: tuple[str, ...] = ("object", "keys", "fields")


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _occurrences(parent: Any, name: str) -> List[Any]:
    value = _as_dict(parent).get(name)
    return value if isinstance(value, list) else []


def _first(parent: Any, name: str) -> Any:
    occurrences = _occurrences(parent, name)
    return occurrences[0] if occurrences else None


def _has_content(occurrence: Any) -> bool:
    if isinstance(occurrence, str):
        return bool(occurrence.strip())
    if isinstance(occurrence, dict):
        return bool(occurrence)
    return occurrence is not None


def _text(occurrence: Any) -> Optional[str]:
    if isinstance(occurrence, dict):
        occurrence = occurrence.get(TEXT_KEY)
    if occurrence is None:
        return None
    value = str(occurrence).strip()
    return value or None


def _leaf(parent: Any, name: str) -> Optional[str]:
    return _text(_first(parent, name))


def _defined(parent: Any, name: str) -> Optional[str]:
    #an empty tag still counts; only a missing occurrence is None
    occurrence = _first(parent, name)
    if occurrence is None:
        return None
    if isinstance(occurrence, dict):
        occurrence = occurrence.get(TEXT_KEY, "")
    return str(occurrence).strip()


def _attribute(attributes: Dict[str, Any], name: str) -> Optional[str]:
    value = attributes.get(name)
    if value is None or value == "":
        return None
    return str(value)


def _child(parent: Any, name: str) -> Optional[Dict[str, Any]]:
    occurrence = _first(parent, name)
    if not _has_content(occurrence):
        return None
    return _as_dict(occurrence)


@dataclass(frozen=True)
class Node:
    present: bool = False
    has_content: bool = False
    value: Any = None

    @classmethod
    def decode(cls, parent: Any, name: str) -> "Node":
        occurrences = _occurrences(parent, name)
        if not occurrences:
            return cls()
        return cls(present=True, has_content=_has_content(occurrences[0]), value=occurrences[0])


@dataclass(frozen=True)
class Control:
    senderid: Optional[str] = None
    password: Optional[str] = None
    controlid: Optional[str] = None
    uniqueid: Optional[str] = None
    dtdversion: Optional[str] = None
    includewhitespace: Optional[str] = None

    @classmethod
    def decode(cls, control: Dict[str, Any]) -> "Control":
        return cls(**{name: _defined(control, name) for name in CONTROL_FIELDS})


@dataclass(frozen=True)
class Login:
    userid: Optional[str] = None
    companyid: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def decode(cls, login: Dict[str, Any]) -> "Login":
        return cls(**{name: _defined(login, name) for name in LOGIN_FIELDS})

    @property
    def complete(self) -> bool:
        return all(getattr(self, name) is not None for name in LOGIN_FIELDS)


@dataclass(frozen=True)
class Authentication:
    sessionid: Optional[str] = None
    login: Optional[Login] = None

    @classmethod
    def decode(cls, authentication: Dict[str, Any]) -> "Authentication":
        login = _child(authentication, "login")
        return cls(
            sessionid=_defined(authentication, "sessionid"),
            login=Login.decode(login) if login is not None else None,
        )


@dataclass(frozen=True)
class ReadByName:
    object: Optional[str] = None
    keys: Optional[str] = None
    fields: Optional[str] = None
    returnformat: Optional[str] = None
    docparid: Optional[str] = None

    @classmethod
    def decode(cls, readbyname: Any) -> "ReadByName":
        return cls(
            object=_leaf(readbyname, "object"),
            keys=_leaf(readbyname, "keys"),
            fields=_leaf(readbyname, "fields"),
            returnformat=_leaf(readbyname, "returnformat"),
            docparid=_leaf(readbyname, "docparid"),
        )

    @property
    def complete(self) -> bool:
        return all(getattr(self, name) for name in READBYNAME_FIELDS)


@dataclass(frozen=True)
class FunctionCall:
    controlid: Optional[str]
    getapisession: Node
    readbyname: Node
    create: Node
    raw: Dict[str, Any]

    @classmethod
    def decode(cls, function: Dict[str, Any]) -> "FunctionCall":
        attributes = _as_dict(function.get(ATTRIBUTES_KEY))
        return cls(
            controlid=_attribute(attributes, "controlid"),
            getapisession=Node.decode(function, "getapisession"),
            readbyname=Node.decode(function, "readbyname"),
            create=Node.decode(function, "create"),
            raw=function,
        )

    def read_by_name(self) -> ReadByName:
        return ReadByName.decode(self.readbyname.value)


@dataclass(frozen=True)
class Content:
    function: Optional[FunctionCall] = None

    @classmethod
    def decode(cls, content: Dict[str, Any]) -> "Content":
        function = _child(content, "function")
        return cls(function=FunctionCall.decode(function) if function is not None else None)


@dataclass(frozen=True)
class Operation:
    authentication: Optional[Authentication] = None
    content: Optional[Content] = None

    @classmethod
    def decode(cls, operation: Dict[str, Any]) -> "Operation":
        authentication = _child(operation, "authentication")
        content = _child(operation, "content")
        return cls(
            authentication=Authentication.decode(authentication) if authentication is not None else None,
            content=Content.decode(content) if content is not None else None,
        )


@dataclass(frozen=True)
class Request:
    control: Optional[Control] = None
    operation: Optional[Operation] = None


def decode(tree: Any) -> Optional[Request]:
    """Decode a parsed envelope tree into typed sections.

    Every section is optional; a nested element whose first occurrence is
    missing or empty decodes to ``None``. Scalar fields keep an empty tag as
    ``""``, except the readbyname fields, where blank text counts as missing.
    Returns ``None`` when there is no ``request``
    root. Never raises on odd shapes, it only reads what is there.
    """
    root = _as_dict(tree).get("request")
    if isinstance(root, list):
        root = root[0] if root else None
    if not _has_content(root):
        return None
    control = _child(root, "control")
    operation = _child(root, "operation")
    return Request(
        control=Control.decode(control) if control is not None else None,
        operation=Operation.decode(operation) if operation is not None else None,
    )
