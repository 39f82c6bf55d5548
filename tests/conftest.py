import copy
import pytest

VALID_TREE = {
    "request": {
        "control": [{
            "senderid": ["sender"],
            "password": ["secret"],
            "controlid": ["ctl-1"],
            "uniqueid": ["false"],
            "dtdversion": ["3.0"],
            "includewhitespace": ["false"],
        }],
        "operation": [{
            "authentication": [{"sessionid": ["sess-1"]}],
            "content": [{
                "function": [{
                    "$": {"controlid": "fn-1"},
                    "readbyname": [{
                        "object": ["CUSTOMER"],
                        "keys": ["1"],
                        "fields": ["CUSTOMERID"],
                    }],
                }],
            }],
        }],
    }
}

VALID_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<request>
  <control>
    <senderid>sender</senderid>
    <password>secret</password>
    <controlid>ctl-1</controlid>
    <uniqueid>false</uniqueid>
    <dtdversion>3.0</dtdversion>
    <includewhitespace>false</includewhitespace>
  </control>
  <operation>
    <authentication>
      <sessionid>sess-1</sessionid>
    </authentication>
    <content>
      <function controlid="fn-1">
        <readbyname>
          <object>CUSTOMER</object>
          <keys>1</keys>
          <fields>CUSTOMERID</fields>
        </readbyname>
      </function>
    </content>
  </operation>
</request>
"""

SUCCESS_DOCUMENT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<response>\n"
    "  <status>success</status>\n"
    "  <message>Request processed successfully</message>\n"
    "  <data>\n"
    "    <CUSTOMER>\n"
    "      <CUSTOMERID>CUST-12345</CUSTOMERID>\n"
    "    </CUSTOMER>\n"
    "  </data>\n"
    "</response>\n"
).encode("utf-8")


@pytest.fixture
def tree():
    return copy.deepcopy(VALID_TREE)


@pytest.fixture
def valid_xml():
    return VALID_XML


@pytest.fixture
def success_document():
    return SUCCESS_DOCUMENT
