"""
Pytest configuration and shared fixtures for jcheck tests.

Provides immutable test documents from the json.org JSON_checker suite and
small helpers shared across test modules.
"""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds a test document and whether the validator must reject it.
    """

    description: str
    input_data: bytes
    should_fail: bool = False


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that must be rejected.

    fail1.json (a bare string payload) and fail18.json (19 levels of
    nesting) are valid under RFC 8259 with the default depth limit, so
    they live in json_pass_cases instead.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail2.json
        b'["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        b'{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail4.json
        b'["extra comma",]',
        # https://json.org/JSON_checker/test/fail5.json
        b'["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        b'[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail7.json
        b'["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        b'["Extra close"]]',
        # https://json.org/JSON_checker/test/fail9.json
        b'{"Extra comma": true,}',
        # https://json.org/JSON_checker/test/fail10.json
        b'{"Extra value after close": true} "misplaced quoted value"',
        # https://json.org/JSON_checker/test/fail11.json
        b'{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        b'{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail13.json
        b'{"Numbers cannot have leading zeroes": 013}',
        # https://json.org/JSON_checker/test/fail14.json
        b'{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail15.json
        b'["Illegal backslash escape: \\x15"]',
        # https://json.org/JSON_checker/test/fail16.json
        b"[\\naked]",
        # https://json.org/JSON_checker/test/fail17.json
        b'["Illegal backslash escape: \\017"]',
        # https://json.org/JSON_checker/test/fail19.json
        b'{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        b'{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        b'{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        b'["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        b'["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        b"['single quote']",
        # https://json.org/JSON_checker/test/fail25.json
        b'["\ttab\tcharacter\tin\tstring\t"]',
        # https://json.org/JSON_checker/test/fail26.json
        b'["tab\\   character\\   in\\  string\\  "]',
        # https://json.org/JSON_checker/test/fail27.json
        b'["line\nbreak"]',
        # https://json.org/JSON_checker/test/fail28.json
        b'["line\\\nbreak"]',
        # https://json.org/JSON_checker/test/fail29.json
        b"[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        b"[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        b"[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        b'{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        b'["mismatch"}',
        # https://code.google.com/archive/p/simplejson/issues/3
        b'["A\x1fZ control characters in string"]',
    ]

    return [
        JsonTestCase(
            description=f"fail case {idx}", input_data=doc, should_fail=True
        )
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides documents that must be accepted.

    Covers the JSON_checker pass files plus the two fail files that
    RFC 8259 no longer considers invalid.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=b"""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data=b'[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data=b"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
""",
        ),
        JsonTestCase(
            description="fail1.json - scalar payload is valid per RFC 8259",
            input_data=b'"A JSON payload should be an object or array."',
        ),
        JsonTestCase(
            description="fail18.json - 20 levels is within the default depth",
            input_data=b'[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides one minimal document per JSON value type.
    """
    return [
        JsonTestCase("null value", b"null"),
        JsonTestCase("true boolean", b"true"),
        JsonTestCase("false boolean", b"false"),
        JsonTestCase("integer", b"42"),
        JsonTestCase("negative integer", b"-17"),
        JsonTestCase("float", b"3.14"),
        JsonTestCase("empty string", b'""'),
        JsonTestCase("simple string", b'"hello"'),
        JsonTestCase("empty array", b"[]"),
        JsonTestCase("empty object", b"{}"),
        JsonTestCase("simple array", b"[1, 2, 3]"),
        JsonTestCase("simple object", b'{"key": "value"}'),
    ]


def nested_arrays(depth: int) -> bytes:
    """Returns a balanced document of depth nested arrays."""
    return b"[" * depth + b"]" * depth
