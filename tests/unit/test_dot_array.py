"""
Unit tests for dotted-path lookup.
"""

import pytest

from strictval.utils import dot_array_search, has_key

DATA = {
    "foo": None,
    "user": {"name": "Ann", "tags": ["a", "b"], "address": {"zip": "12345"}},
    "a.b": "literal",
}


@pytest.mark.parametrize(
    "path,expected",
    [
        ("foo", True),
        ("user.name", True),
        ("user.tags.1", True),
        ("user.tags.-1", True),
        ("user.address.zip", True),
        ("a.b", True),
        ("bar", False),
        ("user.email", False),
        ("user.tags.2", False),
        ("user.tags.x", False),
        ("user.name.first", False),
        ("user.tags.--1", False),
        ("user.tags.²", False),
        ("user.tags.１", False),
        ("user.tags.+1", False),
    ],
)
def test_has_key(path, expected):
    assert has_key(DATA, path) is expected


def test_dot_array_search():
    assert dot_array_search("user.address.zip", DATA) == "12345"
    assert dot_array_search("user.tags.0", DATA) == "a"
    assert dot_array_search("a.b", DATA) == "literal"
    assert dot_array_search("foo", DATA) is None
    assert dot_array_search("missing", DATA, default="x") == "x"


@pytest.mark.parametrize("field", ["items.--1", "items.²"])
def test_malformed_index_reads_as_absent(engine, field):
    result = engine.set_rules({field: "if_exist|required", "copy": f"matches[{field}]"}).run(
        {"items": [1, 2, 3], "copy": 1}
    )

    assert result.fields[field].skipped is True
    assert result.fields["copy"].failed_rules == ["matches"]
