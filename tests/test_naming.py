from __future__ import annotations

import pytest

from stubforge.naming import to_class_name, to_pascal_slug, to_variable_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-thing", "MyThing"),
        ("my_thing", "MyThing"),
        ("my thing", "MyThing"),
        ("my-long_mixed name", "MyLongMixedName"),
        ("my--thing", "MyThing"),
        ("myTHING", "MyTHING"),
        ("MyThing", "MyThing"),
        ("", ""),
        ("2fa-token", "2faToken"),
    ],
)
def test_to_class_name(value, expected):
    assert to_class_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("MyThing", "myThing"),
        ("my-thing", "myThing"),
        ("user_id", "userId"),
        ("", ""),
    ],
)
def test_to_variable_name(value, expected):
    assert to_variable_name(value) == expected


def test_casing_is_ascii_only():
    assert to_class_name("élan-vital") == "élanVital"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-plugin", "MyPlugin"),
        ("my_plugin", "My_plugin"),
        ("plugin", "Plugin"),
        ("a-b-c", "ABC"),
    ],
)
def test_to_pascal_slug_splits_on_hyphens_only(value, expected):
    assert to_pascal_slug(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my\tthing", "My\tThing"),
        ("my\u00a0thing", "My\u00a0thing"),
        ("my\u2003thing", "My\u2003thing"),
    ],
)
def test_only_ascii_whitespace_starts_a_word(value, expected):
    assert to_class_name(value) == expected
