import pytest

from fluentreq.http.cookie import Cookie, cookie_header


def test_cookie_create():
    assert str(Cookie("key", "val")) == "key=val"
    assert Cookie("key", "val").name == "key"
    assert Cookie("key", "val").value == "val"
    assert Cookie("key", "val") == ("key", "val")


@pytest.mark.parametrize(
    "line,expected",
    [
        ("", []),
        ("   ", []),
        (";;", []),
        ("a=1", [Cookie("a", "1")]),
        ("a=1;b=2", [Cookie("a", "1"), Cookie("b", "2")]),
        ("a=1; b=2; c=3", [Cookie("a", "1"), Cookie("b", "2"), Cookie("c", "3")]),
        (" a = 1 ; ; b=2=3 ", [Cookie("a", "1"), Cookie("b", "2=3")]),
        ("\ta=1\t;\tb=2", [Cookie("a", "1"), Cookie("b", "2")]),
        ("flag", [Cookie("flag", "")]),
        ("empty=", [Cookie("empty", "")]),
        ("token=abc==", [Cookie("token", "abc==")]),
    ],
)
def test_split_parse(line: str, expected: list[Cookie]):
    assert Cookie.split_parse(line) == expected


def test_split_parse_keeps_duplicates_in_order():
    assert Cookie.split_parse("a=1; b=2; a=3") == [Cookie("a", "1"), Cookie("b", "2"), Cookie("a", "3")]


def test_cookie_header():
    assert cookie_header({}) == ""
    assert cookie_header({"a": "1"}) == "a=1"
    assert cookie_header({"a": "1", "b": "2=3"}) == "a=1; b=2=3"
