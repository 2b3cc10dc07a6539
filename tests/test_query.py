import pytest
from dirty_equals import IsList

from fluentreq.http import merge_query


@pytest.mark.parametrize("query", ["", "a=1", "a=1&a=2", "x=%20y&z", "&odd&"])
def test_merge_no_params_keeps_query(query: str):
    assert merge_query(query, {}) is query


def test_merge_appends_after_existing_query():
    assert merge_query("z=1", {"w": ["2"]}) == "z=1&w=2"


def test_merge_empty_query():
    assert merge_query("", {"w": ["2"]}) == "w=2"
    assert merge_query("", {"w": ["2", "3"]}) == "w=2&w=3"


def test_merge_escapes_keys_and_values():
    params = {"a b": ["x y"], "k&=": ["v/?#"], "ä": ["€"]}
    assert merge_query("", params).split("&") == IsList(
        "a+b=x+y",
        "k%26%3D=v%2F%3F%23",
        "%C3%A4=%E2%82%AC",
        check_order=False,
    )


def test_merge_all_pairs_present():
    params = {"b": ["1", "2", "3"], "a": ["x"], "c": [""]}
    result = merge_query("pre=0", params)

    assert result.startswith("pre=0&")
    pairs = result.split("&")
    assert pairs == IsList("pre=0", "b=1", "b=2", "b=3", "a=x", "c=", check_order=False)
    assert len(pairs) == 6
    # values of one key keep their order
    assert [p for p in pairs if p.startswith("b=")] == ["b=1", "b=2", "b=3"]


@pytest.mark.parametrize("query", ["", "a=1"])
@pytest.mark.parametrize("params", [{"k": ["v"]}, {"k": ["v", "w"], "j": ["u"]}])
def test_merge_no_leading_or_trailing_separator(query: str, params: dict[str, list[str]]):
    result = merge_query(query, params)
    assert not result.startswith("&")
    assert not result.endswith("&")
