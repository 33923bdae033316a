from configlayers.maps import (
    copy_and_insensitivise_map,
    deep_search,
    flatten_and_merge_map,
    insensitivise_map,
    to_case_insensitive_value,
)


def _given():
    return {
        "Foo": 32,
        "Bar": {
            "ABc": "A",
            "cDE": "B",
        },
    }


EXPECTED = {
    "foo": 32,
    "bar": {
        "abc": "A",
        "cde": "B",
    },
}


def test_copy_and_insensitivise_map():
    given = _given()
    got = copy_and_insensitivise_map(given)
    assert got == EXPECTED
    assert "foo" not in given
    assert "bar" not in given
    assert "ABc" in given["Bar"]


def test_copy_is_independent_of_input():
    given = _given()
    got = copy_and_insensitivise_map(given)
    got["bar"]["abc"] = "changed"
    assert given["Bar"]["ABc"] == "A"


def test_copy_stringifies_non_string_keys():
    got = copy_and_insensitivise_map({"Top": {1: "one", "X": 2}})
    assert got == {"top": {"1": "one", "x": 2}}


def test_to_case_insensitive_value_map():
    assert to_case_insensitive_value(_given()) == EXPECTED


def test_to_case_insensitive_value_scalar():
    assert to_case_insensitive_value("MiXeD") == "MiXeD"
    items = [1, 2]
    assert to_case_insensitive_value(items) is items


def test_insensitivise_map_in_place():
    m = _given()
    insensitivise_map(m)
    assert m == EXPECTED


def test_insensitivise_map_nested_non_string_keys():
    m = {"A": {"B": {True: "x"}}}
    insensitivise_map(m)
    assert m == {"a": {"b": {"true": "x"}}}


def test_deep_search_creates_missing_maps():
    m = {}
    leaf = deep_search(m, ["a", "b"])
    leaf["c"] = 1
    assert m == {"a": {"b": {"c": 1}}}


def test_deep_search_replaces_values():
    m = {"a": "scalar"}
    leaf = deep_search(m, ["a"])
    assert leaf == {}
    assert m == {"a": {}}


def test_deep_search_follows_existing_maps():
    inner = {"x": 1}
    m = {"a": inner}
    assert deep_search(m, ["a"]) is inner


def test_deep_search_empty_path():
    m = {"a": 1}
    assert deep_search(m, []) is m


def test_flatten_and_merge_map():
    data = {
        "key": "value",
        "map": {"Key": "value", "nested": {"X": 1}},
    }
    flat = flatten_and_merge_map({}, data, "", ".")
    assert flat == {"key": "value", "map.key": "value", "map.nested.x": 1}


def test_flatten_and_merge_map_none_shadow():
    flat = flatten_and_merge_map(None, {"a": {"b": 2}}, "", "_")
    assert flat == {"a_b": 2}


def test_flatten_shadowed_prefix():
    shadow = {"map": "kept"}
    flat = flatten_and_merge_map(shadow, {"key": "value"}, "map", ".")
    assert flat == {"map": "kept"}