import pytest

from configlayers.flags import Flag, FlagSet


def test_flag_set_mutation_visible_through_visit_all():
    flag_set = FlagSet()
    mutated = {"host": "localhost", "port": "6060", "endpoint": "/public"}
    for name in mutated:
        flag_set.add(name, "", "string")

    flag_set.visit_all(lambda flag: flag.set(mutated[flag.name()]))

    seen = {}
    flag_set.visit_all(lambda flag: seen.update({flag.name(): flag.value_string()}))
    assert seen == mutated


def test_visit_all_sorted_by_name():
    flag_set = FlagSet()
    for name in ["port", "endpoint", "host"]:
        flag_set.add(name)
    names = []
    flag_set.visit_all(lambda flag: names.append(flag.name()))
    assert names == sorted(["port", "endpoint", "host"])


def test_flag_changed_after_set():
    flag = Flag("testflag", "testing")
    assert flag.value_string() == "testing"
    assert flag.has_changed() is False
    flag.set("testing_mutate")
    assert flag.value_string() == "testing_mutate"
    assert flag.has_changed() is True


def test_value_type_reported():
    flag = Flag("count", 3, "int")
    assert flag.value_type() == "int"
    assert flag.value_string() == "3"


def test_bool_flag_round_trip():
    flag = Flag("verbose", False, "bool")
    flag.set(True)
    second = Flag("verbose", flag.value_string(), "bool")
    assert second.value_string() == flag.value_string()
    assert flag.value_string() != Flag("x", False, "bool").value_string()


def test_float_flag_round_trip():
    flag = Flag("ratio", 2.5, "float64")
    assert float(flag.value_string()) == 2.5


def test_invalid_int_set_raises_and_keeps_value():
    flag = Flag("count", 7, "int")
    with pytest.raises(ValueError):
        flag.set("abc")
    assert flag.value_string() == "7"
    assert flag.has_changed() is False


def test_invalid_bool_raises():
    with pytest.raises(ValueError):
        Flag("verbose", "maybe", "bool")


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        Flag("x", "", "complex128")


def test_add_duplicate_raises():
    flag_set = FlagSet()
    flag_set.add("host")
    with pytest.raises(ValueError):
        flag_set.add("host")


def test_lookup():
    flag_set = FlagSet()
    added = flag_set.add("host", "localhost")
    assert flag_set.lookup("host") is added
    assert flag_set.lookup("missing") is None


def test_visit_all_reports_changed_flags_only():
    flag_set = FlagSet()
    flag_set.add("host", "localhost")
    flag_set.add("port", "8080")
    flag_set.lookup("port").set("6060")
    changed = []
    flag_set.visit_all(lambda flag: changed.append((flag.name(), flag.has_changed())))
    assert changed == [("host", False), ("port", True)]