import pytest

from configlayers.codecs.tomlcodec import TomlCodec

ORIGINAL = """# key-value pair
key = "value"
list = ["item1", "item2", "item3"]

[map]
key = "value"

# nested
# map
[nested_map]
[nested_map.map]
key = "value"
list = [
  "item1",
  "item2",
  "item3",
]
"""

ENCODED = """key = "value"
list = ["item1", "item2", "item3"]

[map]
  key = "value"

[nested_map]

  [nested_map.map]
    key = "value"
    list = ["item1", "item2", "item3"]
"""

DATA = {
    "key": "value",
    "list": ["item1", "item2", "item3"],
    "map": {"key": "value"},
    "nested_map": {
        "map": {
            "key": "value",
            "list": ["item1", "item2", "item3"],
        },
    },
}


def test_encode():
    assert TomlCodec().encode(DATA) == ENCODED.encode()


def test_decode():
    v = {}
    TomlCodec().decode(ORIGINAL.encode(), v)
    assert v == DATA


def test_decode_invalid_data():
    with pytest.raises(ValueError):
        TomlCodec().decode(b"invalid data", {})


def test_encode_quotes_non_bare_keys():
    assert TomlCodec().encode({"a b": 1, "flag": True}) == b'"a b" = 1\nflag = true\n'


def test_encode_rejects_none():
    with pytest.raises(TypeError):
        TomlCodec().encode({"key": None})


def test_array_of_tables_round_trip():
    codec = TomlCodec()
    data = {"servers": [{"name": "a", "port": 1}, {"name": "b", "port": 2}]}
    v = {}
    codec.decode(codec.encode(data), v)
    assert v == data