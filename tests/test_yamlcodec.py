import pytest

from configlayers.codecs.yamlcodec import YamlCodec

ORIGINAL = """# key-value pair
key: value
list:
- item1
- item2
- item3
map:
  key: value

# nested
# map
nested_map:
  map:
    key: value
    list:
    - item1
    - item2
    - item3
"""

ENCODED = """key: value
list:
- item1
- item2
- item3
map:
  key: value
nested_map:
  map:
    key: value
    list:
    - item1
    - item2
    - item3
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
    assert YamlCodec().encode(DATA) == ENCODED.encode()


def test_decode():
    v = {}
    YamlCodec().decode(ORIGINAL.encode(), v)
    assert v == DATA


def test_decode_invalid_data():
    with pytest.raises(ValueError):
        YamlCodec().decode(b"invalid data", {})


def test_decode_empty_document_leaves_map_untouched():
    v = {"existing": 1}
    YamlCodec().decode(b"", v)
    assert v == {"existing": 1}


def test_round_trip():
    codec = YamlCodec()
    v = {}
    codec.decode(codec.encode(DATA), v)
    assert v == DATA