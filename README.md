# configlayers

Building blocks for application configuration:

- **Codecs** that turn configuration files into plain nested dictionaries and
  back again: JSON, YAML, TOML, dotenv, INI and Java properties.
- **Registries** that pick an encoder or decoder by format name.
- **Map helpers** for case-insensitive keys, nested lookups and flattening
  nested maps into delimited keys.
- **Utilities** for resolving paths (`$HOME`, environment variables) and
  parsing human-readable sizes such as `1GB` or `12 mb`.
- **A logger interface** taking a message plus key/value pairs, with a
  default implementation on top of the standard `logging` module.
- **A finder** that searches a list of directories for the first config file
  matching a set of names and extensions.
- **Flags** with typed values that remember whether they were changed.

## Installation

```
pip install configlayers
```

Python 3.11 or newer is required. The only runtime dependency is PyYAML.

## Codecs and registries

Each codec has an `encode(v)` method returning bytes and a `decode(b, v)`
method that fills the dictionary `v` in place.

```python
from configlayers.codecs.jsoncodec import JsonCodec
from configlayers.codecs.yamlcodec import YamlCodec
from configlayers.registry import DecoderRegistry, EncoderRegistry

decoders = DecoderRegistry()
decoders.register_decoder("json", JsonCodec())
decoders.register_decoder("yaml", YamlCodec())

settings = {}
decoders.decode("yaml", b"name: demo\nport: 8080\n", settings)
# settings == {"name": "demo", "port": 8080}

encoders = EncoderRegistry()
encoders.register_encoder("json", JsonCodec())
print(encoders.encode("json", settings).decode())
```

Registering a second codec for a format raises
`DecoderFormatAlreadyRegisteredError` / `EncoderFormatAlreadyRegisteredError`;
asking for an unknown format raises `DecoderNotFoundError` /
`EncoderNotFoundError`. All of them derive from `EncodingError`. Any object
with matching `encode` / `decode` methods can be registered (see the
`Encoder` and `Decoder` protocols).

The codecs:

| Module                                  | Class              | Notes |
|-----------------------------------------|--------------------|-------|
| `configlayers.codecs.jsoncodec`         | `JsonCodec`        | Indented output, keys sorted. |
| `configlayers.codecs.yamlcodec`         | `YamlCodec`        | Block style, keys sorted. |
| `configlayers.codecs.tomlcodec`         | `TomlCodec`        | Plain values first, then indented tables. |
| `configlayers.codecs.dotenvcodec`       | `DotenvCodec`      | Keys flattened with `_` and upper-cased on encode; `$VAR` expansion on decode. |
| `configlayers.codecs.inicodec`          | `IniCodec`         | Top-level keys decode under `DEFAULT`; `%(name)s` interpolation. |
| `configlayers.codecs.propertiescodec`   | `PropertiesCodec`  | Keeps decoded properties so a later encode preserves order and comments. |

`IniCodec` and `PropertiesCodec` take a `key_delimiter` (default `"."`) used
to flatten nested maps on encode and rebuild them on decode. Malformed input
raises `ValueError` (or the parser's own error for JSON, YAML and TOML).

## Map helpers

```python
from configlayers.maps import copy_and_insensitivise_map, deep_search, flatten_and_merge_map

copy_and_insensitivise_map({"Foo": 32, "Bar": {"ABc": "A"}})
# {"foo": 32, "bar": {"abc": "A"}}

tree = {}
deep_search(tree, ["server", "http"])["port"] = 80
# tree == {"server": {"http": {"port": 80}}}

flatten_and_merge_map({}, tree, "", ".")
# {"server.http.port": 80}
```

`insensitivise_map` lower-cases keys in place, and
`to_case_insensitive_value` returns a lower-cased copy of a dictionary and
any other value unchanged.

## Utilities and logging

```python
from configlayers.logger import StdLogger, format_log_message
from configlayers.util import abs_pathify, parse_size_in_bytes, user_home_dir

abs_pathify(StdLogger(), "$HOME/app")  # absolute, cleaned path
parse_size_in_bytes("12 mb")           # 12582912
format_log_message("opened", "path", "/tmp/x")  # "opened path=/tmp/x"
```

`ConfigParseError` wraps an underlying error with the message
`While parsing config: ...`.

## Finding config files

```python
from configlayers.finder import Finder

finder = Finder(
    paths=["etc/config", "home/user"],
    file_names=["config"],
    extensions=["yaml", "json"],
)
path = finder.find("/")  # path relative to the root, or "" when nothing is found
```

Set `without_extension=True` to also try each file name on its own.

## Flags

```python
from configlayers.flags import FlagSet

flags = FlagSet()
flags.add("host", "localhost", "string")
flags.add("port", 8080, "int")
flags.lookup("host").set("example.com")
flags.visit_all(lambda flag: print(flag.name(), flag.value_string(), flag.has_changed()))
```

Supported flag types are `string`, `bool`, `int` and `float64`.

## What this package does not do

It provides the pieces only. There is no central configuration object that
merges defaults, files, environment variables and flags into one lookup,
no binding of flags to configuration keys, no reading from remote key/value
stores, no watching of files for changes, and no HCL codec.

## Running the tests

```
pip install -e ".[test]"
pytest
```