"""Codecs for JSON, YAML, TOML, dotenv, INI and Java properties configuration files."""