"""Configuration building blocks: format codecs and registries, key maps, path and size helpers, logging, file discovery and flags."""

__version__ = "0.1.0"