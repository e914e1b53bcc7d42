"""Cached task repository over a local markdown store and a remote task API."""

__version__ = "0.1.0"
