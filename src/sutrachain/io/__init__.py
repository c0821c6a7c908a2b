"""File IO helpers."""

from .json_io import dumps_json, write_json_atomic

__all__ = ["dumps_json", "write_json_atomic"]
