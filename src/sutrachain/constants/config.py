"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "sutrachain.yaml"
