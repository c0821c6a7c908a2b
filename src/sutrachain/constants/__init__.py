"""Shared constants for sutrachain."""
