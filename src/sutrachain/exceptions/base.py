"""Root exception for sutrachain."""

from __future__ import annotations


class SutraChainError(Exception):
    """Base class for all sutrachain errors."""
