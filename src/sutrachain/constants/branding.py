"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SUTRACHAIN"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SUTRACHAIN",
    "     // composable Paninian rule chains",
)
CLASSIFY_SUMMARY_TITLE: str = "Classification summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} word-form classifier"))
