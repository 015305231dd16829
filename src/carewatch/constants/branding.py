"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "CAREWATCH"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ CAREWATCH",
    "     // intake triage for child welfare notes",
)
STATS_TITLE: str = "Case summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} intake tool"))
