"""Constants for the JSON case store file."""

from __future__ import annotations

STORE_FORMAT_VERSION: int = 1
STORE_TEMP_PREFIX: str = ".tmp-cases-"
STORE_TEMP_SUFFIX: str = ".json"
