"""Configuration defaults, filenames and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "carewatch.yaml"
DEFAULT_STORE_PATH: str = "carewatch-cases.json"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"rules", "range_context", "store_path", "accounts"})
ALLOWED_RULE_KEYS: frozenset[str] = frozenset({"keywords", "range"})
ALLOWED_ACCOUNT_KEYS: frozenset[str] = frozenset({"password", "role"})

# Stub accounts for the static identity provider. Replace with a real provider.
DEFAULT_ACCOUNTS: dict[str, tuple[str, str]] = {
    "admin": ("123", "admin"),
    "user": ("123", "user"),
    "organization": ("123", "organization"),
}
