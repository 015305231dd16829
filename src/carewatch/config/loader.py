"""Config loading and normalization for Carewatch."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from carewatch.config.model import AccountConfig, CarewatchConfig
from carewatch.constants.cases import VALID_ROLES
from carewatch.constants.config import (
    ALLOWED_ACCOUNT_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_RULE_KEYS,
    CONFIG_FILENAME,
    DEFAULT_STORE_PATH,
)
from carewatch.constants.rules import PERCENT_MAX, PERCENT_MIN
from carewatch.constants.scoring import SEVERITY_PRECEDENCE, VALID_SEVERITIES
from carewatch.exceptions import ConfigError
from carewatch.types import LevelRule, RuleTable
from carewatch.types.config import DEFAULT_RULE_TABLE

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> CarewatchConfig:
    """Load and validate config from ``carewatch.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CarewatchConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    rules_raw = raw.get("rules", {})
    if rules_raw is None:
        rules_raw = {}
    if not isinstance(rules_raw, dict):
        raise ConfigError("rules must be a mapping")

    range_context = raw.get("range_context", DEFAULT_RULE_TABLE.range_context)
    if not isinstance(range_context, str) or not range_context.strip():
        raise ConfigError("range_context must be a non-empty string")

    store_path = raw.get("store_path", DEFAULT_STORE_PATH)
    if not isinstance(store_path, str) or not store_path.strip():
        raise ConfigError("store_path must be a non-empty string")

    accounts_raw = raw.get("accounts")
    if accounts_raw is not None and not isinstance(accounts_raw, dict):
        raise ConfigError("accounts must be a mapping")

    rules = replace(
        _build_rule_table(rules_raw),
        range_context=range_context.strip().lower(),
    )
    config = CarewatchConfig(rules=rules, store_path=store_path.strip())
    if accounts_raw is not None:
        config = replace(config, accounts=_build_accounts(accounts_raw))

    logger.info("Loaded config from %s", path)
    return config


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _build_range(value: Any, key_name: str) -> tuple[int, int] | None:
    """Validate a ``[min, max]`` pair inside ``[0, 100]`` with ``min < max``."""
    if value is None:
        return None
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(item, int) and not isinstance(item, bool) for item in value)
    ):
        raise ConfigError(f"{key_name} must be a [min, max] pair of integers")
    low, high = value
    if not PERCENT_MIN <= low < high <= PERCENT_MAX:
        raise ConfigError(f"{key_name} must satisfy {PERCENT_MIN} <= min < max <= {PERCENT_MAX}, got {list(value)}")
    return (low, high)


def _build_rule_table(raw: dict[str, Any]) -> RuleTable:
    """Overlay per-level overrides on the default rule table.

    The resulting table always lists levels in severity precedence order,
    whatever order the YAML mapping uses.
    """
    unknown_levels = sorted(str(level) for level in raw if level not in VALID_SEVERITIES)
    if unknown_levels:
        raise ConfigError(
            f"rules has unknown level(s): {', '.join(unknown_levels)}; expected one of {sorted(VALID_SEVERITIES)}"
        )

    levels: list[tuple[Any, LevelRule]] = []
    for level in SEVERITY_PRECEDENCE:
        default = DEFAULT_RULE_TABLE.rule_for(level)  # type: ignore[arg-type]
        override = raw.get(level)
        if override is None:
            levels.append((level, default))
            continue
        if not isinstance(override, dict):
            raise ConfigError(f"rules.{level} must be a mapping")
        unknown = sorted(str(key) for key in override if key not in ALLOWED_RULE_KEYS)
        if unknown:
            raise ConfigError(f"rules.{level} has unknown key(s): {', '.join(unknown)}")

        keywords = default.keywords
        if "keywords" in override:
            keywords = tuple(
                kw.strip().lower()
                for kw in _ensure_string_list(override["keywords"], f"rules.{level}.keywords")
                if kw.strip()
            )
        percent_range = default.percent_range
        if "range" in override:
            percent_range = _build_range(override["range"], f"rules.{level}.range")
        levels.append((level, LevelRule(keywords=keywords, percent_range=percent_range)))

    return replace(DEFAULT_RULE_TABLE, levels=tuple(levels))


def _build_accounts(raw: dict[str, Any]) -> tuple[AccountConfig, ...]:
    """Build stub login accounts from the ``accounts`` mapping."""
    accounts: list[AccountConfig] = []
    for username, entry in raw.items():
        key_name = f"accounts.{username}"
        if not isinstance(entry, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        unknown = sorted(str(key) for key in entry if key not in ALLOWED_ACCOUNT_KEYS)
        if unknown:
            raise ConfigError(f"{key_name} has unknown key(s): {', '.join(unknown)}")
        password = entry.get("password")
        if not isinstance(password, str) or not password:
            raise ConfigError(f"{key_name}.password must be a non-empty string")
        role = entry.get("role")
        if role not in VALID_ROLES:
            raise ConfigError(f"{key_name}.role must be one of {sorted(VALID_ROLES)}, got {role!r}")
        accounts.append(AccountConfig(username=str(username), password=password, role=role))
    return tuple(accounts)
