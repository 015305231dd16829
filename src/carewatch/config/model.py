"""Config data model for Carewatch."""

from __future__ import annotations

from dataclasses import dataclass, field

from carewatch.constants.config import DEFAULT_ACCOUNTS, DEFAULT_STORE_PATH
from carewatch.types import Role, RuleTable
from carewatch.types.config import DEFAULT_RULE_TABLE


@dataclass(frozen=True)
class AccountConfig:
    """A stub login account for the static identity provider."""

    username: str
    password: str
    role: Role


def _default_accounts() -> tuple[AccountConfig, ...]:
    return tuple(
        AccountConfig(username=username, password=password, role=role)  # type: ignore[arg-type]
        for username, (password, role) in DEFAULT_ACCOUNTS.items()
    )


@dataclass(frozen=True)
class CarewatchConfig:
    """Resolved tool config."""

    rules: RuleTable = DEFAULT_RULE_TABLE
    store_path: str = DEFAULT_STORE_PATH
    accounts: tuple[AccountConfig, ...] = field(default_factory=_default_accounts)
