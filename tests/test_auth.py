"""Tests for the static identity provider."""

from __future__ import annotations

import pytest

from carewatch.auth import StaticIdentityProvider
from carewatch.config import CarewatchConfig
from carewatch.config.model import AccountConfig
from carewatch.exceptions import AuthenticationError


@pytest.mark.parametrize("username", ["admin", "user", "organization"])
def test_default_accounts_resolve_to_their_role(username: str) -> None:
    provider = StaticIdentityProvider(CarewatchConfig().accounts)

    assert provider.authenticate(username, "123") == username


@pytest.mark.parametrize(
    ("username", "password"),
    [("admin", "wrong"), ("nobody", "123"), ("admin", "")],
    ids=["bad_password", "unknown_user", "empty_password"],
)
def test_rejects_bad_credentials(username: str, password: str) -> None:
    provider = StaticIdentityProvider(CarewatchConfig().accounts)

    with pytest.raises(AuthenticationError):
        provider.authenticate(username, password)


def test_custom_accounts() -> None:
    provider = StaticIdentityProvider([AccountConfig(username="linh", password="s3cret", role="organization")])

    assert provider.authenticate("linh", "s3cret") == "organization"
    with pytest.raises(AuthenticationError):
        provider.authenticate("admin", "123")
