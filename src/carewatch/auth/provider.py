"""Identity providers.

The core never authenticates anyone; callers resolve a role here and pass it
to every :class:`carewatch.store.CaseStore` call. ``StaticIdentityProvider``
is a stand-in with hard-coded accounts until a real provider is plugged in.
"""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from carewatch.config.model import AccountConfig
from carewatch.exceptions import AuthenticationError
from carewatch.types import Role

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    """Resolves a username/password pair to a role."""

    @abstractmethod
    def authenticate(self, username: str, password: str) -> Role:
        """Return the caller's role or raise AuthenticationError."""


class StaticIdentityProvider(IdentityProvider):
    """Checks credentials against a fixed account list."""

    def __init__(self, accounts: Iterable[AccountConfig]) -> None:
        self._accounts = {account.username: account for account in accounts}

    def authenticate(self, username: str, password: str) -> Role:
        account = self._accounts.get(username)
        if account is None or not hmac.compare_digest(account.password.encode(), password.encode()):
            logger.warning("Login failed for %r", username)
            raise AuthenticationError("Sai tài khoản hoặc mật khẩu")
        return account.role
