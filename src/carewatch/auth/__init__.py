"""Identity seam: turns credentials into a :data:`carewatch.types.Role`."""

from .provider import IdentityProvider, StaticIdentityProvider

__all__ = ["IdentityProvider", "StaticIdentityProvider"]
