"""Authentication services."""

from app.services.auth.identity import IdentityProvider, PinIdentityProvider, is_valid_pin

__all__ = [
    "IdentityProvider",
    "PinIdentityProvider",
    "is_valid_pin",
]
