"""Identity providers - issue the stable identity a ballot is keyed by."""

import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

from loguru import logger

from app.errors import InvalidPin
from app.models import Identity

PIN_RE = re.compile(r"^\d{6}$")

IdentityListener = Callable[[Identity | None], None]


def is_valid_pin(pin: str) -> bool:
    """PINs are exactly six digits."""
    return bool(PIN_RE.match(pin or ""))


class IdentityProvider(ABC):
    """Holds the session's current identity and notifies on sign-in/out."""

    def __init__(self):
        self._current: Identity | None = None
        self._listeners: list[IdentityListener] = []
        self._lock = threading.Lock()

    @abstractmethod
    def authenticate(self, credentials) -> Identity:
        """Verify credentials, make the identity current and return it."""

    def current_identity(self) -> Identity | None:
        return self._current

    def on_identity_change(self, callback: IdentityListener) -> Callable[[], None]:
        """Call back on every change; returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe

    def sign_out(self) -> None:
        self._set(None)

    def _set(self, identity: Identity | None) -> None:
        self._current = identity
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(identity)


class PinIdentityProvider(IdentityProvider):
    """Six-digit PIN login; the PIN itself is the voter's identity key."""

    def authenticate(self, credentials: str) -> Identity:
        pin = (credentials or "").strip()
        if not is_valid_pin(pin):
            raise InvalidPin()

        identity = Identity(id=f"pin-{pin}", email="")
        self._set(identity)
        logger.info("PIN session started for {}", identity.id)
        return identity
