"""Service for the local session: who is signed in, if anyone.

There is no credential check anywhere in here. ``LocalIdentityProvider``
fabricates a user record for whichever provider button was chosen; a real
deployment would supply an ``IdentityProvider`` that talks to the provider.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from urllib.parse import quote_plus

from taskpad_cli.models import PROVIDERS, Provider, User
from taskpad_cli.models.exceptions import UnknownProviderError
from taskpad_cli.repositories import UserRepository

logger = logging.getLogger(__name__)

AVATAR_URL = "https://ui-avatars.com/api/?name={name}&size=64"

_DISPLAY_NAMES: dict[str, str] = {
    "facebook": "Facebook User",
    "google": "Google User",
    "demo": "Demo User",
}

_ID_PREFIXES: dict[str, str] = {
    "facebook": "fb",
    "google": "google",
}


class IdentityProvider(ABC):
    """Port for obtaining a user identity from a login provider."""

    @abstractmethod
    def obtain_identity(self, provider: Provider) -> User:
        """Return the identity the provider vouches for."""


class LocalIdentityProvider(IdentityProvider):
    """Fabricates identities locally.

    facebook and google users get a time-based id, the demo user always has
    the id ``demo``.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock

    def obtain_identity(self, provider: Provider) -> User:
        if provider not in PROVIDERS:
            raise UnknownProviderError(provider)

        if provider == "demo":
            user_id = "demo"
        else:
            user_id = f"{_ID_PREFIXES[provider]}_{int(self._clock() * 1000)}"

        name = _DISPLAY_NAMES[provider]
        return User(
            id=user_id,
            name=name,
            avatar=AVATAR_URL.format(name=quote_plus(name)),
            provider=provider,
        )


class AuthService:
    """Session gate: decides between the login screen and the task app."""

    def __init__(
        self,
        user_repository: UserRepository,
        identity_provider: IdentityProvider | None = None,
    ):
        self.repository = user_repository
        self.identity_provider = identity_provider or LocalIdentityProvider()
        self.current_user: User | None = user_repository.load()

    def is_authenticated(self) -> bool:
        """Check if a user record is persisted."""
        return self.current_user is not None

    def login(self, provider: str) -> User:
        if provider not in PROVIDERS:
            raise UnknownProviderError(provider)

        user = self.identity_provider.obtain_identity(provider)  # type: ignore[arg-type]
        self.repository.save(user)
        self.current_user = user
        logger.info("logged in as %s via %s", user.id, provider)
        return user

    def logout(self) -> None:
        self.repository.clear()
        if self.current_user is not None:
            logger.info("logged out %s", self.current_user.id)
        self.current_user = None
