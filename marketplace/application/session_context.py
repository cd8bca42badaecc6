"""
Session context.
Holds the signed-in identity and a loading flag for the running application,
and notifies subscribers on every transition.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from marketplace.domain.models.identity import Identity
from marketplace.domain.services.identity_provider import IdentityProvider


logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle state derived from identity and the action in flight."""
    INITIALIZING = "initializing"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    SIGNING_OUT = "signing_out"


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of the session handed to subscribers."""

    identity: Optional[Identity]
    loading: bool
    state: SessionState

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


SessionListener = Callable[[SessionSnapshot], None]


class SessionContext:
    """
    Application-wide authentication state.

    Starts loading with no identity until initialize() has asked the
    provider for an established session. sign_in() and sign_out() toggle
    loading while the provider works and always settle it back to False.
    """

    def __init__(self, provider: IdentityProvider):
        self.provider = provider
        self._identity: Optional[Identity] = None
        self._loading = True
        self._state = SessionState.INITIALIZING
        self._listeners: List[SessionListener] = []

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(identity=self._identity, loading=self._loading, state=self._state)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for session transitions.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: SessionState, loading: bool, identity: Optional[Identity]) -> None:
        self._state = state
        self._loading = loading
        self._identity = identity
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _settle(self) -> None:
        state = SessionState.AUTHENTICATED if self._identity else SessionState.UNAUTHENTICATED
        self._transition(state, False, self._identity)

    async def initialize(self) -> Optional[Identity]:
        """Restore an already established session, if the provider has one."""
        try:
            self._identity = await self.provider.current_identity()
        except Exception as e:
            logger.error(f"Error restoring session: {str(e)}")
        finally:
            self._settle()
        return self._identity

    async def sign_in(self) -> Optional[Identity]:
        """
        Run the provider's interactive sign-in.

        Returns:
            The signed-in identity, or None if sign-in failed or was cancelled
        """
        self._transition(SessionState.AUTHENTICATING, True, self._identity)
        try:
            self._identity = await self.provider.sign_in_interactive()
            logger.info(f"User signed in: {self._identity.uid}")
            return self._identity
        except Exception as e:
            logger.error(f"Error signing in: {str(e)}")
            return None
        finally:
            self._settle()

    async def sign_out(self) -> None:
        """
        Sign the current user out.

        Raises:
            AuthError: If the provider fails; the identity is kept
        """
        self._transition(SessionState.SIGNING_OUT, True, self._identity)
        try:
            await self.provider.sign_out()
            self._identity = None
            logger.info("User signed out")
        except Exception as e:
            logger.error(f"Error signing out: {str(e)}")
            raise
        finally:
            self._settle()
