"""
Supabase identity provider.
Runs the OAuth (PKCE) sign-in flow against Supabase Auth.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from supabase import Client

from marketplace.domain.models.base import AuthError
from marketplace.domain.models.identity import Identity
from marketplace.domain.services.identity_provider import IdentityProvider


logger = logging.getLogger(__name__)

# Receives the provider's authorization URL, returns the auth code or None if the user cancelled
Authorizer = Callable[[str], Awaitable[Optional[str]]]


def identity_from_user(user: Any) -> Identity:
    """Build an Identity from a Supabase auth user."""
    metadata = getattr(user, "user_metadata", None) or {}
    return Identity(
        uid=str(user.id),
        email=getattr(user, "email", None),
        display_name=metadata.get("full_name") or metadata.get("name"),
        photo_url=metadata.get("avatar_url") or metadata.get("picture")
    )


class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth social sign-in."""

    def __init__(
        self,
        supabase_client: Client,
        authorizer: Optional[Authorizer] = None,
        provider: str = "google",
        redirect_to: Optional[str] = None
    ):
        self.client = supabase_client
        self.authorizer = authorizer
        self.provider = provider
        self.redirect_to = redirect_to

    async def sign_in_interactive(self) -> Identity:
        """
        Sign in through the configured OAuth provider.

        Returns:
            The signed-in identity

        Raises:
            AuthError: If the flow fails or the user cancels it
        """
        if self.authorizer is None:
            raise AuthError("No interactive authorizer configured")

        options = {"redirect_to": self.redirect_to} if self.redirect_to else {}
        try:
            response = await asyncio.to_thread(
                self.client.auth.sign_in_with_oauth,
                {"provider": self.provider, "options": options}
            )
        except Exception as e:
            raise AuthError(f"Sign in failed: {str(e)}") from e

        try:
            code = await self.authorizer(response.url)
        except Exception as e:
            raise AuthError(f"Sign in was interrupted: {str(e)}", "AUTH_INTERRUPTED") from e

        if not code:
            raise AuthError("Sign in was cancelled", "AUTH_CANCELLED")

        try:
            session = await asyncio.to_thread(
                self.client.auth.exchange_code_for_session,
                {"auth_code": code}
            )
        except Exception as e:
            raise AuthError(f"Sign in failed: {str(e)}") from e

        if session.user is None:
            raise AuthError("Sign in returned no user")

        identity = identity_from_user(session.user)
        logger.info(f"Signed in user {identity.uid} with {self.provider}")
        return identity

    async def sign_out(self) -> None:
        try:
            await asyncio.to_thread(self.client.auth.sign_out)
        except Exception as e:
            raise AuthError(f"Sign out failed: {str(e)}") from e

    async def current_identity(self) -> Optional[Identity]:
        """Return the identity of a persisted session, if one exists."""
        try:
            session = await asyncio.to_thread(self.client.auth.get_session)
        except Exception as e:
            raise AuthError(f"Failed to restore session: {str(e)}") from e

        if session is None or session.user is None:
            return None
        return identity_from_user(session.user)
