"""
Identity provider interface.
Defines the operations the session layer needs from an external identity service.
"""

from abc import ABC, abstractmethod
from typing import Optional

from marketplace.domain.models.identity import Identity


class IdentityProvider(ABC):
    """
    Identity provider interface.
    Implementations raise AuthError when the provider fails or the user cancels.
    """

    @abstractmethod
    async def sign_in_interactive(self) -> Identity:
        """
        Run the interactive sign-in flow and return the signed-in identity.
        Suspends until the user completes or cancels the flow.
        """
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """
        Sign the current user out.
        """
        pass

    @abstractmethod
    async def current_identity(self) -> Optional[Identity]:
        """
        Return the identity of an already established session, if any.
        """
        pass
