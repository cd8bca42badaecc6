"""
Domain service interfaces.
Ports for the external identity and file storage services.
"""

from .identity_provider import IdentityProvider
from .object_storage import ObjectStorage

__all__ = [
    "IdentityProvider",
    "ObjectStorage",
]
