"""
Authentication infrastructure.
"""

from .supabase_auth import SupabaseIdentityProvider, Authorizer, identity_from_user

__all__ = [
    "SupabaseIdentityProvider",
    "Authorizer",
    "identity_from_user",
]
