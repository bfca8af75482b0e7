"""Authentication abstraction layer."""

from core.auth.clerk_provider import ClerkAuthProvider
from core.auth.interface import AuthProvider, AuthUser, RequestContext, get_auth_provider

__all__ = ["AuthProvider", "AuthUser", "ClerkAuthProvider", "RequestContext", "get_auth_provider"]
