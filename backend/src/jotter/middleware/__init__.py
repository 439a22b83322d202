"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_identity

__all__ = ["get_current_identity", "JWTBearer"]
