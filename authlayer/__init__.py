"""Pluggable authentication backends with selectable password encryption."""

from authlayer.application.services.auth_manager import (
    BACKEND_TYPE_MAP,
    AuthManager,
    resolve_backend,
    resolve_configured_backend,
)
from authlayer.infrastructure.encryption import select_encryption

__all__ = [
    "AuthManager",
    "BACKEND_TYPE_MAP",
    "resolve_backend",
    "resolve_configured_backend",
    "select_encryption",
]
