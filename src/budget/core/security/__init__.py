"""Security utilities - crypto and response headers.

Re-exports all security-related functions for convenience.
"""

from src.budget.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.budget.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
]
