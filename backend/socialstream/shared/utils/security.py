"""
Security Utilities

Password hashing for stored credentials and session id generation.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation. Verification
goes through passlib, which compares digests in constant time.

Usage:
======
    from socialstream.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")

    if SecurityUtils.verify_password("password123", hashed):
        print("Password matches!")

    session_id = SecurityUtils.generate_session_id()
"""

import secrets

from passlib.context import CryptContext

from socialstream.config.settings import settings


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """Password hashing and session id helpers."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Malformed or unknown hashes count as a mismatch.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False

    @staticmethod
    def generate_session_id() -> str:
        """
        Generate an unguessable session id for a client context.

        Returns:
            URL-safe random token
        """
        return secrets.token_urlsafe(32)
