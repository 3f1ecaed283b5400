"""
Security: password hashing.
Passwords are never stored or compared in plain text.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Salted one-way hash for storage."""
    return pwd_context.hash(password)


def verify_password(plain: str | None, hashed: str) -> bool:
    """Constant-time comparison for login and password reset.

    Stored values that are not a known hash (e.g. legacy plaintext rows) never match.
    """
    if plain is None or not pwd_context.identify(hashed):
        return False
    return pwd_context.verify(plain, hashed)
