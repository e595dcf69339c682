"""
Password hashing for locally stored user profiles.

Sign-in itself is handled by the external auth provider; accounts created
through OAuth carry an empty password and are never hashed.
"""

from passlib.context import CryptContext

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The hashed password string, or "" when no password was given
    """
    if not password:
        return ""
    return pwd_context.hash(password)
