"""Password hashing for login and the demo seed."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256 so passwords longer than
# bcrypt's 72-byte limit are not silently truncated.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash.

    A stored value passlib cannot identify counts as a mismatch, so a corrupt
    row fails the login instead of erroring.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
