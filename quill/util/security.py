"""Password hashing with Argon2id."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_password_hasher = PasswordHasher()

# Stored hash of an account that has no password
NO_PASSWORD = ""


def hash_password(password: str) -> str:
    """Hash a password.

    The returned string carries its own salt and parameters.
    """
    return _password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> tuple[bool, str | None]:
    """Verify a password against a stored hash.

    Args:
        password: Plain text password
        password_hash: Stored hash, or ``NO_PASSWORD``

    Returns:
        Tuple of (is_valid, new_hash). ``new_hash`` is set when the stored
        hash was made with outdated parameters and should be replaced.
    """
    if password_hash == NO_PASSWORD:
        return False, None

    try:
        _password_hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False, None

    if _password_hasher.check_needs_rehash(password_hash):
        return True, hash_password(password)
    return True, None
