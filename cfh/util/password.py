"""Password hashing utilities (bcrypt)."""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plain-text password
        rounds: bcrypt work factor

    Returns:
        The bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False
