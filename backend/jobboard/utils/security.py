import secrets
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

ph = PasswordHasher(time_cost=3, memory_cost=65536, parallelism=4)


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(stored_hash: str, password: str) -> bool:
    # Unparseable stored hashes count as a mismatch.
    try:
        return ph.verify(stored_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def password_needs_rehash(stored_hash: str) -> bool:
    """True when the hash was made with weaker parameters than ``ph`` uses now."""
    return ph.check_needs_rehash(stored_hash)


def generate_token() -> str:
    """Opaque session token, 64 hex characters."""
    return secrets.token_hex(32)
