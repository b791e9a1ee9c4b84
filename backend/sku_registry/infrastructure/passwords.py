"""Password Hashing: bcrypt digests for stored credentials.

Invariants:
    - Stored value is the bcrypt string ("$2b$<rounds>$..."); salt lives inside it
    - bcrypt reads at most 72 bytes; longer UTF-8 passwords are cut at 72
      on both hash and check, so the two always agree
    - verify_password never raises on a malformed stored value
"""

import bcrypt

_BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, stored: str) -> bool:
    try:
        return bcrypt.checkpw(_secret(password), stored.encode("utf-8"))
    except ValueError:
        return False
