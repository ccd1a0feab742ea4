"""
Password hashing and verification.

Uses bcrypt with an explicit per-user salt: the salt is generated once at
registration, stored next to the hash, and fed back into ``bcrypt.hashpw``
at login time.
"""

from __future__ import annotations

import hmac

import bcrypt


def generate_salt(rounds: int = 10) -> str:
    """Fresh random bcrypt salt with the given work factor."""
    return bcrypt.gensalt(rounds=rounds).decode()


def hash_password(password: str, salt: str) -> str:
    """Hash ``password`` with ``salt`` (as produced by ``generate_salt``)."""
    return bcrypt.hashpw(password.encode(), salt.encode()).decode()


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    """Recompute the hash with the stored salt and compare in constant time."""
    try:
        candidate = hash_password(password, salt)
    except (ValueError, TypeError):
        # bcrypt refuses input longer than 72 bytes
        return False
    return hmac.compare_digest(candidate.encode(), password_hash.encode())
