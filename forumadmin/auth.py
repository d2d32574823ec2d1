"""Password hashing for forum accounts.

bcrypt_sha256 runs every password through HMAC-SHA256 before bcrypt, so
passwords longer than bcrypt's 72-byte input limit are hashed in full.
"""
from __future__ import annotations

from passlib.context import CryptContext

import config

pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=config.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """One-way hash for storage. Salted, so equal passwords hash differently."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)
