"""
Password hashing and admin token signing.

Passwords are stored as PBKDF2-HMAC-SHA256 ``salthex$hashhex`` strings.
Tokens are HS256 JWTs signed with ``settings.JWT_SECRET``. Nothing in
the service verifies them.
"""
import hashlib
import hmac
import logging
import os
import time
from typing import Any, Dict

from authlib.jose import jwt

from config import settings

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash with a random 16-byte salt, return ``salthex$hashhex``"""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def _is_hashed(stored: str) -> bool:
    salt_hex, sep, hash_hex = stored.partition("$")
    if not sep or not salt_hex or not hash_hex:
        return False
    try:
        bytes.fromhex(salt_hex)
        bytes.fromhex(hash_hex)
    except ValueError:
        return False
    return True


def verify_password(plain_password: str, stored_password: str) -> bool:
    """
    Check a login password against the stored value.

    Hashed values are verified with PBKDF2. Anything else is a legacy
    plaintext password and only matches when ALLOW_PLAINTEXT_PASSWORDS is on.
    """
    if _is_hashed(stored_password):
        salt_hex, hash_hex = stored_password.split("$", 1)
        dk = hashlib.pbkdf2_hmac(
            "sha256", plain_password.encode("utf-8"), bytes.fromhex(salt_hex), PBKDF2_ITERATIONS
        )
        return hmac.compare_digest(dk, bytes.fromhex(hash_hex))

    if not settings.ALLOW_PLAINTEXT_PASSWORDS:
        logger.warning("Admin password is stored as plaintext and plaintext comparison is disabled")
        return False

    logger.warning("INSECURE: comparing admin password as plaintext")
    return hmac.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))


def create_access_token(admin_id: int, email: str) -> str:
    """Sign a token carrying the admin id and email"""
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET is not configured")

    now = int(time.time())
    payload: Dict[str, Any] = {"id": admin_id, "email": email, "iat": now}
    if settings.TOKEN_EXPIRE_MINUTES > 0:
        payload["exp"] = now + settings.TOKEN_EXPIRE_MINUTES * 60

    header = {"alg": settings.JWT_ALGORITHM, "typ": "JWT"}
    token = jwt.encode(header, payload, settings.JWT_SECRET)
    return token.decode("utf-8") if isinstance(token, bytes) else token
