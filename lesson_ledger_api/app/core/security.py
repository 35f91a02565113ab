"""
Credential and login‑cookie helpers.

Passwords are kept in plain text by default, matching the behaviour the
tutoring front end was built against.  This is a known weakness: set
``PASSWORD_HASHING=true`` to store PBKDF2‑HMAC‑SHA256 digests instead.
The helpers below implement both modes behind ``prepare_password`` and
``check_password`` so the user service does not branch on the setting.

The login cookie follows the format written by Express'
``res.cookie('user', {id})``: the value is ``j:`` followed by a JSON
object, URL‑encoded.
"""

import hashlib
import hmac
import json
import os
from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Cookie, HTTPException, status


USER_COOKIE = "user"
PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    holds the salt and hash in hex separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def prepare_password(password: str, hashing: bool) -> str:
    """Return the value to persist for ``password``."""
    return hash_password(password) if hashing else password


def check_password(plain_password: str, stored: str, hashing: bool) -> bool:
    """Compare a submitted password with the stored value."""
    if hashing:
        return verify_password(plain_password, stored)
    return hmac.compare_digest(plain_password.encode("utf-8"), (stored or "").encode("utf-8"))


def encode_user_cookie(user_id: str) -> str:
    """Build the ``user`` cookie value for a logged‑in user."""
    return quote("j:" + json.dumps({"id": user_id}, ensure_ascii=False), safe="")


def decode_user_cookie(raw: Optional[str]) -> Optional[str]:
    """Extract the user id from a ``user`` cookie value.

    Accepts the ``j:``‑prefixed JSON form, a bare JSON object or a plain
    id string.  Returns ``None`` when no id can be recovered.
    """
    if not raw:
        return None
    value = unquote(raw)
    if value.startswith("j:"):
        value = value[2:]
    try:
        data = json.loads(value)
    except ValueError:
        return value or None
    if isinstance(data, dict):
        user_id = data.get("id")
        return str(user_id) if user_id not in (None, "") else None
    if isinstance(data, (str, int)):
        return str(data)
    return None


def get_cookie_user_id(user: Optional[str] = Cookie(None)) -> str:
    """Dependency returning the user id carried by the ``user`` cookie.

    Raises HTTP 401 when the cookie is missing or unreadable.
    """
    user_id = decode_user_cookie(user)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return user_id
