# src/accounts_backend/services/password_service.py
from typing import Optional

import bcrypt

from ..db import bcrypt_rounds
from ..validators.common_validators import BCRYPT_MAX_BYTES

def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hashes with a fresh per-account salt; the salt is embedded in the returned hash."""
    salt = bcrypt.gensalt(rounds or bcrypt_rounds())
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

def check_password(password: str, password_hash) -> bool:
    if not isinstance(password, str) or not password or not password_hash:
        return False
    encoded = password.encode('utf-8')
    # Anything longer could never have been hashed at signup.
    if len(encoded) > BCRYPT_MAX_BYTES:
        return False
    if isinstance(password_hash, str):
        password_hash = password_hash.encode('utf-8')
    try:
        return bcrypt.checkpw(encoded, password_hash)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
