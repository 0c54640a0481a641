# src/accounts_backend/validators/common_validators.py
import string
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from ..errors import ValidationError

BCRYPT_MAX_BYTES = 72

def is_blank(value: Any) -> bool:
    if value is None: return True
    if isinstance(value, str): return not value.strip()
    return False

def optional_str(value: Any) -> Optional[str]:
    if is_blank(value): return None
    return str(value).strip()

def validate_date_str(value: Any) -> datetime:
    """
    Accepts a date, a datetime, or a 'YYYY-MM-DD' string and returns a naive
    datetime at midnight, which is how BSON stores calendar dates.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return datetime(value.year, value.month, value.day)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        parsed = datetime.strptime(str(value).strip(), "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"Invalid date: {value}. Expected format YYYY-MM-DD")
    return parsed

def validate_email_str(value: str) -> str:
    """Returns the normalized, lower-cased address or raises ValidationError."""
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Email not valid")
    return result.normalized.lower()


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Default strength predicate for new passwords.

    Any ``Callable[[str], bool]`` can replace it in AccountService; this one
    counts character classes and rejects passwords bcrypt would truncate.
    """
    min_length: int = 8
    min_lowercase: int = 1
    min_uppercase: int = 1
    min_digits: int = 1
    min_symbols: int = 1
    max_bytes: int = BCRYPT_MAX_BYTES

    def __call__(self, password: str) -> bool:
        if not isinstance(password, str):
            return False
        if len(password) < self.min_length:
            return False
        if len(password.encode("utf-8")) > self.max_bytes:
            return False

        lowercase = sum(1 for c in password if c.islower())
        uppercase = sum(1 for c in password if c.isupper())
        digits = sum(1 for c in password if c.isdigit())
        symbols = sum(1 for c in password if c in string.punctuation or not (c.isalnum() or c.isspace()))

        return (
            lowercase >= self.min_lowercase
            and uppercase >= self.min_uppercase
            and digits >= self.min_digits
            and symbols >= self.min_symbols
        )


is_strong_password = PasswordPolicy()
