# src/accounts_backend/services/account_service.py
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from pymongo.database import Database

from ..errors import ValidationError, ConflictError, NotFoundError, AuthenticationError
from ..models.user_models import Gender, REQUIRED_FIELDS
from ..repository import user_repo
from ..validators.common_validators import (
    BCRYPT_MAX_BYTES, is_blank, optional_str, validate_date_str, validate_email_str, is_strong_password,
)
from .password_service import hash_password, check_password

logger = logging.getLogger(__name__)

class AccountService:
    """
    Signup and login against an explicitly supplied users database.

    ``password_policy`` is any predicate over the plaintext password;
    ``bcrypt_rounds`` overrides the BCRYPT_ROUNDS setting.
    """

    def __init__(self, db: Database, password_policy: Optional[Callable[[str], bool]] = None,
                 bcrypt_rounds: Optional[int] = None):
        self.db = db
        self.password_policy = password_policy or is_strong_password
        self.bcrypt_rounds = bcrypt_rounds

    def signup(self, username, firstname, lastname, gender, birthdate, region, province,
               city, barangay, email, password) -> dict:
        fields = {
            "username": username, "firstname": firstname, "lastname": lastname, "gender": gender,
            "birthdate": birthdate, "region": region, "city": city, "barangay": barangay,
            "email": email, "password": password,
        }
        missing = [name for name in REQUIRED_FIELDS if is_blank(fields[name])]
        if missing:
            logger.debug(f"Signup rejected, missing fields: {missing}")
            raise ValidationError("All fields are required")

        if "@" in str(username):
            raise ValidationError("Username cannot contain '@'")
        email = validate_email_str(str(email).strip())
        # bcrypt refuses longer input whatever policy is plugged in.
        if not isinstance(password, str) or len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValidationError("Password not strong enough")
        if not self.password_policy(password):
            raise ValidationError("Password not strong enough")

        gender = Gender.from_str(gender)
        birthdate = validate_date_str(birthdate)

        if user_repo.find_user_by_email(self.db, email):
            raise ConflictError("Email already in use")

        doc = {
            "username": str(username).strip(),
            "firstname": str(firstname).strip(),
            "lastname": str(lastname).strip(),
            "gender": gender.value,
            "birthdate": birthdate,
            "region": str(region).strip(),
            "province": optional_str(province),
            "city": str(city).strip(),
            "barangay": str(barangay).strip(),
            "email": email,
            "password": hash_password(password, self.bcrypt_rounds),
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        user_repo.insert_user(self.db, doc)
        logger.info(f"Created account for username '{doc['username']}'")
        return user_repo.to_account_output(doc)

    def login(self, identifier, password) -> dict:
        if is_blank(identifier) or is_blank(password):
            raise ValidationError("All fields are required")

        identifier = str(identifier).strip()
        user = user_repo.find_user_by_identifier(self.db, identifier)
        if not user:
            logger.warning(f"Login failed: no account matches {identifier!r}")
            raise NotFoundError()

        if not check_password(password, user.get("password")):
            logger.warning(f"Login failed: wrong password for {user.get('username')!r}")
            raise AuthenticationError()

        return user_repo.to_account_output(user)
