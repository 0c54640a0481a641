# src/accounts_backend/repository/user_repo.py
import logging
from typing import Optional, Dict, Any
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from ..db import users_collection
from ..errors import ConflictError, InternalError

logger = logging.getLogger(__name__)

UNIQUE_FIELDS = ("username", "email")

def ensure_indexes(db: Database) -> None:
    """Unique indexes are what arbitrate concurrent signups across service instances."""
    for field in UNIQUE_FIELDS:
        users_collection(db).create_index(field, unique=True, name=f"{field}_unique")

def find_user_by_email(db: Database, email: str) -> Optional[dict]:
    try:
        return users_collection(db).find_one({"email": email})
    except PyMongoError as e:
        logger.error(f"Lookup by email failed: {type(e).__name__}: {e}")
        raise InternalError("Could not read user accounts") from e

def find_user_by_identifier(db: Database, identifier: str) -> Optional[dict]:
    """Email match wins over username match so an '@' username can't shadow a real address."""
    try:
        if "@" in identifier:
            user = users_collection(db).find_one({"email": identifier.lower()})
            if user:
                return user
        return users_collection(db).find_one({"username": identifier})
    except PyMongoError as e:
        logger.error(f"Lookup by identifier failed: {type(e).__name__}: {e}")
        raise InternalError("Could not read user accounts") from e

def insert_user(db: Database, doc: Dict[str, Any]) -> None:
    try:
        result = users_collection(db).insert_one(doc)
    except DuplicateKeyError as e:
        field = _duplicate_field(db, doc, e)
        logger.warning(f"Signup lost unique-index race on {field}")
        raise ConflictError(f"{field.capitalize()} already in use") from e
    except PyMongoError as e:
        logger.error(f"Insert failed: {type(e).__name__}: {e}")
        raise InternalError("Could not create user account") from e
    doc["_id"] = result.inserted_id

def _duplicate_field(db: Database, doc: Dict[str, Any], e: DuplicateKeyError) -> str:
    details = e.details or {}
    key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
    for field in UNIQUE_FIELDS:
        if field in key_pattern:
            return field
    # Some servers and drivers omit keyPattern; ask the store which value is taken.
    for field in UNIQUE_FIELDS:
        try:
            if users_collection(db).find_one({field: doc.get(field)}, {"_id": 1}):
                return field
        except PyMongoError:
            break
    return "account"

def to_account_output(doc: dict) -> Optional[dict]:
    if not doc: return None
    birthdate = doc.get("birthdate")
    return {
        "id": str(doc["_id"]) if doc.get("_id") is not None else None,
        "username": doc.get("username"), "firstname": doc.get("firstname"), "lastname": doc.get("lastname"),
        "gender": doc.get("gender"),
        "birthdate": birthdate.strftime("%Y-%m-%d") if hasattr(birthdate, "strftime") else birthdate,
        "region": doc.get("region"), "province": doc.get("province"), "city": doc.get("city"),
        "barangay": doc.get("barangay"), "email": doc.get("email"), "createdAt": doc.get("createdAt"),
    }
