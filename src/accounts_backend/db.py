# src/accounts_backend/db.py
import os
from typing import Optional
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database

load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))
load_dotenv()

DEFAULT_MONGO_URI = "mongodb://localhost:27017/"
DEFAULT_DB_NAME = "accounts"
USERS_COLLECTION = "users"

def mongo_uri() -> str:
    return os.getenv("MONGO_URI", DEFAULT_MONGO_URI)

def db_name() -> str:
    return os.getenv("DB_NAME", DEFAULT_DB_NAME)

def bcrypt_rounds() -> int:
    return int(os.getenv("BCRYPT_ROUNDS", 10))

def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()

def connect(uri: Optional[str] = None, name: Optional[str] = None) -> Database:
    """
    Builds a MongoClient and returns the configured database handle.
    Callers own the handle and pass it into the repository and service layers.
    """
    client = MongoClient(uri or mongo_uri())
    return client[name or db_name()]

# --- Collection Helpers ---
def users_collection(db: Database):
    return db[USERS_COLLECTION]
