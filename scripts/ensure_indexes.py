import sys

from pymongo.errors import PyMongoError

from accounts_backend.db import connect, mongo_uri, db_name, users_collection
from accounts_backend.repository import user_repo

def ensure():
    print(f"Connecting to {mongo_uri()}...")
    db = connect()
    print(f"Ensuring indexes on database: {db_name()}")

    # Fails if existing documents already share a username or email.
    try:
        user_repo.ensure_indexes(db)
    except PyMongoError as e:
        print(f"   ❌ Failed to create unique indexes: {e}")
        return 1

    for name in users_collection(db).index_information():
        print(f"   ✅ Index '{name}' present.")
    return 0

if __name__ == "__main__":
    sys.exit(ensure())
