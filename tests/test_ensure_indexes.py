import importlib.util
import os
import unittest
from unittest import mock

import mongomock

SCRIPT_PATH = os.path.join(os.path.dirname(__file__), "..", "scripts", "ensure_indexes.py")


def load_script():
    spec = importlib.util.spec_from_file_location("ensure_indexes", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestEnsureIndexesScript(unittest.TestCase):

    def test_creates_unique_indexes_on_users_collection(self):
        script = load_script()
        db = mongomock.MongoClient()["accounts_test"]

        with mock.patch.object(script, "connect", return_value=db):
            self.assertEqual(script.ensure(), 0)

        indexes = db["users"].index_information()
        self.assertTrue(indexes["username_unique"]["unique"])
        self.assertTrue(indexes["email_unique"]["unique"])


if __name__ == "__main__":
    unittest.main()
