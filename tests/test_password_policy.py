"""
Unit tests for the default password strength policy and the bcrypt helpers.
"""
import unittest

from accounts_backend.services.password_service import hash_password, check_password
from accounts_backend.validators.common_validators import PasswordPolicy, is_strong_password


class TestPasswordPolicy(unittest.TestCase):

    def test_accepts_strong_passwords(self):
        for password in ["Str0ng!Pass", "aB3$efgh", "Ünïcödé9#x"]:
            self.assertTrue(is_strong_password(password), f"Password '{password}' should be valid")

    def test_rejects_missing_character_classes(self):
        weak = {
            "Sh0rt!": "too short",
            "str0ng!pass": "no uppercase",
            "STR0NG!PASS": "no lowercase",
            "Strong!Pass": "no digit",
            "Str0ngPass1": "no symbol",
        }
        for password, reason in weak.items():
            self.assertFalse(is_strong_password(password), f"Password '{password}' should be rejected ({reason})")

    def test_rejects_non_string(self):
        self.assertFalse(is_strong_password(None))
        self.assertFalse(is_strong_password(12345678))

    def test_rejects_passwords_bcrypt_would_truncate(self):
        self.assertFalse(is_strong_password("Aa1!" + "x" * 69))
        self.assertTrue(is_strong_password("Aa1!" + "x" * 68))

    def test_thresholds_are_configurable(self):
        lenient = PasswordPolicy(min_length=4, min_uppercase=0, min_symbols=0)
        self.assertTrue(lenient("abc1"))
        self.assertFalse(is_strong_password("abc1"))


class TestPasswordHashing(unittest.TestCase):

    def test_hash_is_salted_and_verifiable(self):
        first = hash_password("Str0ng!Pass", rounds=4)
        second = hash_password("Str0ng!Pass", rounds=4)
        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("$2"))
        self.assertTrue(check_password("Str0ng!Pass", first))
        self.assertTrue(check_password("Str0ng!Pass", second.encode("utf-8")))

    def test_wrong_password_does_not_match(self):
        hashed = hash_password("Str0ng!Pass", rounds=4)
        self.assertFalse(check_password("str0ng!pass", hashed))
        self.assertFalse(check_password("", hashed))
        self.assertFalse(check_password("x" * 100, hashed))

    def test_non_bcrypt_stored_value_never_matches(self):
        self.assertFalse(check_password("Str0ng!Pass", "Str0ng!Pass"))
        self.assertFalse(check_password("Str0ng!Pass", None))


if __name__ == "__main__":
    unittest.main()
