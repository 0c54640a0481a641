# src/accounts_backend/models/user_models.py

from enum import Enum
from ..errors import ValidationError

class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"
    LGBTQ = "LGBTQ"
    PREFER_NOT_TO_ANSWER = "Prefer not to answer"

    @classmethod
    def from_str(cls, value: str):
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValidationError(f"Invalid gender: {value}. Must be one of: {', '.join(get_genders())}")

def get_genders():
    return [e.value for e in Gender]

# Province is the only optional field.
REQUIRED_FIELDS = (
    "username", "firstname", "lastname", "gender", "birthdate",
    "region", "city", "barangay", "email", "password",
)
