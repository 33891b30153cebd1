"""Field checks shared by the service layer and the panel."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    return bool(password) and len(password) >= MIN_PASSWORD_LENGTH


def is_valid_name(name: str) -> bool:
    return bool(name) and len(name.strip()) >= MIN_NAME_LENGTH
