import secrets
import string

PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$"


def generate_password(length: int = 12) -> str:
    """Random password drawn uniformly from PASSWORD_ALPHABET (68 characters)."""
    if length <= 0:
        raise ValueError("Password length must be positive")
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
