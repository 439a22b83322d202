"""Security utilities."""

from .jwt import create_access_token, decode_access_token, get_user_id_from_payload
from .password import dummy_verify, hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "create_access_token",
    "decode_access_token",
    "get_user_id_from_payload",
]
