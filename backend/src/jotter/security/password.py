"""Password hashing utilities."""

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10

# bcrypt_sha256 pre-hashes with SHA-256 so passwords over bcrypt's 72-byte
# limit aren't silently truncated. Every hash gets its own random salt.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__default_rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Burn roughly the time of a real verify, for logins with no matching account."""
    pwd_context.dummy_verify()
