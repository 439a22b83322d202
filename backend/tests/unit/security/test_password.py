"""Unit tests for security/password.py"""

from passlib.hash import bcrypt_sha256

from jotter.security.password import BCRYPT_ROUNDS, hash_password, verify_password


def test_hash_and_verify_roundtrip():
    pwd = "StrongPassw0rd!"
    h = hash_password(pwd)
    assert h != pwd
    assert pwd not in h
    assert verify_password(pwd, h) is True
    assert verify_password("wrong", h) is False


def test_same_password_hashes_differently():
    # fresh salt per hash
    pwd = "password123"
    assert hash_password(pwd) != hash_password(pwd)


def test_uses_configured_cost_factor():
    h = hash_password("password123")
    assert bcrypt_sha256.identify(h)
    assert bcrypt_sha256.from_string(h).rounds == BCRYPT_ROUNDS


def test_long_password_not_truncated():
    base = "x" * 80
    h = hash_password(base + "a")
    assert verify_password(base + "a", h) is True
    assert verify_password(base + "b", h) is False
