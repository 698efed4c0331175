"""Unit tests for password hashing."""

from cfh.util.password import hash_password, verify_password


def test_hash_verifies_and_is_salted():
    first = hash_password("Invoice42", rounds=4)
    second = hash_password("Invoice42", rounds=4)

    assert first != second
    assert verify_password("Invoice42", first)
    assert not verify_password("Invoice43", first)


def test_malformed_hash_does_not_verify():
    assert not verify_password("Invoice42", "not-a-bcrypt-hash")
