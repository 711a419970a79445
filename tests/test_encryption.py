"""
Tests for AES-CFB encryption of personal id numbers
"""

import pytest

from fixup.core.encryption import BLOCK_SIZE, AesEncryptor

KEY = "0123456789abcdef0123456789abcdef"


def test_ciphertext_is_prefixed_with_iv():
    encryptor = AesEncryptor(KEY)
    value = b"01001012345"

    encrypted = encryptor.encrypt(value)

    assert len(encrypted) == BLOCK_SIZE + len(value)
    assert encrypted[BLOCK_SIZE:] != value
    assert encryptor.decrypt(encrypted) == value


def test_random_iv_per_encryption():
    encryptor = AesEncryptor(KEY)

    assert encryptor.encrypt(b"01001012345") != encryptor.encrypt(b"01001012345")


def test_decrypt_rejects_short_input():
    with pytest.raises(ValueError):
        AesEncryptor(KEY).decrypt(b"short")
