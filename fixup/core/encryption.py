# fixup/core/encryption.py
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


class AesEncryptor:
    """AES-CFB with a random IV prepended to the ciphertext."""

    def __init__(self, key: str):
        self.key = key.encode()

    def encrypt(self, value: bytes) -> bytes:
        iv = os.urandom(BLOCK_SIZE)
        encryptor = Cipher(algorithms.AES(self.key), modes.CFB(iv)).encryptor()
        return iv + encryptor.update(value) + encryptor.finalize()

    def decrypt(self, value: bytes) -> bytes:
        if len(value) < BLOCK_SIZE:
            raise ValueError("ciphertext too short")

        iv, body = value[:BLOCK_SIZE], value[BLOCK_SIZE:]
        decryptor = Cipher(algorithms.AES(self.key), modes.CFB(iv)).decryptor()
        return decryptor.update(body) + decryptor.finalize()
