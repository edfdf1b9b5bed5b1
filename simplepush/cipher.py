"""AES-128-CBC field encryption with PKCS7 padding and URL-safe base64 output.

Every field of a message is encrypted as its own CBC stream starting from the
same key and IV. Reusing the (key, IV) pair across related plaintexts leaks
equal-prefix information between fields; the receiving apps expect exactly
this layout, so it is kept as is.
"""

import base64
import binascii
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import DecryptionFailed, EncryptionFailed
from .keys import KEY_SIZE

IV_SIZE = 16
BLOCK_BITS = 128
CHUNK_SIZE = 4096


def generate_iv() -> bytes:
    return secrets.token_bytes(IV_SIZE)


def hexify(data: bytes) -> str:
    return "".join(f"{b:02X}" for b in data)


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) != KEY_SIZE:
        raise ValueError(f"Invalid key size ({len(key) * 8}) for AES-128")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt_field(key: bytes, iv: bytes, plaintext: bytes) -> str:
    """Encrypt one field and return its URL-safe base64 ciphertext.

    The plaintext is fed through the padder and the encryptor in
    ``CHUNK_SIZE`` slices; only the complete ciphertext is returned.
    """
    try:
        encryptor = _cipher(key, iv).encryptor()
        padder = padding.PKCS7(BLOCK_BITS).padder()
        out = bytearray()
        view = memoryview(plaintext)
        for offset in range(0, len(view), CHUNK_SIZE):
            out += encryptor.update(padder.update(view[offset:offset + CHUNK_SIZE]))
        out += encryptor.update(padder.finalize())
        out += encryptor.finalize()
    except (ValueError, TypeError) as exc:
        raise EncryptionFailed(f"encryption failed: {exc}", cause=exc) from exc
    return base64.urlsafe_b64encode(bytes(out)).decode("ascii")


def decrypt_field(key: bytes, iv: bytes, token: str) -> bytes:
    """Reverse :func:`encrypt_field`."""
    try:
        ciphertext = base64.urlsafe_b64decode(token.encode("ascii"))
        decryptor = _cipher(key, iv).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except (ValueError, TypeError, binascii.Error) as exc:
        raise DecryptionFailed(f"decryption failed: {exc}", cause=exc) from exc


def unhexify(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise DecryptionFailed(f"Invalid IV hex string: {text!r}", cause=exc) from exc


__all__ = [
    "CHUNK_SIZE",
    "IV_SIZE",
    "decrypt_field",
    "encrypt_field",
    "generate_iv",
    "hexify",
    "unhexify",
]
