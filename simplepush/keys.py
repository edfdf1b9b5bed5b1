"""Key derivation for end-to-end encrypted messages.

The key is a single SHA-1 pass over ``password + salt``; only the first 16
bytes of the digest are used as the AES-128 key. This is not a password KDF
(no iterations, no work factor), but existing apps derive their keys the same
way, so the concatenation order and the truncation must not change.
"""

from cryptography.hazmat.primitives import hashes

# Default encryption salt, callers should really provide their own
DEFAULT_SALT = "A9F361C70BCB6182"

KEY_SIZE = 16  # AES-128


def derive_key_material(password: str, salt: str) -> bytes:
    digestor = hashes.Hash(hashes.SHA1())
    digestor.update(f"{password}{salt}".encode("utf-8"))
    return digestor.finalize()


def derive_key(password: str, salt: str, size: int = KEY_SIZE) -> bytes:
    """Derive the digest of ``password || salt`` and keep the first ``size`` bytes."""
    material = derive_key_material(password, salt)
    if size > len(material):
        raise ValueError(f"Cannot take {size} key bytes from a {len(material)}-byte digest")
    return material[:size]


__all__ = ["DEFAULT_SALT", "KEY_SIZE", "derive_key", "derive_key_material"]
