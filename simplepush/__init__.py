"""simplepush: send notifications through the simplepush.io API, optionally end-to-end encrypted."""

from .cipher import decrypt_field, encrypt_field, generate_iv, hexify
from .client import SimplePush, send
from .config import API_URL
from .errors import DecryptionFailed, EncryptionFailed, SendFailed, SimplePushError, ValidationError
from .keys import DEFAULT_SALT, derive_key, derive_key_material
from .message import Message
from .payload import Payload, assemble
from .version import __version__

__all__ = [
    "API_URL",
    "DEFAULT_SALT",
    "DecryptionFailed",
    "EncryptionFailed",
    "Message",
    "Payload",
    "SendFailed",
    "SimplePush",
    "SimplePushError",
    "ValidationError",
    "__version__",
    "assemble",
    "decrypt_field",
    "derive_key",
    "derive_key_material",
    "encrypt_field",
    "generate_iv",
    "hexify",
    "send",
]
