"""Build the JSON payload for the simplepush.io ``/send`` endpoint."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from .cipher import encrypt_field, generate_iv, hexify
from .keys import DEFAULT_SALT, derive_key
from .message import Message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Payload:
    key: str
    msg: str
    title: Optional[str] = None
    event: Optional[str] = None
    actions: Optional[List[str]] = None
    encrypted: Optional[str] = None
    iv: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form; fields that are ``None`` are left out entirely."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = list(value) if isinstance(value, list) else value
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def assemble(message: Message) -> Payload:
    """Turn a validated message into a payload.

    In encrypted mode the body, the title and every action label are
    encrypted under one freshly derived key and one fresh IV. The key and
    the event always travel in the clear. If any field fails to encrypt,
    the error propagates and no payload is produced.
    """
    if not message.encrypt:
        logger.debug("payload assembled (encrypted=False)")
        return Payload(
            key=message.key,
            msg=message.body,
            title=message.title,
            event=message.event,
            actions=list(message.actions) if message.actions is not None else None,
        )

    salt = message.salt if message.salt is not None else DEFAULT_SALT
    key = derive_key(message.password, salt)
    iv = generate_iv()

    msg = encrypt_field(key, iv, message.body.encode("utf-8"))
    title = None
    if message.title is not None:
        title = encrypt_field(key, iv, message.title.encode("utf-8"))
    actions = None
    if message.actions is not None:
        actions = [encrypt_field(key, iv, label.encode("utf-8")) for label in message.actions]

    logger.debug("payload assembled (encrypted=True)")
    return Payload(
        key=message.key,
        msg=msg,
        title=title,
        event=message.event,
        actions=actions,
        encrypted="true",
        iv=hexify(iv),
    )


__all__ = ["Payload", "assemble"]
