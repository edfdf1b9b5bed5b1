"""Outbound notification message and its pre-send validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import ValidationError
from .keys import DEFAULT_SALT


@dataclass
class Message:
    """A notification as the caller describes it.

    ``key`` is the simplepush.io key of the receiving device, ``event`` selects
    the notification channel on the device and ``actions`` are the labels of
    simple feedback buttons. When ``encrypt`` is set, ``password`` and ``salt``
    feed the key derivation.
    """

    key: str
    body: str = ""
    title: Optional[str] = None
    event: Optional[str] = None
    actions: Optional[List[str]] = None
    encrypt: bool = False
    password: Optional[str] = None
    salt: Optional[str] = None

    @classmethod
    def new(
        cls,
        key: str,
        title: Optional[str],
        body: str,
        event: Optional[str] = None,
        actions: Optional[Iterable[str]] = None,
    ) -> "Message":
        return cls(
            key=key,
            body=body,
            title=title,
            event=event,
            actions=list(actions) if actions is not None else None,
        )

    @classmethod
    def with_encryption(
        cls,
        key: str,
        title: Optional[str],
        body: str,
        event: Optional[str],
        actions: Optional[Iterable[str]],
        password: str,
        salt: Optional[str] = None,
    ) -> "Message":
        """Build a message that is encrypted end-to-end; ``salt`` falls back to ``DEFAULT_SALT``."""
        return cls(
            key=key,
            body=body,
            title=title,
            event=event,
            actions=list(actions) if actions is not None else None,
            encrypt=True,
            password=password,
            salt=salt if salt is not None else DEFAULT_SALT,
        )

    def validate(self) -> None:
        if not self.key:
            raise ValidationError("key is required")
        if self.title is None and not self.body:
            raise ValidationError("a message or title is required")
        if self.encrypt and not self.password:
            raise ValidationError("password is required for encryption")


__all__ = ["Message"]
