"""Command-line entry point: ``simplepush send`` and ``simplepush decrypt``."""

import logging
import sys

from .cipher import decrypt_field, unhexify
from .client import SimplePush
from .config import Settings
from .errors import SimplePushError
from .keys import DEFAULT_SALT, derive_key
from .message import Message
from .payload import assemble


def cli(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog="simplepush", description="Send notifications through simplepush.io")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    send = subparsers.add_parser(
        "send",
        help="Send a notification, end-to-end encrypted when a password is given"
    )
    send.add_argument(
        "message",
        nargs="?",
        default="",
        help="Message body"
    )
    send.add_argument(
        "-k", "--key",
        default=Settings.KEY,
        help="simplepush.io key (defaults to SIMPLEPUSH_KEY)"
    )
    send.add_argument("-t", "--title", default=None, help="Notification title")
    send.add_argument("-e", "--event", default=None, help="Event the notification belongs to")
    send.add_argument(
        "-a", "--action",
        dest="actions",
        action="append",
        default=None,
        help="Feedback action label (repeatable)"
    )
    send.add_argument(
        "-p", "--password",
        default=Settings.PASSWORD,
        help="Encryption password; enables end-to-end encryption"
    )
    send.add_argument(
        "-s", "--salt",
        default=Settings.SALT,
        help="Encryption salt (defaults to the well-known salt)"
    )
    send.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload JSON instead of sending it"
    )

    decrypt = subparsers.add_parser(
        "decrypt",
        help="Decrypt a field of an encrypted payload"
    )
    decrypt.add_argument("token", help="URL-safe base64 ciphertext")
    decrypt.add_argument("--iv", required=True, help="Hex IV from the payload")
    decrypt.add_argument("-p", "--password", default=Settings.PASSWORD, help="Encryption password")
    decrypt.add_argument("-s", "--salt", default=Settings.SALT, help="Encryption salt")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "send":
        if args.password:
            message = Message.with_encryption(
                args.key,
                args.title,
                args.message,
                args.event,
                args.actions,
                args.password,
                args.salt,
            )
        else:
            message = Message.new(args.key, args.title, args.message, args.event, args.actions)
        try:
            if args.dry_run:
                message.validate()
                print(assemble(message).to_json())
            else:
                SimplePush().send(message)
                print("SUCCESS!")
        except SimplePushError as exc:
            print(f"FAIL! {exc}", file=sys.stderr)
            return 1
        return 0

    if args.command == "decrypt":
        if not args.password:
            print("FAIL! password is required for decryption", file=sys.stderr)
            return 1
        key = derive_key(args.password, args.salt or DEFAULT_SALT)
        try:
            plaintext = decrypt_field(key, unhexify(args.iv), args.token)
        except SimplePushError as exc:
            print(f"FAIL! {exc}", file=sys.stderr)
            return 1
        print(plaintext.decode("utf-8", errors="replace"))
        return 0

    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
