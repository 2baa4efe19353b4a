"""
Credential codec.

Reversible basic-auth style encoding of a username/password pair into the
single ``auth`` string stored on disk. This is obfuscation, not encryption.
"""

import base64
import binascii
from typing import Tuple

from regconfig.errors import DecodeError


def encode_auth(username: str, password: str) -> str:
    """
    Encode credentials into an auth string.

    Args:
        username: Registry username.
        password: Registry password. May contain colons.

    Returns:
        base64 of ``"username:password"``.
    """
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_auth(auth: str) -> Tuple[str, str]:
    """
    Decode an auth string into (username, password).

    An empty string decodes to two empty strings so that "no credentials"
    stays distinguishable from malformed ones.

    Args:
        auth: base64 encoded ``"username:password"``.

    Returns:
        Tuple of (username, password).

    Raises:
        DecodeError: If the value is not valid base64, not UTF-8 text, or
            has no ``:`` separator.
    """
    if not auth:
        return "", ""

    try:
        decoded = base64.b64decode(auth, validate=True)
    except (binascii.Error, ValueError):
        raise DecodeError()

    try:
        text = decoded.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodeError()

    username, sep, password = text.partition(":")
    if not sep:
        raise DecodeError()

    return username, password.strip("\x00")
