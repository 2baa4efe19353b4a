"""
Credential data models.

In memory an AuthConfig always holds decoded plaintext credentials; the
obfuscated ``auth`` field only exists in the serialized form.
"""

from dataclasses import dataclass
from typing import Any, Dict

from regconfig.auth.codec import decode_auth, encode_auth
from regconfig.errors import DecodeError, InvalidAuthConfigError


@dataclass
class AuthConfig:
    """Credentials for a single registry server."""

    username: str = ""
    password: str = ""
    auth: str = ""
    email: str = ""
    server_address: str = ""

    @property
    def has_credentials(self) -> bool:
        """Check if a username or password is set."""
        return bool(self.username or self.password)

    def to_entry(self) -> Dict[str, str]:
        """
        Build the on-disk entry for this record.

        The returned dict carries only the encoded ``auth`` string and the
        email; plaintext fields and the server address are left out. The
        record itself is not modified.
        """
        return {
            "auth": encode_auth(self.username, self.password),
            "email": self.email,
        }

    @classmethod
    def from_entry(cls, server_address: str, entry: Dict[str, Any]) -> "AuthConfig":
        """
        Build a decoded record from an on-disk entry.

        Args:
            server_address: Map key the entry was stored under.
            entry: Dict with optional ``auth`` and ``email`` keys.

        Raises:
            DecodeError: If the auth string is malformed.
            InvalidAuthConfigError: If the email is not a string.
        """
        auth = entry.get("auth") or ""
        email = entry.get("email") or ""
        if not isinstance(auth, str):
            raise DecodeError()
        if not isinstance(email, str):
            raise InvalidAuthConfigError(f"Invalid email for {server_address!r} in auth config file")

        username, password = decode_auth(auth)
        return cls(
            username=username,
            password=password,
            email=email,
            server_address=server_address,
        )
