"""Registry credential records and the auth string codec."""

from regconfig.auth.codec import encode_auth, decode_auth
from regconfig.auth.models import AuthConfig

__all__ = [
    "AuthConfig",
    "encode_auth",
    "decode_auth",
]
