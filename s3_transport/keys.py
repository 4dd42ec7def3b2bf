"""
Key material used to sign S3 requests.
"""

import os
from typing import Mapping, NamedTuple, Optional

from .constants import ENV_ACCESS_KEY, ENV_SECRET_KEY, ENV_SECURITY_TOKEN
from .exceptions import ConfigurationError


class Keys(NamedTuple):
    """
    S3 access key pair, plus an optional session token.

    Keys are immutable once loaded. The secret and token are kept out of
    repr() so a Keys value can appear in logs and tracebacks.
    """

    access_key: str
    secret_key: str
    security_token: str = ""

    def __repr__(self) -> str:
        token = ", security_token=<hidden>" if self.security_token else ""
        return f"Keys(access_key={self.access_key!r}, secret_key=<hidden>{token})"


def keys_from_environment(environ: Optional[Mapping[str, str]] = None) -> Keys:
    """
    Load keys from S3_ACCESS_KEY, S3_SECRET_KEY and S3_SECURITY_TOKEN.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Keys built from the environment

    Raises:
        ConfigurationError: If the access key or secret key is unset or empty
    """
    if environ is None:
        environ = os.environ

    access_key = environ.get(ENV_ACCESS_KEY, "")
    secret_key = environ.get(ENV_SECRET_KEY, "")

    missing = [
        name for name, value in ((ENV_ACCESS_KEY, access_key), (ENV_SECRET_KEY, secret_key))
        if not value
    ]
    if missing:
        raise ConfigurationError(f"s3: missing environment variables: {', '.join(missing)}")

    return Keys(access_key, secret_key, environ.get(ENV_SECURITY_TOKEN, ""))
