"""
S3 signing transport for requests

A transport adapter that turns requests for s3:// URLs into signed
https requests to an S3-compatible service.

Example usage:
    from s3_transport import keys_from_environment, new_session

    session = new_session(keys=keys_from_environment())
    response = session.get("s3://bucket.s3.amazonaws.com/key")
"""

import logging

from .transport import (
    S3Adapter,
    DEFAULT_DELEGATE,
    DEFAULT_TRANSPORT,
    add_header,
    copy_headers,
    secure_url
)
from .signer import Signer, Service, DEFAULT_SERVICE, sign
from .keys import Keys, keys_from_environment
from .registry import register, new_session
from .exceptions import (
    S3TransportError,
    ConfigurationError,
    SigningError
)
from .constants import (
    SCHEME,
    SCHEME_PREFIX,
    SECURE_SCHEME,
    HEADER_DATE,
    HEADER_AUTHORIZATION,
    HEADER_SECURITY_TOKEN,
    DEFAULT_DOMAIN,
    DEFAULT_CONFIG
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "s3-transport contributors"
__all__ = [
    "S3Adapter",
    "DEFAULT_DELEGATE",
    "DEFAULT_TRANSPORT",
    "add_header",
    "copy_headers",
    "secure_url",
    "Signer",
    "Service",
    "DEFAULT_SERVICE",
    "sign",
    "Keys",
    "keys_from_environment",
    "register",
    "new_session",
    "S3TransportError",
    "ConfigurationError",
    "SigningError",
    "SCHEME",
    "SCHEME_PREFIX",
    "SECURE_SCHEME",
    "HEADER_DATE",
    "HEADER_AUTHORIZATION",
    "HEADER_SECURITY_TOKEN",
    "DEFAULT_DOMAIN",
    "DEFAULT_CONFIG"
]
