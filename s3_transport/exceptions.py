"""
Custom exceptions for the S3 signing transport.

Network failures are not wrapped: they surface as the
requests.exceptions.RequestException raised by the underlying adapter.
"""


class S3TransportError(Exception):
    """Base exception for S3 transport errors."""
    pass


class ConfigurationError(S3TransportError):
    """Raised when keys or transport configuration are missing or invalid."""
    pass


class SigningError(S3TransportError):
    """Raised when a request cannot be signed with the given keys."""
    pass
