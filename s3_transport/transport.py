"""
Transport adapter that signs requests addressed with the s3:// scheme.

S3Adapter makes an ordinary https request, but it always adds a Date
header (if missing) and an S3 signature. The s3 scheme is only a local
routing marker and never reaches the network.

Example usage:
    import requests
    from s3_transport import S3Adapter, keys_from_environment

    session = requests.Session()
    session.mount("s3://", S3Adapter(keys=keys_from_environment()))
    response = session.get("s3://bucket.s3.amazonaws.com/key")
"""

import email.utils
import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import requests
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.structures import CaseInsensitiveDict

from .constants import HEADER_DATE, SECURE_SCHEME
from .exceptions import ConfigurationError
from .keys import Keys
from .signer import DEFAULT_SERVICE, Signer

logger = logging.getLogger(__name__)

# Used when an S3Adapter has no transport of its own.
DEFAULT_DELEGATE = HTTPAdapter()


def secure_url(url: str) -> str:
    """Return url with its scheme replaced by https; all other parts unchanged."""
    return urlunsplit(urlsplit(url)._replace(scheme=SECURE_SCHEME))


def _text(value):
    if isinstance(value, bytes):
        return value.decode('latin-1')
    return value


def add_header(headers, key: str, value):
    """Add a header value, combining with any existing value for the key."""
    if key in headers:
        headers[key] = f"{_text(headers[key])}, {_text(value)}"
    else:
        headers[key] = value


def copy_headers(dst, src):
    """
    Add every header in src to dst.

    A list or tuple value is a multi-value field; its values are added
    one by one in their original order.
    """
    if src is None:
        return
    for key, value in src.items():
        if isinstance(value, (list, tuple)):
            for v in value:
                add_header(dst, key, v)
        else:
            add_header(dst, key, value)


class S3Adapter(BaseAdapter):
    """
    requests transport adapter that signs and forwards S3 requests.

    Attributes:
        keys: Keys used to sign requests. Must be set before use; see
            keys_from_environment().
        service: Signing strategy. If None, uses DEFAULT_SERVICE.
        transport: Adapter that executes the signed request. If None,
            uses DEFAULT_DELEGATE.

    These are configuration, read on every send() and never written by it.

    requests does not apply ``params=`` to s3:// URLs, so query strings
    must be part of the URL itself. The URL is percent-encoded here the
    same way requests encodes an https URL, before it is signed.
    """

    def __init__(self, keys: Optional[Keys] = None, service: Optional[Signer] = None,
                 transport: Optional[BaseAdapter] = None):
        super().__init__()
        self.keys = keys
        self.service = service
        self.transport = transport

    def __repr__(self) -> str:
        return f"S3Adapter(keys={self.keys!r}, service={self.service!r}, transport={self.transport!r})"

    def prepare(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        """
        Build the outgoing copy of a request.

        The copy gets an https URL, its own header mapping and a Date
        header when the caller did not supply one. The caller's request
        is left untouched.
        """
        r = request.copy()
        # requests leaves non-http URLs unprepared; encode as for https
        r.prepare_url(secure_url(request.url), None)

        r.headers = CaseInsensitiveDict()
        copy_headers(r.headers, request.headers)
        if not r.headers.get(HEADER_DATE):
            r.headers[HEADER_DATE] = email.utils.formatdate(usegmt=True)
        return r

    def send(self, request: requests.PreparedRequest, stream=False, timeout=None,
             verify=True, cert=None, proxies=None) -> requests.Response:
        """
        Sign the request and send it over the delegate transport.

        Returns:
            The delegate's response, unchanged

        Raises:
            ConfigurationError: If no keys are configured. Nothing is sent.
            SigningError: From the signing strategy, unchanged
            requests.RequestException: From the delegate, unchanged
        """
        if self.keys is None:
            raise ConfigurationError("s3: uninitialized keys")

        r = self.prepare(request)

        service = self.service
        if service is None:
            service = DEFAULT_SERVICE
        service.sign(r, self.keys)

        rt = self.transport
        if rt is None:
            rt = DEFAULT_DELEGATE
        logger.debug("Sending %s %s", r.method, r.url)
        return rt.send(r, stream=stream, timeout=timeout, verify=verify,
                       cert=cert, proxies=proxies)

    def close(self):
        """Close the configured transport. The shared default is left open."""
        if self.transport is not None:
            self.transport.close()


# Shared default instance. It has no keys until the application sets
# DEFAULT_TRANSPORT.keys; see registry.register().
DEFAULT_TRANSPORT = S3Adapter()
