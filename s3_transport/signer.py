"""
Request signing strategies for the S3 transport.

A signing strategy is any object with a ``sign(request, keys)`` method
that adds authentication material to a requests.PreparedRequest in
place. Service implements the S3 HMAC-SHA1 header scheme:

    Authorization: AWS <access key>:<base64(HMAC-SHA1(secret, string to sign))>
"""

import base64
import hashlib
import hmac
import logging
from typing import List
from urllib.parse import parse_qsl, urlsplit

import requests

from .constants import (
    AMZ_HEADER_PREFIX,
    DEFAULT_CONFIG,
    HEADER_AMZ_DATE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_MD5,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_SECURITY_TOKEN,
    SIGNED_SUBRESOURCES
)
from .exceptions import ConfigurationError, SigningError
from .keys import Keys

logger = logging.getLogger(__name__)


def _header_value(value) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_header_value(v) for v in value)
    if isinstance(value, bytes):
        return value.decode('latin-1')
    return value


class Signer:
    """Base class for request signing strategies."""

    def sign(self, request: requests.PreparedRequest, keys: Keys) -> None:
        """
        Add authentication material to the request in place.

        Args:
            request: The prepared request to sign
            keys: Key pair to sign with
        """
        raise NotImplementedError("Subclasses must implement sign")


class Service(Signer):
    """
    Signs requests for an S3-compatible service.

    The domain decides how virtual-hosted bucket names are recovered
    from the request host: ``bucket.s3.<domain>`` signs as ``/bucket``,
    the bare domain signs with no bucket, and any other host is treated
    as a CNAME for a bucket of the same name.
    """

    def __init__(self, **config):
        """
        Initialize the service.

        Args:
            **config: Configuration options (domain)
        """
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()
        self.domain = self.config['domain'].lower()

    def _validate_config(self):
        """Validate service configuration."""
        if not self.config['domain']:
            raise ConfigurationError("domain cannot be empty")

    def __repr__(self) -> str:
        return f"Service(domain={self.domain!r})"

    def _check_keys(self, keys: Keys):
        """Reject key material that cannot produce a valid Authorization header."""
        if not keys.access_key:
            raise SigningError("s3: empty access key")
        if ":" in keys.access_key:
            raise SigningError("s3: access key must not contain ':'")
        if not keys.secret_key:
            raise SigningError("s3: empty secret key")

    def sign(self, request: requests.PreparedRequest, keys: Keys) -> None:
        """
        Sign the request with an S3 Authorization header.

        Sets X-Amz-Security-Token first when the keys carry a session
        token, so the token is covered by the signature.

        Raises:
            SigningError: If the keys are malformed
        """
        self._check_keys(keys)

        if keys.security_token:
            request.headers[HEADER_SECURITY_TOKEN] = keys.security_token

        string_to_sign = self.string_to_sign(request)
        logger.debug("Signing %s %s", request.method, self.canonical_resource(request.url))

        secret = keys.secret_key
        if isinstance(secret, str):
            secret = secret.encode('utf-8')
        mac = hmac.new(secret, string_to_sign.encode('utf-8'), hashlib.sha1)
        signature = base64.b64encode(mac.digest()).decode('ascii')

        request.headers[HEADER_AUTHORIZATION] = f"AWS {keys.access_key}:{signature}"

    def string_to_sign(self, request: requests.PreparedRequest) -> str:
        """
        Build the canonical string covered by the signature.

        Format:
            METHOD \\n Content-MD5 \\n Content-Type \\n Date \\n
            <x-amz-* headers> <canonical resource>

        The Date line is left empty when X-Amz-Date is present.
        """
        headers = request.headers
        date = "" if HEADER_AMZ_DATE in headers else _header_value(headers.get(HEADER_DATE, ""))

        parts = [
            (request.method or "").upper(),
            _header_value(headers.get(HEADER_CONTENT_MD5, "")),
            _header_value(headers.get(HEADER_CONTENT_TYPE, "")),
            date,
        ]
        return "\n".join(parts) + "\n" + self.canonical_amz_headers(headers) + \
            self.canonical_resource(request.url)

    def canonical_amz_headers(self, headers) -> str:
        """Render x-amz-* headers as sorted ``name:value`` lines."""
        amz = {}
        for key, value in headers.items():
            name = key.lower()
            if not name.startswith(AMZ_HEADER_PREFIX):
                continue
            value = _header_value(value)
            amz[name] = f"{amz[name]},{value}" if name in amz else value
        return "".join(f"{name}:{amz[name]}\n" for name in sorted(amz))

    def canonical_resource(self, url: str) -> str:
        """Build the resource part: bucket, path and signed subresources."""
        split = urlsplit(url)
        resource = self._vhost_bucket(split.hostname or "") + (split.path or "/")

        subresources: List[str] = []
        for key, value in parse_qsl(split.query, keep_blank_values=True):
            if key in SIGNED_SUBRESOURCES:
                subresources.append(f"{key}={value}" if value else key)
        if subresources:
            resource += "?" + "&".join(sorted(subresources))
        return resource

    def _vhost_bucket(self, host: str) -> str:
        host = host.lower()
        if not host or host == self.domain:
            return ""
        if host.endswith("." + self.domain):
            # bucket.s3.amazonaws.com, bucket.s3-eu-west-1.amazonaws.com
            prefix = host[:-len(self.domain) - 1]
            dot = prefix.rfind(".")
            if dot == -1:
                return ""
            return "/" + prefix[:dot]
        # CNAME
        return "/" + host


DEFAULT_SERVICE = Service()


def sign(request: requests.PreparedRequest, keys: Keys) -> None:
    """Sign the request in place using DEFAULT_SERVICE."""
    DEFAULT_SERVICE.sign(request, keys)
