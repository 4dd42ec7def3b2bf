"""
Unit tests for adapter registration.
"""

from unittest.mock import Mock

import requests

from s3_transport import (
    S3Adapter,
    DEFAULT_TRANSPORT,
    SCHEME_PREFIX,
    register,
    new_session
)

from conftest import MARKER_HEADER


class TestRegister:
    """Test mounting the adapter on sessions."""

    def test_register_default(self):
        session = requests.Session()

        assert register(session) is True
        assert session.get_adapter("s3://bucket/key") is DEFAULT_TRANSPORT

    def test_register_idempotent(self):
        session = requests.Session()
        register(session)

        assert register(session) is False
        assert list(session.adapters).count(SCHEME_PREFIX) == 1

    def test_register_custom_transport(self, keys):
        session = requests.Session()
        adapter = S3Adapter(keys=keys)

        assert register(session, adapter) is True
        assert session.get_adapter("s3://bucket/key") is adapter

    def test_register_replaces_other_adapter(self, keys):
        session = requests.Session()
        register(session)
        adapter = S3Adapter(keys=keys)

        assert register(session, adapter) is True
        assert session.get_adapter("s3://bucket/key") is adapter

    def test_register_leaves_http_alone(self):
        session = requests.Session()
        https = session.get_adapter("https://example.com/")

        register(session)

        assert session.get_adapter("https://example.com/") is https

    def test_register_unsupported_session(self):
        """Test that registration is skipped for objects without mount()."""
        session = Mock(spec=[])

        assert register(session) is False


class TestNewSession:
    """Test the session helper."""

    def test_default(self):
        session = new_session()

        assert session.get_adapter("s3://bucket/key") is DEFAULT_TRANSPORT

    def test_dedicated_adapter(self, keys, signer, delegate):
        session = new_session(keys=keys, service=signer, transport=delegate)

        adapter = session.get_adapter("s3://bucket/key")
        assert adapter is not DEFAULT_TRANSPORT
        assert adapter.keys is keys
        assert adapter.service is signer
        assert adapter.transport is delegate

    def test_dispatch(self, keys, signer, delegate):
        with new_session(keys=keys, service=signer, transport=delegate) as session:
            response = session.get("s3://example/object")

        assert response.status_code == 200
        assert delegate.sent[0].url == "https://example/object"
        assert delegate.sent[0].headers[MARKER_HEADER] == "1"
        assert delegate.closed is True
