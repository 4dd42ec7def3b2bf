"""
Registration of the S3 adapter with requests sessions.

requests has no process-wide transport registry; each Session keeps
its own prefix-to-adapter table. Registration is therefore an explicit
call the application makes while setting up its sessions.
"""

import logging
from typing import Optional

import requests
from requests.adapters import BaseAdapter

from .constants import SCHEME_PREFIX
from .keys import Keys
from .signer import Signer
from .transport import DEFAULT_TRANSPORT, S3Adapter

logger = logging.getLogger(__name__)


def register(session, transport: Optional[BaseAdapter] = None) -> bool:
    """
    Mount an S3 adapter under ``s3://`` on a session.

    Registration is best-effort and idempotent: a session without
    mount() or one that already routes ``s3://`` through the same
    adapter is left as is.

    Args:
        session: A requests.Session (or anything with mount() and adapters)
        transport: Adapter to mount (defaults to DEFAULT_TRANSPORT)

    Returns:
        True if the adapter was mounted by this call
    """
    if transport is None:
        transport = DEFAULT_TRANSPORT

    mount = getattr(session, "mount", None)
    if mount is None:
        logger.debug("Session %r does not support mounting, skipping s3 registration", session)
        return False

    adapters = getattr(session, "adapters", None) or {}
    if adapters.get(SCHEME_PREFIX) is transport:
        return False

    mount(SCHEME_PREFIX, transport)
    logger.debug("Registered %r for %s", transport, SCHEME_PREFIX)
    return True


def new_session(keys: Optional[Keys] = None, service: Optional[Signer] = None,
                transport: Optional[BaseAdapter] = None) -> requests.Session:
    """
    Create a requests.Session that routes s3:// URLs through an S3Adapter.

    With no arguments the shared DEFAULT_TRANSPORT is mounted; otherwise
    a dedicated adapter is built from the given keys, service and transport.
    """
    session = requests.Session()
    if keys is None and service is None and transport is None:
        register(session)
    else:
        register(session, S3Adapter(keys=keys, service=service, transport=transport))
    return session
