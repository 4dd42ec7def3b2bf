#!/usr/bin/env python3
"""
Basic usage examples for the S3 signing transport.

Reads keys from S3_ACCESS_KEY / S3_SECRET_KEY and fetches an object
through an s3:// URL, e.g.:

    S3_ACCESS_KEY=... S3_SECRET_KEY=... python example_usage.py s3://bucket.s3.amazonaws.com/key
"""

import logging
import sys

import requests

from s3_transport import (
    DEFAULT_TRANSPORT,
    S3TransportError,
    Service,
    keys_from_environment,
    new_session,
    register
)


def main():
    """Run basic usage examples."""
    if len(sys.argv) != 2:
        print(f"usage: {sys.argv[0]} s3://bucket.s3.amazonaws.com/key")
        return 2
    url = sys.argv[1]

    logging.basicConfig(level=logging.DEBUG)

    print("=== S3 Signing Transport Usage Examples ===\n")

    print("1. Loading keys from the environment...")
    try:
        keys = keys_from_environment()
    except S3TransportError as e:
        print(f"   ✗ {e}")
        return 1
    print(f"   Keys: {keys!r}\n")

    # Example 1: shared default adapter registered on a plain session
    print("2. Registering the default adapter...")
    DEFAULT_TRANSPORT.keys = keys
    session = requests.Session()
    register(session)
    print(f"   s3:// routed through: {session.get_adapter(url)!r}\n")

    print(f"3. GET {url} ...")
    try:
        response = session.get(url, timeout=30)
        print(f"   Status: {response.status_code}")
        print(f"   Sent to: {response.url}")
        print(f"   Date: {response.request.headers['Date']}")
        print(f"   Body: {len(response.content)} bytes\n")
    except (S3TransportError, requests.RequestException) as e:
        print(f"   ✗ Request error: {e}\n")
    finally:
        session.close()

    # Example 2: dedicated adapter for another S3-compatible service
    print("4. Using a dedicated session with its own service...")
    with new_session(keys=keys, service=Service(domain="amazonaws.com")) as session:
        try:
            response = session.head(url, timeout=30)
            print(f"   HEAD status: {response.status_code}")
        except (S3TransportError, requests.RequestException) as e:
            print(f"   ✗ Request error: {e}")

    print("\n=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
