"""
Public IPv4 discovery.

The ADB container restricts access to the provisioned instance to the public
address of the host running the tests, passed in as IP_ADDRESS.
"""

import ipaddress
import logging
import os
import threading
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_CHECKIP_URL = 'https://checkip.amazonaws.com'


class PublicIPError(Exception):
    """Raised when the public IPv4 address cannot be determined."""
    pass


class PublicIPv4Retriever:
    """Looks up the host public IPv4 address once per process."""

    _cached: Optional[str] = None
    _lock = threading.Lock()

    @classmethod
    def get(
        cls,
        url: str = DEFAULT_CHECKIP_URL,
        timeout: float = 10.0,
        override: Optional[str] = None
    ) -> str:
        """
        Return the public IPv4 address of this host.

        An explicit override, then ADB_PUBLIC_IP, take precedence over the lookup.
        Overrides are validated like looked up addresses.

        Raises:
            PublicIPError: If the lookup fails or returns something else than an IPv4 address
        """
        override = override or os.getenv('ADB_PUBLIC_IP')
        if override:
            return cls._validate(override)

        with cls._lock:
            if cls._cached is None:
                cls._cached = cls._lookup(url, timeout)
            return cls._cached

    @classmethod
    def clear_cache(cls):
        with cls._lock:
            cls._cached = None

    @classmethod
    def _lookup(cls, url: str, timeout: float) -> str:
        try:
            with httpx.Client(timeout=timeout) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise PublicIPError(f"Public IP lookup against {url} failed: {e}") from e

        address = cls._validate(response.text)
        logger.info(f"Detected public IPv4 address {address}")
        return address

    @staticmethod
    def _validate(value: str) -> str:
        candidate = value.strip()
        try:
            return str(ipaddress.IPv4Address(candidate))
        except ValueError as e:
            raise PublicIPError(f"Not a valid IPv4 address: {candidate!r}") from e
