"""Network helpers for the Oracle ADB container."""

from .public_ip import PublicIPv4Retriever, PublicIPError

__all__ = ['PublicIPv4Retriever', 'PublicIPError']
