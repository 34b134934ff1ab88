"""Identity allocation for per-test database users."""

from .schema_identity import (
    IdentityAllocator,
    SequenceCounter,
    encode_identity,
    PROCESS_IDENTITY
)

__all__ = [
    'IdentityAllocator',
    'SequenceCounter',
    'encode_identity',
    'PROCESS_IDENTITY'
]
