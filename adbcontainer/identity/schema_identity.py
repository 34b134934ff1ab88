"""
Schema Identity Allocation

Generates per-process identities and unique database user ids so that
parallel test runners, in one process or many, never provision the same
user inside a shared database instance.

A user id looks like ``<identity>_<isolation key>_<sequence>`` where the
identity is a 10 character encoding of a random per-process token, the
isolation key defaults to the calling thread id and the sequence number
comes from a process-wide counter.
"""

import logging
import threading
import uuid
from typing import Dict, Hashable, Optional

logger = logging.getLogger(__name__)

IDENTITY_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
IDENTITY_LENGTH = 10

_MASK_64 = (1 << 64) - 1


def encode_identity(token: uuid.UUID) -> str:
    """
    Encode a 128-bit token as a 10 character identity.

    The token is XOR-folded to 64 bits and written in base len(IDENTITY_ALPHABET),
    left-padded with '0' and cut to the 10 leading characters.

    Args:
        token: Random token, usually uuid.uuid4()

    Returns:
        Identity string of exactly IDENTITY_LENGTH characters
    """
    value = ((token.int >> 64) ^ token.int) & _MASK_64
    base = len(IDENTITY_ALPHABET)

    digits = []
    while value:
        value, index = divmod(value, base)
        digits.append(IDENTITY_ALPHABET[index])

    encoded = ''.join(reversed(digits)).rjust(IDENTITY_LENGTH, '0')
    return encoded[:IDENTITY_LENGTH]


PROCESS_TOKEN = uuid.uuid4()
PROCESS_IDENTITY = encode_identity(PROCESS_TOKEN)


class SequenceCounter:
    """
    Monotonically increasing counter shared by every allocator of a process.

    Values are handed out starting at 1 and are never reused. Use instance()
    for the process-wide counter; reset_instance() exists for tests.
    """

    _instance: Optional['SequenceCounter'] = None
    _instance_lock = threading.Lock()

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the current value and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the value the next call to next() will hand out."""
        with self._lock:
            return self._next

    @classmethod
    def instance(cls) -> 'SequenceCounter':
        """Return the process-wide counter, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the process-wide counter so the next instance() starts over."""
        with cls._instance_lock:
            cls._instance = None


class IdentityAllocator:
    """
    Allocates and memoizes unique user ids per isolation key.

    The memo is private to the allocator while the counter is shared, so ids
    stay unique across every allocator in the process. Releasing a key drops
    its memo entry only; the sequence number is never handed out again.
    """

    def __init__(self, identity: Optional[str] = None, counter: Optional[SequenceCounter] = None):
        """
        Initialize the allocator.

        Args:
            identity: Process identity, defaults to PROCESS_IDENTITY
            counter: Sequence counter, defaults to the process-wide counter
        """
        self.identity = identity or PROCESS_IDENTITY
        self.counter = counter or SequenceCounter.instance()
        self._unique_ids: Dict[str, str] = {}
        self._lock = threading.Lock()

    def user_key(self, isolation_key: Optional[Hashable] = None) -> str:
        """Build the memo key for an isolation key, defaulting to the current thread id."""
        if isolation_key is None:
            isolation_key = threading.get_ident()
        return f"{self.identity}_{isolation_key}"

    def get_unique_user_id(self, isolation_key: Optional[Hashable] = None) -> str:
        """Return the unique id for an isolation key, allocating it on first use."""
        user_key = self.user_key(isolation_key)

        with self._lock:
            unique_id = self._unique_ids.get(user_key)
            if unique_id is None:
                unique_id = f"{user_key}_{self.counter.next()}"
                self._unique_ids[user_key] = unique_id
                logger.debug(f"Allocated unique user id {unique_id}")
            return unique_id

    def release(self, isolation_key: Optional[Hashable] = None) -> Optional[str]:
        """Forget the unique id of an isolation key and return it, if any."""
        user_key = self.user_key(isolation_key)

        with self._lock:
            unique_id = self._unique_ids.pop(user_key, None)

        if unique_id is not None:
            logger.debug(f"Released unique user id {unique_id}")
        return unique_id

    def allocated(self) -> Dict[str, str]:
        """Return a snapshot of the memoized ids."""
        with self._lock:
            return dict(self._unique_ids)
