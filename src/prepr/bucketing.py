"""
Deterministic A/B testing bucket assignment.

A user identifier is hashed with 32-bit MurmurHash3 and scaled to an
integer in [0, 10000). The same identifier always lands in the same
bucket, across calls and across client instances.
"""

from typing import Any, Optional

import mmh3

from .config import get_logger

logger = get_logger("bucketing")

HASH_SEED = 1
BUCKET_COUNT = 10000


def assign_bucket(identifier: Any) -> Optional[int]:
    """Map an identifier to a stable bucket, or None if it cannot be hashed."""
    try:
        hash_value = mmh3.hash(identifier, HASH_SEED, signed=False)
    except (TypeError, ValueError) as e:
        logger.debug("Could not hash identifier for bucketing: %s", e)
        return None

    ratio = hash_value / 2**32
    return int(ratio * BUCKET_COUNT)
