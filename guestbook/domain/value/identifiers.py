"""Strongly typed identifiers for guestbook entities.

Identifiers are 64-bit integers allocated by the store when an entity is
first written. NewType keeps greeting and vote ids from being mixed up.
"""

from typing import NewType

GreetingId = NewType("GreetingId", int)
VoteId = NewType("VoteId", int)

# Largest id the store can allocate (signed 64-bit)
MAX_ID = 2**63 - 1
