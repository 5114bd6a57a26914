# vectorclock/__init__.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Public API for the vector clock value type and its algebra

"""Vector clocks for detecting causal order between distributed events.

Each participant in a distributed system keeps a clock, increments its own
entry whenever it records a local event, and merges in the clock carried
by any message it receives. Comparing two clocks tells whether one event
happened-before the other, after it, or concurrently with it.

Primary Components:
    VectorClock: Immutable host-to-counter map with increment, merge, compare
    TemporalRelation: Four-valued comparison result
    VectorClockError: Base class of construction errors

Example:
    >>> from vectorclock import VectorClock, TemporalRelation
    >>> a = VectorClock().increment("P1")
    >>> b = VectorClock().increment("P2")
    >>> a.compare(b) is TemporalRelation.CONCURRENT
    True
    >>> a.merge(b).compare(a) is TemporalRelation.GREATER_THAN
    True
"""

from .exceptions import InvalidCounterError, InvalidHostError, VectorClockError
from .relation import TemporalRelation
from .vector_clock import VectorClock, compare, increment, merge, new

__all__ = [
    "VectorClock",
    "TemporalRelation",
    "VectorClockError",
    "InvalidCounterError",
    "InvalidHostError",
    "new",
    "increment",
    "merge",
    "compare",
]

__version__ = "1.0.0"
__description__ = "Vector clocks with a four-valued causal comparison"
