# vectorclock/relation.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Four-valued result of comparing two vector clocks

from enum import Enum, auto


class TemporalRelation(Enum):
    """Partial-order relation between two vector clocks.

    Comparing clock ``a`` against clock ``b`` always yields exactly one of
    these values. Unlike a scalar logical clock, two clocks may be unrelated,
    which is reported as CONCURRENT rather than forced into an order.

    Values:
        EQUAL: Every host has the same counter in both clocks
        LESS_THAN: ``a`` happened-before ``b`` (dominated, not equal)
        GREATER_THAN: ``a`` happened-after ``b`` (dominates, not equal)
        CONCURRENT: Neither clock dominates the other
    """

    EQUAL = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    CONCURRENT = auto()

    def __str__(self) -> str:
        return self.name

    def inverse(self) -> "TemporalRelation":
        """Return the relation as seen from the other clock.

        ``a.compare(b).inverse() == b.compare(a)`` holds for every pair.
        EQUAL and CONCURRENT are their own inverses.

        Returns:
            The mirrored relation
        """
        if self is TemporalRelation.LESS_THAN:
            return TemporalRelation.GREATER_THAN
        if self is TemporalRelation.GREATER_THAN:
            return TemporalRelation.LESS_THAN
        return self

    def is_ordered(self) -> bool:
        """True unless the two clocks are concurrent."""
        return self is not TemporalRelation.CONCURRENT
