# vectorclock/vector_clock.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Immutable vector clock generic over the host identifier type

"""
Immutable Mattern–Fidge vector clock.

Supports:
  •  Per-host increment for recording local events.
  •  Join (⊔) to merge observations across processes.
  •  Four-valued comparison: equal, happened-before, happened-after, concurrent.

A clock is a sparse map from host to counter. A host missing from the map
has counter 0, and explicit zero entries are dropped on construction, so
``VectorClock({"P": 0}) == VectorClock()``.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from collections import abc
from typing import Dict, FrozenSet, Generic, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

from .exceptions import InvalidCounterError, InvalidHostError
from .relation import TemporalRelation
from .utils.logger import LogLevel, get_logger

H = TypeVar("H", bound=Hashable)

logger = get_logger()


def _validated_entries(pairs: Iterable[Tuple[H, int]]) -> Dict[H, int]:
    """Check caller-supplied (host, counter) pairs and drop zero counters.

    Later pairs override earlier ones for the same host.

    Raises:
        InvalidHostError: If a host is unhashable
        InvalidCounterError: If a counter is not a non-negative int
    """
    entries: Dict[H, int] = {}
    for host, count in pairs:
        try:
            hash(host)
        except TypeError:
            logger.invalid_input(f"unhashable host {host!r}")
            raise InvalidHostError(host) from None
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            logger.invalid_input(f"counter {count!r} for host {host!r}")
            raise InvalidCounterError(host, count)
        if count:
            entries[host] = count
        else:
            entries.pop(host, None)
    return entries


@dataclass(frozen=True)
class VectorClock(Generic[H]):
    """Vector clock tracking causal ordering between distributed events.

    Every operation returns a new clock; instances are never mutated, so a
    clock handed to another owner (for example, attached to an outgoing
    message) cannot change underneath its sender.

    Attributes:
        clock: Read-only mapping of host to counter; every counter is >= 1
    """

    clock: Mapping[H, int]

    def __init__(self, entries: Optional[Mapping[H, int]] = None) -> None:
        """Create a clock, empty by default.

        Args:
            entries: Optional initial host-to-counter mapping, or another clock

        Raises:
            TypeError: If `entries` is neither a mapping nor a clock
            InvalidHostError: If a host is unhashable
            InvalidCounterError: If a counter is negative or not an integer
        """
        if isinstance(entries, VectorClock):
            validated = dict(entries.clock)
        elif not entries:
            validated = {}
        elif isinstance(entries, abc.Mapping):
            validated = _validated_entries(entries.items())
        else:
            raise TypeError(
                f"VectorClock entries must be a mapping, got {type(entries).__name__}; "
                "use VectorClock.from_pairs for (host, counter) pairs"
            )
        object.__setattr__(self, "clock", MappingProxyType(validated))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[H, int]]) -> VectorClock[H]:
        """Build a clock from (host, counter) pairs, as produced by `to_pairs`."""
        clock = cls.__new__(cls)
        object.__setattr__(clock, "clock", MappingProxyType(_validated_entries(pairs)))
        return clock

    @classmethod
    def _trusted(cls, entries: Dict[H, int]) -> VectorClock[H]:
        # entries must already satisfy the counter >= 1 invariant
        clock = cls.__new__(cls)
        object.__setattr__(clock, "clock", MappingProxyType(entries))
        return clock

    def count(self, host: H) -> int:
        """Counter for `host`; hosts never incremented count as 0."""
        return self.clock.get(host, 0)

    def increment(self, host: H) -> VectorClock[H]:
        """
        Record a local event on `host`.

        Returns a new clock whose counter for `host` is one higher; every
        other entry is carried over unchanged.
        """
        entries = dict(self.clock)
        entries[host] = self.count(host) + 1
        result = VectorClock._trusted(entries)
        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.clock_incremented(str(host), str(self), str(result))
        return result

    def merge(self, other: VectorClock[H]) -> VectorClock[H]:
        """
        Component-wise maximum (⊔) of two vector clocks.

        The result dominates both inputs and is the smallest clock that does.
        """
        if not isinstance(other, VectorClock):
            raise TypeError(f"cannot merge VectorClock with {type(other).__name__}")
        entries = dict(self.clock)
        for host, theirs in other.clock.items():
            if theirs > self.count(host):
                entries[host] = theirs
        result = VectorClock._trusted(entries)
        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.clocks_merged(str(self), str(other), str(result))
        return result

    def compare(self, other: VectorClock[H]) -> TemporalRelation:
        """Classify the partial-order relation between this clock and `other`.

        Walks the union of hosts of both clocks. If some host is behind in
        `self` and another is ahead, the clocks are concurrent.

        Args:
            other: Vector clock to compare against

        Returns:
            EQUAL, LESS_THAN (self happened-before other), GREATER_THAN
            (self happened-after other) or CONCURRENT
        """
        if not isinstance(other, VectorClock):
            raise TypeError(f"cannot compare VectorClock with {type(other).__name__}")

        has_smaller = False
        has_greater = False
        for host in self.clock.keys() | other.clock.keys():
            mine, theirs = self.count(host), other.count(host)
            if mine < theirs:
                has_smaller = True
            elif mine > theirs:
                has_greater = True
            if has_smaller and has_greater:
                break

        if has_smaller and has_greater:
            relation = TemporalRelation.CONCURRENT
        elif has_smaller:
            relation = TemporalRelation.LESS_THAN
        elif has_greater:
            relation = TemporalRelation.GREATER_THAN
        else:
            relation = TemporalRelation.EQUAL

        if logger.is_enabled_for(LogLevel.DEBUG):
            logger.clocks_compared(str(self), str(other), str(relation))
        return relation

    def leq(self, other: VectorClock[H]) -> bool:
        """
        Component-wise ≤ comparison.
        Missing entries are treated as 0.
        """
        return self.compare(other) in (TemporalRelation.EQUAL, TemporalRelation.LESS_THAN)

    def happened_before(self, other: VectorClock[H]) -> bool:
        return self.compare(other) is TemporalRelation.LESS_THAN

    def happened_after(self, other: VectorClock[H]) -> bool:
        return self.compare(other) is TemporalRelation.GREATER_THAN

    def concurrent(self, other: VectorClock[H]) -> bool:
        """
        True if neither self ≤ other nor other ≤ self.
        """
        return self.compare(other) is TemporalRelation.CONCURRENT

    def hosts(self) -> FrozenSet[H]:
        """Hosts with a non-zero counter."""
        return frozenset(self.clock)

    def to_pairs(self) -> List[Tuple[H, int]]:
        """List of (host, counter) pairs in no particular order."""
        return list(self.clock.items())

    def to_dict(self) -> Dict[H, int]:
        return dict(self.clock)

    def copy(self) -> VectorClock[H]:
        """
        Return a copy of this clock backed by its own mapping.
        """
        return VectorClock._trusted(dict(self.clock))

    def __reduce__(self):
        # rebuild from a plain dict; the read-only view cannot be pickled or deep-copied
        return (VectorClock, (dict(self.clock),))

    def __getitem__(self, host: H) -> int:
        return self.count(host)

    def __contains__(self, host: object) -> bool:
        return host in self.clock

    def __iter__(self) -> Iterator[H]:
        return iter(self.clock)

    def __len__(self) -> int:
        return len(self.clock)

    def __le__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.leq(other)

    def __lt__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.happened_before(other)

    def __ge__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VectorClock):
            return NotImplemented
        return other.leq(self)

    def __gt__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.happened_after(other)

    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VectorClock):
            return NotImplemented
        return dict(self.clock) == dict(other.clock)

    def __hash__(self) -> int:
        """
        Order-independent hash; does not require hosts to be sortable.
        """
        return hash(frozenset(self.clock.items()))

    def __str__(self) -> str:
        items = sorted(self.clock.items(), key=lambda item: str(item[0]))
        return "[" + ", ".join(f"{host}:{count}" for host, count in items) + "]"

    def __repr__(self) -> str:
        return f"VectorClock({dict(self.clock)!r})"


# Functional entry points over the clock methods


def new() -> VectorClock:
    """Return an empty clock; every host is implicitly at 0."""
    return VectorClock()


def increment(clock: VectorClock[H], host: H) -> VectorClock[H]:
    return clock.increment(host)


def merge(a: VectorClock[H], b: VectorClock[H]) -> VectorClock[H]:
    return a.merge(b)


def compare(a: VectorClock[H], b: VectorClock[H]) -> TemporalRelation:
    return a.compare(b)
