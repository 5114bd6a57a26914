# vectorclock/exceptions.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Custom exceptions for vector clock construction

"""Domain-specific exceptions for vector clock construction.

The clock algebra itself (increment, merge, compare) is total and never
raises. Only building a clock from caller-supplied entries can fail, when
a counter or a host cannot be represented in a clock.
"""


class VectorClockError(ValueError):
    """Base class for all errors raised while building a vector clock."""

    pass


class InvalidCounterError(VectorClockError):
    """Raised when a counter is not a non-negative integer.

    Attributes:
        host: Host the offending counter was supplied for
        value: The rejected counter value
    """

    def __init__(self, host, value):
        self.host = host
        self.value = value
        super().__init__(
            f"Counter for host {host!r} must be a non-negative integer, got {value!r}"
        )


class InvalidHostError(VectorClockError):
    """Raised when a host identifier cannot serve as a mapping key."""

    def __init__(self, host):
        self.host = host
        super().__init__(f"Host identifier must be hashable, got {type(host).__name__}")
