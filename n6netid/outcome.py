# Copyright (c) 2026 NASK. All rights reserved.

"""
Result-returning counterparts of the (raising) validating operations.

Raising :exc:`~n6netid.exceptions.NetIdError` subclasses remains the
primary way of reporting invalid input; the tools defined here are for
callers that prefer to check a result object.

>>> from n6netid.ip_address import IpAddress
>>> outcome = outcome_of(IpAddress, '10.0.0.1')
>>> outcome.ok
True
>>> outcome.unwrap()
IpAddress('10.0.0.1')
>>> outcome = outcome_of(IpAddress, '1.2.3.355')
>>> outcome.ok
False
>>> outcome.error
<InvalidIpFormat: args=('1.2.3.355',); public_message='"1.2.3.355" is not a valid IP address.'>
>>> outcome.unwrap()                                     # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
  ...
InvalidIpFormat: "1.2.3.355" is not a valid IP address.
"""

from typing import NamedTuple, Optional, Any

from n6netid.exceptions import NetIdError


class Outcome(NamedTuple):

    """
    The outcome of an operation: either a `value` (success) or an
    `error` (failure; then `value` is :obj:`None`).
    """

    value: Any = None
    error: Optional[NetIdError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Get the value or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


def outcome_of(func, *args, **kwargs) -> Outcome:
    """
    Call `func(*args, **kwargs)`, capturing any
    :exc:`~n6netid.exceptions.NetIdError` as a failure outcome.

    Any other exception is propagated.

    >>> outcome_of(int, '42')
    Outcome(value=42, error=None)
    >>> outcome_of(int, 'spam')                          # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    try:
        value = func(*args, **kwargs)
    except NetIdError as exc:
        return Outcome(error=exc)
    return Outcome(value=value)
