# Copyright (c) 2026 NASK. All rights reserved.

import hashlib

from n6netid.addr_helpers import (
    compressed_ip_str,
    exploded_ip_str,
    ip_family,
    ip_str_to_obj,
)
from n6netid.const import (
    IPv4_LOOPBACK_MASK,
    IPv4_LOOPBACK_NET,
    IPv6_LOOPBACK_COMPACT,
)
from n6netid.exceptions import InvalidIpFormat
from n6netid.outcome import outcome_of
from n6netid.range_matcher import is_in_range


class IpAddress(object):

    r"""
    An immutable IPv4 or IPv6 address.

    Constructor args/kwargs:
        `ip_str` (str):
            The textual form of the address: IPv4 in the strict
            dotted-quad notation or IPv6 in any of the RFC 4291 textual
            forms.  It is stored lowercased, as given (i.e., it is *not*
            automatically expanded or compacted).

    Raises:
        :exc:`~n6netid.exceptions.InvalidIpFormat` if `ip_str` is not
        a valid IPv4/IPv6 address.

    >>> ip = IpAddress('2001:DB8::1')
    >>> ip
    IpAddress('2001:db8::1')
    >>> str(ip)
    '2001:db8::1'
    >>> ip.family, ip.is_ipv4, ip.is_ipv6
    (6, False, True)
    >>> str(ip.expand())
    '2001:0db8:0000:0000:0000:0000:0000:0001'
    >>> ip.expand() == ip
    True
    >>> ip.is_in_range('2001:db8::/64')
    True
    >>> IpAddress('1.2.3')                               # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    InvalidIpFormat: "1.2.3" is not a valid IP address.
    """

    __slots__ = ('_literal', '_family')

    def __init__(self, ip_str):
        family = ip_family(ip_str)
        if family is None:
            raise InvalidIpFormat(ip_str)
        object.__setattr__(self, '_literal', ip_str.lower())
        object.__setattr__(self, '_family', family)

    def __setattr__(self, name, value):
        raise AttributeError('{.__class__.__name__} instances are immutable'.format(self))

    def __delattr__(self, name):
        raise AttributeError('{.__class__.__name__} instances are immutable'.format(self))

    @classmethod
    def is_valid(cls, ip_str):
        """
        >>> IpAddress.is_valid('10.0.0.1')
        True
        >>> IpAddress.is_valid('1.2.3.355')
        False
        """
        return ip_family(ip_str) is not None

    @classmethod
    def from_text_outcome(cls, ip_str):
        """
        Like the constructor, but returning an
        :class:`~n6netid.outcome.Outcome` instead of raising
        :exc:`~n6netid.exceptions.InvalidIpFormat`.

        >>> IpAddress.from_text_outcome('10.0.0.1').unwrap()
        IpAddress('10.0.0.1')
        >>> IpAddress.from_text_outcome('abc').ok
        False
        """
        return outcome_of(cls, ip_str)

    @property
    def literal(self):
        return self._literal

    @property
    def family(self):
        return self._family

    @property
    def is_ipv4(self):
        return self._family == 4

    @property
    def is_ipv6(self):
        return self._family == 6

    def expand(self):
        """
        Get the address in the full (exploded) form: for IPv6 -- eight
        groups of four lowercase hex digits; for IPv4 -- an equal copy.

        >>> IpAddress('2001::1').expand().literal
        '2001:0000:0000:0000:0000:0000:0000:0001'
        >>> IpAddress('10.0.0.1').expand().literal
        '10.0.0.1'
        """
        return self.__class__(exploded_ip_str(self._literal))

    def compact(self):
        """
        Get the address in the compressed form (as defined by RFC 5952);
        for IPv4 -- an equal copy.

        >>> IpAddress('2001:0000:0000:0000:0000:0000:0000:0001').compact().literal
        '2001::1'
        >>> IpAddress('10.0.0.1').compact().literal
        '10.0.0.1'
        """
        return self.__class__(compressed_ip_str(self._literal))

    def is_loopback(self):
        """
        >>> IpAddress('127.0.0.8').is_loopback()
        True
        >>> IpAddress('0:0:0:0:0:0:0:1').is_loopback()
        True
        >>> IpAddress('128.0.0.1').is_loopback()
        False
        """
        if self.is_ipv4:
            return (int(ip_str_to_obj(self._literal)) & IPv4_LOOPBACK_MASK) == IPv4_LOOPBACK_NET
        return compressed_ip_str(self._literal) == IPv6_LOOPBACK_COMPACT

    def is_private(self):
        """
        Check whether the address is a loopback one or is not globally
        routable (private-use, link-local, reserved, etc.).

        >>> IpAddress('192.168.0.1').is_private()
        True
        >>> IpAddress('::1').is_private()
        True
        >>> IpAddress('1.2.3.4').is_private()
        False
        >>> IpAddress('1::1').is_private()
        False
        """
        if self.is_loopback():
            return True
        return not ip_str_to_obj(self._literal).is_global

    def is_in_range(self, range_str):
        """
        Check whether the address belongs to the given range.

        See: :mod:`n6netid.range_matcher`.

        Raises:
            :exc:`~n6netid.exceptions.InvalidRangeFormat` if the range
            specification is malformed.
        """
        return is_in_range(self, range_str)

    def get_hash(self):
        """
        Get the MD5 hex digest of the expanded form of the address.

        >>> IpAddress('2001::1').get_hash() == IpAddress('2001:0::0:1').get_hash()
        True
        """
        expanded = exploded_ip_str(self._literal)
        return hashlib.md5(expanded.encode('ascii')).hexdigest()

    def is_equal_to(self, other):
        """
        >>> IpAddress('2001::1').is_equal_to(IpAddress('2001:0:0:0:0:0:0:1'))
        True
        >>> IpAddress('10.0.0.1').is_equal_to('10.0.0.1')
        False
        """
        if not isinstance(other, IpAddress):
            return False
        return exploded_ip_str(self._literal) == exploded_ip_str(other._literal)

    def __eq__(self, other):
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self.is_equal_to(other)

    def __ne__(self, other):
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self):
        return hash((self.__class__.__name__, exploded_ip_str(self._literal)))

    def __str__(self):
        return self._literal

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._literal)
