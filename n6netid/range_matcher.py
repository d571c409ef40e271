# Copyright (c) 2026 NASK. All rights reserved.

"""
IP range membership tests (used by :meth:`n6netid.ip_address.IpAddress.is_in_range`).

Three range syntaxes are supported:

* ``<lower address>-<upper address>`` (whitespace around the bounds is
  ignored),
* ``<network base>/<prefix length>`` (for IPv4, missing trailing
  octets of the base are assumed to be zeros, e.g.: ``128.128/16``),
* ``<address>`` (a single address).

Addresses are compared as fixed-width hexadecimal strings of their
binary forms, so an IPv4 address never matches an IPv6 range (and
vice versa).
"""

from n6netid.addr_helpers import (
    bit_width_of_family,
    ip_family,
    ip_network_as_tuple,
    ip_str_to_hex,
    pad_ipv4_network_base,
)
from n6netid.exceptions import (
    InvalidIpFormat,
    InvalidRangeFormat,
)
from n6netid.log_helpers import get_logger


LOGGER = get_logger(__name__)


def is_in_range(ip, range_str):
    """
    Check whether the given IP address belongs to the given range.

    Args:
        `ip`:
            An :class:`~n6netid.ip_address.IpAddress` instance.
        `range_str` (str):
            The range specification (see the module docs); it is
            case-insensitive.

    Returns:
        :obj:`True` or :obj:`False`.

    Raises:
        :exc:`~n6netid.exceptions.InvalidRangeFormat` if the range
        specification is malformed.
    """
    if not isinstance(range_str, str):
        raise InvalidRangeFormat(range_str)
    range_str = range_str.lower()
    if '-' in range_str:
        return _is_in_dash_range(ip, range_str)
    if '/' in range_str:
        return _is_in_cidr_range(ip, range_str)
    return _is_exact_match(ip, range_str)


def _is_in_dash_range(ip, range_str):
    bounds = range_str.split('-')
    if len(bounds) != 2:
        raise InvalidRangeFormat(range_str)
    lower, upper = (b.strip() for b in bounds)
    lower_family = ip_family(lower)
    upper_family = ip_family(upper)
    if lower_family is None or upper_family is None or lower_family != upper_family:
        raise InvalidRangeFormat(range_str)
    if lower_family != ip.family:
        LOGGER.debug('IPv%s address %a compared with IPv%s range %a -> no match',
                     ip.family, ip.literal, lower_family, range_str)
        return False
    return ip_str_to_hex(lower) <= ip_str_to_hex(ip.literal) <= ip_str_to_hex(upper)


def _is_in_cidr_range(ip, range_str):
    try:
        base, prefixlen = ip_network_as_tuple(range_str)
    except ValueError as exc:
        raise InvalidRangeFormat(range_str) from exc
    if '.' in base and ':' not in base:
        base = pad_ipv4_network_base(base)
        expected_family = 4
    else:
        expected_family = 6
    if ip_family(base) != expected_family:
        raise InvalidRangeFormat(range_str)
    width = bit_width_of_family(expected_family)
    if prefixlen > width:
        raise InvalidRangeFormat(range_str)
    if expected_family != ip.family:
        LOGGER.debug('IPv%s address %a compared with IPv%s network %a -> no match',
                     ip.family, ip.literal, expected_family, range_str)
        return False
    first_hex = ip_str_to_hex(base)
    last_hex = set_trailing_bits_by_nibbles(first_hex, width - prefixlen)
    LOGGER.debug('network %a interpreted as the range %s..%s',
                 range_str, first_hex, last_hex)
    return first_hex <= ip_str_to_hex(ip.literal) <= last_hex


def _is_exact_match(ip, range_str):
    try:
        other = ip.__class__(range_str.strip())
    except InvalidIpFormat as exc:
        raise InvalidRangeFormat(range_str) from exc
    return ip.is_equal_to(other)


def set_trailing_bits_by_nibbles(hex_str, variable_bits):
    """
    Make the upper bound of a network from the hexadecimal form of its
    base address.

    Starting from the least significant hex digit, each digit is OR-ed
    with ``2 ** min(4, remaining) - 1``, where `remaining` (initially
    `variable_bits`) is decreased by 4 for each subsequent digit.  The
    base itself is *not* masked (its host bits are left as they are).

    >>> set_trailing_bits_by_nibbles('80808100', 8)
    '808081ff'
    >>> set_trailing_bits_by_nibbles('80800000', 16)
    '8080ffff'
    >>> set_trailing_bits_by_nibbles('80808181', 0)
    '80808181'
    >>> set_trailing_bits_by_nibbles('00000000', 32)
    'ffffffff'
    >>> set_trailing_bits_by_nibbles('20010db8123400000000000000000000', 2)
    '20010db8123400000000000000000003'
    >>> set_trailing_bits_by_nibbles('0a000000', 6)
    '0a00003f'
    """
    digits = list(hex_str)
    remaining = variable_bits
    i = len(digits) - 1
    while remaining > 0 and i >= 0:
        mask = 2 ** min(4, remaining) - 1
        digits[i] = format(int(digits[i], 16) | mask, 'x')
        remaining -= 4
        i -= 1
    return ''.join(digits)
