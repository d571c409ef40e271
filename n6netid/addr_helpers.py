# Copyright (c) 2026 NASK. All rights reserved.

from ipaddress import (
    AddressValueError,
    IPv4Address,
    IPv6Address,
)
from typing import Optional, Union

from n6netid.const import (
    IPv4_BIT_WIDTH,
    IPv6_BIT_WIDTH,
)
from n6netid.regexes import (
    IPv4_STRICT_DECIMAL_REGEX,
    IPv6_CHARACTERS_REGEX,
)


def ip_family(ip_str) -> Optional[int]:
    """
    Get the family (4 or 6) of the given textual IP address, or
    :obj:`None` if the text is not a valid IPv4/IPv6 address.

    IPv4 addresses must be in the strict dotted-quad notation (no
    leading zeros, each octet in the range 0..255).  IPv6 addresses may
    be in any of the RFC 4291 textual forms (including the `::`
    shorthand and an embedded IPv4 tail); zone identifiers are not
    accepted.

    >>> ip_family('10.20.30.40')
    4
    >>> ip_family('2001:DB8::7')
    6
    >>> ip_family('::ffff:192.0.2.128')
    6
    >>> ip_family('::') == ip_family('::1') == 6
    True
    >>> ip_family('1.2.3') is None
    True
    >>> ip_family('1.2.3.355') is None
    True
    >>> ip_family('01.2.3.4') is None
    True
    >>> ip_family('2001:') is None
    True
    >>> ip_family('h001:db8::') is None
    True
    >>> ip_family('fe80::1%eth0') is None
    True
    >>> ip_family('::ffff:192.0.2.0128') is None
    True
    >>> ip_family('') is None
    True
    >>> ip_family(b'10.20.30.40') is None
    True
    """
    if not isinstance(ip_str, str):
        return None
    if IPv4_STRICT_DECIMAL_REGEX.search(ip_str):
        return 4
    if not IPv6_CHARACTERS_REGEX.search(ip_str):
        return None
    last_segment = ip_str.rpartition(':')[2]
    if '.' in last_segment and not IPv4_STRICT_DECIMAL_REGEX.search(last_segment):
        return None
    try:
        IPv6Address(ip_str)
    except AddressValueError:
        return None
    return 6


def is_valid_ip(ip_str) -> bool:
    """
    >>> is_valid_ip('192.168.0.1')
    True
    >>> is_valid_ip('abc')
    False
    """
    return ip_family(ip_str) is not None


def ip_str_to_obj(ip_str: str) -> Union[IPv4Address, IPv6Address]:
    """
    Convert the given (already validated) textual IP address to an
    object of the appropriate :mod:`ipaddress` class.

    >>> ip_str_to_obj('10.0.0.1')
    IPv4Address('10.0.0.1')
    >>> ip_str_to_obj('2001::1')
    IPv6Address('2001::1')
    >>> ip_str_to_obj('spam')                            # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    family = ip_family(ip_str)
    if family == 4:
        return IPv4Address(ip_str)
    if family == 6:
        return IPv6Address(ip_str)
    raise ValueError('{!a} is not a valid IP address'.format(ip_str))


def ip_str_to_hex(ip_str: str) -> str:
    """
    Get the fixed-width hexadecimal representation of the given IP
    address (of its binary form; 8 digits for IPv4, 32 for IPv6).

    >>> ip_str_to_hex('128.128.129.129')
    '80808181'
    >>> ip_str_to_hex('0.0.0.1')
    '00000001'
    >>> ip_str_to_hex('2001:db8:1234::2')
    '20010db8123400000000000000000002'
    """
    return ip_str_to_obj(ip_str).packed.hex()


def exploded_ip_str(ip_str: str) -> str:
    """
    >>> exploded_ip_str('2001::1')
    '2001:0000:0000:0000:0000:0000:0000:0001'
    >>> exploded_ip_str('2001:DB8::1.2.3.4')
    '2001:0db8:0000:0000:0000:0000:0102:0304'
    >>> exploded_ip_str('10.0.0.1')
    '10.0.0.1'
    """
    return ip_str_to_obj(ip_str).exploded


def compressed_ip_str(ip_str: str) -> str:
    """
    >>> compressed_ip_str('2001:0000:0000:0000:0000:0000:0000:0001')
    '2001::1'
    >>> compressed_ip_str('2001:db8:0:0:1:0:0:1')
    '2001:db8::1:0:0:1'
    >>> compressed_ip_str('10.0.0.1')
    '10.0.0.1'

    IPv4-mapped addresses always get the dotted tail (regardless of the
    Python version):

    >>> compressed_ip_str('0:0:0:0:0:ffff:102:304')
    '::ffff:1.2.3.4'
    """
    ip = ip_str_to_obj(ip_str)
    if ip.version == 6 and ip.ipv4_mapped is not None:
        return '::ffff:{}'.format(ip.ipv4_mapped)
    return ip.compressed


def bit_width_of_family(family: int) -> int:
    """
    >>> bit_width_of_family(4), bit_width_of_family(6)
    (32, 128)
    """
    return IPv4_BIT_WIDTH if family == 4 else IPv6_BIT_WIDTH


def pad_ipv4_network_base(base_str: str) -> str:
    """
    Complete an abbreviated IPv4 network base (such as `128.128`, as
    in `128.128/16`) with zero octets.

    >>> pad_ipv4_network_base('128.128')
    '128.128.0.0'
    >>> pad_ipv4_network_base('128.128.129')
    '128.128.129.0'
    >>> pad_ipv4_network_base('128.128.129.129')
    '128.128.129.129'
    >>> pad_ipv4_network_base('1.2.3.4.5')
    '1.2.3.4.5'
    """
    octet_count = base_str.count('.') + 1
    if octet_count < 4:
        base_str += '.0' * (4 - octet_count)
    return base_str


def ip_network_as_tuple(ip_network_str: str) -> tuple[str, int]:
    """
    >>> ip_network_as_tuple('10.20.30.40/24')
    ('10.20.30.40', 24)
    >>> ip_network_as_tuple(' 2001:db8:1234:: / 126 ')
    ('2001:db8:1234::', 126)
    >>> ip_network_as_tuple('10.20.30.40/24/8')        # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> ip_network_as_tuple('10.20.30.40/-1')          # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    ip_str, prefixlen_str = ip_network_str.split('/')
    prefixlen_str = prefixlen_str.strip()
    if not prefixlen_str.isdecimal() or not prefixlen_str.isascii():
        raise ValueError('{!a} is not a valid prefix length'.format(prefixlen_str))
    return ip_str.strip(), int(prefixlen_str)
