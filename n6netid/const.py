# Copyright (c) 2026 NASK. All rights reserved.

import os.path as osp
from types import MappingProxyType


TOPLEVEL_N6NETID_PACKAGES = ('n6netid',)


ETC_DIR = '/etc/n6netid'
USER_DIR = osp.expanduser('~/.n6netid')


# well-known default ports of URI schemes (a port equal to the default
# one for the URI's scheme is never kept in a `UriValue`)
URI_SCHEME_TO_DEFAULT_PORT = MappingProxyType({
    'ftp': 21,
    'http': 80,
    'https': 443,
    'ssh': 22,
    'telnet': 23,
})


# address widths, in bits
IPv4_BIT_WIDTH = 32
IPv6_BIT_WIDTH = 128


IPv4_LOOPBACK_MASK = 0xff000000
IPv4_LOOPBACK_NET = 0x7f000000
IPv6_LOOPBACK_COMPACT = '::1'


# the greatest valid TCP/UDP port number
URI_PORT_MAX = 65535
