# Copyright (c) 2026 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6netid.addr_helpers import (
    compressed_ip_str,
    exploded_ip_str,
    ip_family,
    ip_network_as_tuple,
    ip_str_to_hex,
    is_valid_ip,
    pad_ipv4_network_base,
)


@expand
class Test_ip_family(unittest.TestCase):

    @foreach(
        param('0.0.0.0', 4),
        param('1.2.3.4', 4),
        param('255.255.255.255', 4),
        param('::', 6),
        param('::1', 6),
        param('1::', 6),
        param('2001:db8::7', 6),
        param('2001:DB8::7', 6),
        param('1:2:3:4:5:6:7:8', 6),
        param('1:2:3:4:5:6:1.2.3.4', 6),
        param('::1.2.3.4', 6),
        param('::ffff:192.0.2.128', 6),
    )
    def test_valid(self, ip_str, expected):
        self.assertEqual(ip_family(ip_str), expected)
        self.assertTrue(is_valid_ip(ip_str))

    @foreach(
        '',
        ' ',
        '1.2.3',
        '1.2.3.4.5',
        '1.2.3.355',
        '256.0.0.0',
        '01.2.3.4',
        '1.2.3.04',
        '1.2.3.4/32',
        '2001:',
        ':1',
        '1:::2',
        'h001:db8::',
        '1:2:3:4:5:6:7:8:9',
        '::1.2.3.04',
        '::1.2.3',
        'fe80::1%eth0',
        '[::1]',
        'localhost',
    )
    def test_invalid(self, ip_str):
        self.assertIsNone(ip_family(ip_str))
        self.assertFalse(is_valid_ip(ip_str))

    @foreach(None, 4, 4.0, b'1.2.3.4')
    def test_non_str(self, obj):
        self.assertIsNone(ip_family(obj))


@expand
class Test_conversions(unittest.TestCase):

    @foreach(
        param('0.0.0.0', '00000000'),
        param('10.20.30.40', '0a141e28'),
        param('255.255.255.254', 'fffffffe'),
        param('::', '0' * 32),
        param('2001:db8:1234::2', '20010db8123400000000000000000002'),
        param('ffff:ffff:ffff:ffff:ffff:ffff:ffff:fffe', 'f' * 31 + 'e'),
    )
    def test_ip_str_to_hex(self, ip_str, expected):
        self.assertEqual(ip_str_to_hex(ip_str), expected)

    @foreach(
        param('2001::1', '2001:0000:0000:0000:0000:0000:0000:0001', '2001::1'),
        param('2001:DB8::', '2001:0db8:0000:0000:0000:0000:0000:0000', '2001:db8::'),
        param('0:0:0:0:0:0:0:1', '0000:0000:0000:0000:0000:0000:0000:0001', '::1'),
        param('::ffff:102:304', '0000:0000:0000:0000:0000:ffff:0102:0304', '::ffff:1.2.3.4'),
        param('::FFFF:1.2.3.4', '0000:0000:0000:0000:0000:ffff:0102:0304', '::ffff:1.2.3.4'),
        param('10.0.0.1', '10.0.0.1', '10.0.0.1'),
    )
    def test_exploded_and_compressed(self, ip_str, exploded, compressed):
        self.assertEqual(exploded_ip_str(ip_str), exploded)
        self.assertEqual(compressed_ip_str(ip_str), compressed)

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            ip_str_to_hex('1.2.3')


@expand
class Test_network_helpers(unittest.TestCase):

    @foreach(
        param('1', '1.0.0.0'),
        param('128.128', '128.128.0.0'),
        param('128.128.129', '128.128.129.0'),
        param('128.128.129.1', '128.128.129.1'),
    )
    def test_pad_ipv4_network_base(self, base_str, expected):
        self.assertEqual(pad_ipv4_network_base(base_str), expected)

    @foreach(
        param('10.0.0.0/8', ('10.0.0.0', 8)),
        param('10.0.0.0 / 0', ('10.0.0.0', 0)),
        param('::/128', ('::', 128)),
    )
    def test_ip_network_as_tuple(self, network_str, expected):
        self.assertEqual(ip_network_as_tuple(network_str), expected)

    @foreach('10.0.0.0', '10.0.0.0/', '10.0.0.0/8/8', '10.0.0.0/x', '10.0.0.0/٣')
    def test_ip_network_as_tuple_invalid(self, network_str):
        with self.assertRaises(ValueError):
            ip_network_as_tuple(network_str)
