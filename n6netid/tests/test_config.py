# Copyright (c) 2026 NASK. All rights reserved.

import os
import os.path as osp
import tempfile
import unittest
from types import MappingProxyType
from unittest.mock import patch

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6netid.config import NetIdConfig
from n6netid.const import URI_SCHEME_TO_DEFAULT_PORT
from n6netid.exceptions import ConfigError
from n6netid.uri import UriValue


class _ConfigFilesMixin(object):

    def setUp(self):
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.etc_dir = osp.join(tmp_dir.name, 'etc')
        self.user_dir = osp.join(tmp_dir.name, 'user')
        os.makedirs(self.etc_dir)
        os.makedirs(self.user_dir)
        for target, path in [('n6netid.config.ETC_DIR', self.etc_dir),
                             ('n6netid.config.USER_DIR', self.user_dir)]:
            patcher = patch(target, path)
            patcher.start()
            self.addCleanup(patcher.stop)

    def write_file(self, dir_path, filename, content):
        path = osp.join(dir_path, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path


@expand
class TestNetIdConfig(_ConfigFilesMixin, unittest.TestCase):

    def test_no_config_files(self):
        config = NetIdConfig()
        self.assertEqual(dict(config.known_ports), dict(URI_SCHEME_TO_DEFAULT_PORT))
        self.assertIsInstance(config.known_ports, MappingProxyType)
        self.assertIsNone(config.logging_config_file)
        self.assertFalse(config.configure_logging())

    def test_user_dir_overrides_etc_dir(self):
        self.write_file(self.etc_dir, '10_uri.conf',
                        '[uri]\nextra_known_ports = gopher:70, imap:143\n')
        self.write_file(self.user_dir, '10_uri.conf',
                        '[uri]\nextra_known_ports = gopher:7070\n')
        self.write_file(self.user_dir, 'ignored.txt',
                        '[uri]\nextra_known_ports = imap:1\n')
        config = NetIdConfig()
        self.assertEqual(config.known_ports['gopher'], 7070)
        self.assertEqual(config.known_ports['http'], 80)
        # (the option value from the etc file is replaced, not merged)
        self.assertNotIn('imap', config.known_ports)

    def test_files_read_in_sorted_order(self):
        self.write_file(self.etc_dir, '20_b.conf', '[uri]\nextra_known_ports = gopher:2\n')
        self.write_file(self.etc_dir, '10_a.conf', '[uri]\nextra_known_ports = gopher:1\n')
        self.assertEqual(NetIdConfig().known_ports['gopher'], 2)

    def test_explicit_paths(self):
        path = self.write_file(self.user_dir, 'custom.ini',
                               '[uri]\nextra_known_ports = HTTP:8080 ,, ws:80\n'
                               '[logging]\nconfig_file = ~/logging.ini\n')
        config = NetIdConfig([path])
        self.assertEqual(config.known_ports['http'], 8080)
        self.assertEqual(config.known_ports['ws'], 80)
        self.assertEqual(config.logging_config_file, osp.expanduser('~/logging.ini'))

    def test_make_and_parse_uri(self):
        path = self.write_file(self.etc_dir, 'uri.conf',
                               '[uri]\nextra_known_ports = gopher:70\n')
        config = NetIdConfig([path])
        uri = config.parse_uri('gopher://example.com:70/1')
        self.assertIsNone(uri.port)
        self.assertIs(uri.known_ports, config.known_ports)
        uri = config.make_uri('gopher', 'example.com', '/1', port=70)
        self.assertEqual(str(uri), 'gopher://example.com/1')
        self.assertEqual(str(UriValue.parse('gopher://example.com:70/1')),
                         'gopher://example.com:70/1')

    @foreach(
        param('gopher'),
        param('gopher:'),
        param(':70'),
        param('gopher:seventy'),
        param('1gopher:70'),
        param('gopher:70:71'),
    )
    def test_invalid_extra_known_ports(self, item):
        path = self.write_file(self.etc_dir, 'uri.conf',
                               '[uri]\nextra_known_ports = http:80, {}\n'.format(item))
        with self.assertRaises(ConfigError) as cm:
            NetIdConfig([path])
        self.assertEqual(cm.exception.sect_name, 'uri')
        self.assertEqual(cm.exception.opt_name, 'extra_known_ports')

    def test_malformed_file(self):
        path = self.write_file(self.etc_dir, 'bad.conf', 'extra_known_ports = gopher:70\n')
        with self.assertRaises(ConfigError):
            NetIdConfig([path])

    @patch('n6netid.config.configure_logging')
    def test_configure_logging(self, configure_logging_mock):
        path = self.write_file(self.etc_dir, 'log.conf',
                               '[logging]\nconfig_file = /some/logging.ini\n')
        config = NetIdConfig([path])
        self.assertTrue(config.configure_logging())
        configure_logging_mock.assert_called_once_with('/some/logging.ini')
