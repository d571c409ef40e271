# Copyright (c) 2026 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6netid.exceptions import (
    InvalidMediaType,
    NetIdError,
)
from n6netid.media_type import MediaType


@expand
class TestMediaType(unittest.TestCase):

    @foreach(
        param('image/vnd.adobe.photoshop',
              expected_type='image', expected_subtype='vnd.adobe.photoshop', expected_parameters=''),
        param('application/rss+xml',
              expected_type='application', expected_subtype='rss+xml', expected_parameters=''),
        param('text/plain; charset=utf-8',
              expected_type='text', expected_subtype='plain', expected_parameters=' charset=utf-8'),
        param('application/vnd.ms-excel',
              expected_type='application', expected_subtype='vnd.ms-excel', expected_parameters=''),
        param('application/x-rar-compressed',
              expected_type='application', expected_subtype='x-rar-compressed', expected_parameters=''),
        param('Text/HTML;Charset=ISO-8859-2',
              expected_type='text', expected_subtype='html', expected_parameters='Charset=ISO-8859-2'),
        param('  audio/mpeg  ',
              expected_type='audio', expected_subtype='mpeg', expected_parameters=''),
        param('application/atom+XML;',
              expected_type='application', expected_subtype='atom+xml', expected_parameters=''),
    )
    def test_valid(self, media_type_str, expected_type, expected_subtype, expected_parameters):
        mt = MediaType(media_type_str)
        self.assertEqual(mt.type, expected_type)
        self.assertEqual(mt.subtype, expected_subtype)
        self.assertEqual(mt.parameters, expected_parameters)
        self.assertTrue(MediaType.is_valid(media_type_str))

    @foreach(
        'image/vnd/adobe.photoshop',
        'applicat;ion/postscript',
        'application/pgp-signature+x+y',
        'application/x-rar-compressed;foo;bar',
        'application+audio/x-rar-compressed',
        'application',
        'application/',
        '/plain',
        'text/plain+',
        'text/plain+xml1',
        '',
    )
    def test_invalid(self, media_type_str):
        with self.assertRaises(InvalidMediaType) as cm:
            MediaType(media_type_str)
        self.assertIsInstance(cm.exception, NetIdError)
        self.assertEqual(cm.exception.offending_value, media_type_str)
        self.assertFalse(MediaType.is_valid(media_type_str))

    @foreach(None, 42, b'text/plain')
    def test_non_str(self, obj):
        with self.assertRaises(InvalidMediaType):
            MediaType(obj)
        self.assertFalse(MediaType.is_valid(obj))

    @foreach(
        param('text/plain', 'text/plain'),
        param('TEXT/Plain', 'text/plain'),
        param('text/plain; charset=utf-8', 'text/plain; charset=utf-8'),
        param('Application/RSS+XML', 'application/rss+xml'),
        param('text/plain;', 'text/plain'),
    )
    def test_str(self, media_type_str, expected):
        self.assertEqual(str(MediaType(media_type_str)), expected)

    def test_equality_and_hash(self):
        mt1 = MediaType('TEXT/plain; charset=utf-8')
        mt2 = MediaType('text/PLAIN; charset=utf-8')
        mt3 = MediaType('text/plain; charset=UTF-8')
        self.assertTrue(mt1.is_equal_to(mt2))
        self.assertTrue(mt1 == mt2)
        self.assertEqual(hash(mt1), hash(mt2))
        self.assertEqual(mt1.get_hash(), mt2.get_hash())
        self.assertFalse(mt1.is_equal_to(mt3))
        self.assertTrue(mt1 != mt3)
        self.assertNotEqual(mt1.get_hash(), mt3.get_hash())
        self.assertFalse(mt1.is_equal_to('text/plain; charset=utf-8'))
        self.assertFalse(mt1 == 'text/plain; charset=utf-8')

    def test_immutable(self):
        mt = MediaType('text/plain')
        with self.assertRaises(AttributeError):
            mt._type = 'image'
        with self.assertRaises(AttributeError):
            del mt._type
        self.assertEqual(str(mt), 'text/plain')
