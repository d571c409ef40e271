# Copyright (c) 2026 NASK. All rights reserved.

import hashlib

from n6netid.exceptions import InvalidMediaType
from n6netid.regexes import MEDIA_TYPE_REGEX


class MediaType(object):

    """
    An immutable media type (RFC 6838), such as ``text/plain`` or
    ``application/rss+xml; charset=utf-8``.

    Type and subtype names are case-insensitive (they are stored
    lowercased); the subtype includes the structured syntax suffix (if
    any).  At most one parameter section (the text after ``;``) is
    accepted; it is kept verbatim.

    >>> mt = MediaType(' Application/RSS+XML; charset=UTF-8 ')
    >>> mt
    MediaType('application/rss+xml; charset=UTF-8')
    >>> mt.type, mt.subtype, mt.parameters
    ('application', 'rss+xml', ' charset=UTF-8')
    >>> mt == MediaType('application/rss+xml; charset=UTF-8')
    True
    >>> MediaType('image/vnd/adobe.photoshop')          # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    InvalidMediaType: "image/vnd/adobe.photoshop" is not a valid media type.
    """

    __slots__ = ('_type', '_subtype', '_parameters')

    def __init__(self, media_type_str):
        match = self._match(media_type_str)
        if match is None:
            raise InvalidMediaType(media_type_str)
        _set = object.__setattr__
        _set(self, '_type', match.group('type').lower())
        _set(self, '_subtype', (match.group('subtype') + (match.group('suffix') or '')).lower())
        _set(self, '_parameters', (match.group('parameters') or '')[1:])

    def __setattr__(self, name, value):
        raise AttributeError('{.__class__.__name__} instances are immutable'.format(self))

    def __delattr__(self, name):
        raise AttributeError('{.__class__.__name__} instances are immutable'.format(self))

    @staticmethod
    def _match(media_type_str):
        if not isinstance(media_type_str, str):
            return None
        return MEDIA_TYPE_REGEX.search(media_type_str.strip())

    @classmethod
    def is_valid(cls, media_type_str):
        """
        >>> MediaType.is_valid('application/vnd.ms-excel')
        True
        >>> MediaType.is_valid('application/pgp-signature+x+y')
        False
        """
        return cls._match(media_type_str) is not None

    @property
    def type(self):
        return self._type

    @property
    def subtype(self):
        return self._subtype

    @property
    def parameters(self):
        return self._parameters

    def get_hash(self):
        return hashlib.md5(str(self).encode('utf-8')).hexdigest()

    def is_equal_to(self, other):
        if not isinstance(other, MediaType):
            return False
        return str(self) == str(other)

    def __eq__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.is_equal_to(other)

    def __ne__(self, other):
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self):
        return hash((self.__class__.__name__, str(self)))

    def __str__(self):
        s = '{}/{}'.format(self._type, self._subtype)
        if self._parameters:
            s += ';' + self._parameters
        return s

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, str(self))
