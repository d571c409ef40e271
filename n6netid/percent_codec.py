# Copyright (c) 2026 NASK. All rights reserved.

"""
Percent-encoding (RFC 3986, section 2.1) parametrized by the set of
characters that are allowed to appear unencoded.

Each URI component filter of :class:`n6netid.uri.UriValue` uses
:func:`encode` with one of the *allowed character sets* defined here.
"""

import functools
import re
import string
from urllib.parse import quote


#
# Allowed character sets (based on RFC 3986)

#: `unreserved` (RFC 3986, section 2.3)
UNRESERVED = string.ascii_letters + string.digits + '-._~'

#: `sub-delims` (RFC 3986, section 2.2)
SUB_DELIMS = "!$&'()*+,;="

HOST_ALLOWED = UNRESERVED + SUB_DELIMS + ':[]'
USER_INFO_ALLOWED = UNRESERVED + SUB_DELIMS + ':'
PATH_ALLOWED = UNRESERVED + SUB_DELIMS + ':@/'
QUERY_ALLOWED = UNRESERVED + SUB_DELIMS + ':@/[]?'
FRAGMENT_ALLOWED = QUERY_ALLOWED


def encode(text, allowed_character_set):
    r"""
    Percent-encode every maximal run of characters of `text` that do
    not belong to `allowed_character_set`.

    A `%` character that begins a valid escape (i.e., is followed by
    two hexadecimal digits) is left intact -- so the function is
    idempotent and never encodes anything twice.  Characters are
    encoded as their *UTF-8* bytes (with uppercase hexadecimal digits).

    Args:
        `text` (str):
            The text to be encoded.
        `allowed_character_set` (str):
            All characters that are allowed to appear unencoded (the
            `%` character is never a member of such a set).

    Returns:
        The encoded text (a :class:`str`).

    >>> encode('foo^bar', HOST_ALLOWED)
    'foo%5Ebar'
    >>> encode('foo%5Ebar', HOST_ALLOWED)
    'foo%5Ebar'
    >>> encode('f<>=`bar', QUERY_ALLOWED)
    'f%3C%3E=%60bar'
    >>> encode('/bar/baz?bat=quz', PATH_ALLOWED)
    '/bar/baz%3Fbat=quz'
    >>> encode('100%', PATH_ALLOWED)
    '100%25'
    >>> encode('%zz%2f', PATH_ALLOWED)
    '%25zz%2f'
    >>> encode('zażółć', PATH_ALLOWED)
    'za%C5%BC%C3%B3%C5%82%C4%87'
    >>> encode('', PATH_ALLOWED)
    ''
    """
    return _get_disallowed_run_regex(allowed_character_set).sub(_encode_match, text)


def is_encoded(text, allowed_character_set):
    """
    Check whether `text` is already in its percent-encoded form (as
    :func:`encode` would produce for the given character set).

    >>> is_encoded('k%5Eey=valu%60', QUERY_ALLOWED)
    True
    >>> is_encoded('k^ey=valu`', QUERY_ALLOWED)
    False
    >>> is_encoded('key[]', PATH_ALLOWED)
    False
    """
    return encode(text, allowed_character_set) == text


@functools.lru_cache(maxsize=None)
def _get_disallowed_run_regex(allowed_character_set):
    if '%' in allowed_character_set:
        raise ValueError('the `%` character cannot be a member '
                         'of an allowed character set')
    return re.compile(
        r'(?:'
        r'[^{}%]+'             # run of disallowed characters
        r'|'
        r'%(?![0-9A-Fa-f]{{2}})'  # `%` not beginning an escape
        r')'.format(re.escape(allowed_character_set)))


def _encode_match(match):
    return quote(match.group(0), safe='', errors='surrogatepass')
