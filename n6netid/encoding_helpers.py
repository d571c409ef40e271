# Copyright (c) 2026 NASK. All rights reserved.


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only :class:`str`.

    Non-ASCII characters are escaped using Python literal notation
    (``\x...``, ``\u...``, ``\U...``); no encoding/decoding exception
    is ever raised.  Intended to be used to embed values supplied by
    clients in exception messages and log entries.

    >>> ascii_str('')
    ''
    >>> ascii_str('http://example.com/?a=b')
    'http://example.com/?a=b'
    >>> ascii_str('http://błąd.example')
    'http://b\\u0142\\u0105d.example'
    >>> ascii_str(b'b\xc5\x82\xc4\x85d')
    'b\\u0142\\u0105d'
    >>> ascii_str(b'\xee\xdd')
    '\\udcee\\udcdd'
    >>> ascii_str(42)
    '42'
    >>> ascii_str(None)
    'None'

    >>> class Nasty(object):
    ...     def __str__(self): raise UnicodeError
    ...     def __repr__(self): return 'quite nasŧy'
    ...
    >>> ascii_str(Nasty())
    'quite nas\\u0167y'
    """
    if isinstance(obj, str):
        s = obj
    elif isinstance(obj, (bytes, bytearray, memoryview)):
        s = bytes(obj).decode('utf-8', 'surrogateescape')
    else:
        try:
            s = str(obj)
        except ValueError:
            s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def as_unicode(obj, decode_error_handling='strict'):

    r"""
    Convert the given object to a :class:`str`.

    :class:`bytes`/:class:`bytearray`/:class:`memoryview` objects are
    decoded as *UTF-8* (using the given `decode_error_handling`); other
    objects are converted with :class:`str` (or :func:`repr`, if the
    former fails).

    >>> as_unicode('Oł\xf3wek') == 'Oł\xf3wek'
    True
    >>> as_unicode(b'O\xc5\x82\xc3\xb3wek') == 'Oł\xf3wek'
    True
    >>> as_unicode(8080)
    '8080'
    >>> as_unicode(b'\xdd')                              # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    UnicodeDecodeError: ...
    """
    if isinstance(obj, memoryview):
        obj = bytes(obj)
    if isinstance(obj, (bytes, bytearray)):
        s = obj.decode('utf-8', decode_error_handling)
    else:
        try:
            s = str(obj)
        except ValueError:
            s = repr(obj)
    return s
