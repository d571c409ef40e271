# Copyright (c) 2026 NASK. All rights reserved.

"""
This module contains several regular expression objects (most of
them are used in other parts of the *n6netid* library).
"""


import re


#: IPv4 address in decimal dotted-quad notation.
#:
#: Used by :mod:`n6netid.addr_helpers`.
IPv4_STRICT_DECIMAL_REGEX = re.compile(r'''
    \A
    (?:
        (?:
            25[0-5]       # 250..255
        |
            2[0-4][0-9]   # 200..249
        |
            1[0-9][0-9]   # 100..199
        |
            [1-9]?[0-9]   # 0..99
        )
        (?:
            \.            # dot
            (?=           # followed by next octet...
                [0-9]
            )
        |                 # or
            (?=           # termination
                \Z
            )
        )
    ){4}
    \Z
''', re.ASCII | re.VERBOSE)


#: Characters an IPv6 textual address may consist of (the optional
#: IPv4-like tail included).
IPv6_CHARACTERS_REGEX = re.compile(r'\A[:.0-9A-Fa-f]+\Z', re.ASCII)


#: URI scheme name (RFC 3986, section 3.1).
#:
#: Used by :class:`n6netid.uri.UriValue`.
URI_SCHEME_REGEX = re.compile(r'\A[a-zA-Z][\-+.0-9a-zA-Z]*\Z', re.ASCII)


#: Trailing scheme delimiter (`:` or `://`) that is stripped from
#: a scheme given to :meth:`n6netid.uri.UriValue.with_scheme`.
URI_SCHEME_DELIMITER_SUFFIX_REGEX = re.compile(r':(?://)?\Z', re.ASCII)


#: Port number, as accepted in the authority component of a URI.
URI_PORT_REGEX = re.compile(r'\A[0-9]+\Z', re.ASCII)


#: Media type (RFC 6838) -- with an optional structured syntax
#: suffix and (at most) one parameter.
#:
#: Used by :class:`n6netid.media_type.MediaType`.
MEDIA_TYPE_REGEX = re.compile(r'''
    \A
    (?P<type>
        [a-z0-9]
        [a-z0-9!\#$&\-^_.]*
    )
    /
    (?P<subtype>
        [a-z0-9]
        [a-z0-9!\#$&\-^_.]*
    )
    (?P<suffix>
        \+
        [a-z]+
    )?
    (?P<parameters>
        ;
        [^;]*
    )?
    \Z
''', re.ASCII | re.IGNORECASE | re.VERBOSE)
