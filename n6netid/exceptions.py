# Copyright (c) 2026 NASK. All rights reserved.

from n6netid.encoding_helpers import ascii_str, as_unicode


#
# Generic mix-ins
#

class _ErrorWithPublicMessageMixin(object):

    r"""
    A mix-in class that provides the :attr:`public_message` property.

    The value of this property is a :class:`str`.  It is taken either
    from the `public_message` constructor keyword argument or -- if the
    argument was not specified -- from the value of the
    :attr:`default_public_message` attribute.

    The public message should be a complete sentence: first word
    capitalized + the period at the end.  It is safe to be presented
    to clients (non-ASCII characters of any offending values are
    escaped).

    The :class:`str` conversion provided by the class uses the value
    of :attr:`public_message`:

    >>> class SomeError(_ErrorWithPublicMessageMixin, Exception):
    ...     pass
    ...
    >>> str(SomeError('a', 'b'))  # using attribute default_public_message
    'Invalid value.'
    >>> str(SomeError('a', 'b', public_message='Spąm.'))
    'Spąm.'

    The :func:`repr` conversion results in a programmer-readable
    representation (containing the class name, :func:`repr`-formatted
    constructor arguments and the :attr:`public_message` property):

    >>> SomeError('a', 'b')
    <SomeError: args=('a', 'b'); public_message='Invalid value.'>
    >>> SomeError('a', 'b', public_message='Spam.')
    <SomeError: args=('a', 'b'); public_message='Spam.'>
    """

    #: (overridable in subclasses)
    default_public_message = 'Invalid value.'

    def __init__(self, *args, **kwargs):
        try:
            public_message = kwargs.pop('public_message')
        except KeyError:
            pass
        else:
            self._public_message = as_unicode(public_message)
        try:
            super(_ErrorWithPublicMessageMixin, self).__init__(*args, **kwargs)
        except TypeError:
            if kwargs:
                raise TypeError(
                    'illegal keyword arguments for {} constructor: {}'.format(
                        self.__class__.__name__,
                        ', '.join(sorted(map(repr, kwargs)))))
            else:
                raise

    @property
    def public_message(self):
        """The aforementioned property."""
        try:
            return self._public_message
        except AttributeError:
            # (in subclasses `default_public_message` can also be a @property)
            self._public_message = as_unicode(self.default_public_message)
            return self._public_message

    def __str__(self):
        return self.public_message

    def __repr__(self):
        return ('<{0.__class__.__name__}: args={0.args!r}; '
                'public_message={0.public_message!r}>'.format(self))


class _OffendingValueErrorMixin(object):

    r"""
    Mix-in for exception classes whose instances are initialized with
    the offending value as the first positional argument.

    The value is exposed as the :attr:`offending_value` attribute and
    can be referred to (as ``{value}``, ASCII-escaped) in the
    :attr:`msg_template` attribute from which the default public
    message is made.

    >>> class SomeError(_OffendingValueErrorMixin, NetIdError):
    ...     msg_template = '"{value}" is not good.'
    ...
    >>> exc = SomeError('ł')
    >>> exc.offending_value
    'ł'
    >>> exc.public_message
    '"\\u0142" is not good.'
    >>> SomeError().public_message
    'Invalid value.'
    """

    #: (overridable in subclasses)
    msg_template = None

    def __init__(self, *args, **kwargs):
        self.offending_value = args[0] if args else None
        super(_OffendingValueErrorMixin, self).__init__(*args, **kwargs)

    @property
    def default_public_message(self):
        """Made from :attr:`msg_template` and the offending value."""
        if self.msg_template is None or not self.args:
            return super(_OffendingValueErrorMixin, self).default_public_message
        return self.msg_template.format(value=ascii_str(self.offending_value))


#
# Actual exception classes
#

class NetIdError(_ErrorWithPublicMessageMixin, ValueError):

    """
    The base class for all exceptions raised when a network identifier
    (URI, IP address, IP range, media type) cannot be constructed from
    the given input.

    >>> exc = NetIdError('a', 'b')
    >>> exc.args
    ('a', 'b')
    >>> exc.public_message   # using attribute default_public_message
    'Invalid value.'
    >>> str(exc)
    'Invalid value.'
    >>> isinstance(exc, ValueError)
    True

    >>> exc = NetIdError('a', 'b', public_message='Spam.')
    >>> exc.public_message   # the message passed into the constructor
    'Spam.'
    >>> '{}'.format(exc)
    'Spam.'
    """


#
# URI-related

class UriError(NetIdError):
    """
    The base class for :class:`~n6netid.uri.UriValue`-related exceptions.
    """
    default_public_message = 'Invalid URI.'


class InvalidUriScheme(_OffendingValueErrorMixin, UriError):
    """
    Raised when a URI scheme name is not valid.

    >>> str(InvalidUriScheme('#bogus#'))
    'Invalid scheme "#bogus#".'
    """
    msg_template = 'Invalid scheme "{value}".'


class InvalidUriPort(_OffendingValueErrorMixin, UriError):
    """
    Raised when a URI port is not a non-negative integer number.

    >>> str(InvalidUriPort('bogus'))
    'Invalid port "bogus".'
    """
    msg_template = 'Invalid port "{value}".'


class MissingScheme(_OffendingValueErrorMixin, UriError):
    """
    Raised when the URI being parsed has no scheme.

    >>> str(MissingScheme('/foo/bar?baz=qux'))
    'Missing scheme in uri "/foo/bar?baz=qux".'
    """
    msg_template = 'Missing scheme in uri "{value}".'


class MissingHierarchicalPart(_OffendingValueErrorMixin, UriError):
    """
    Raised when the URI being parsed consists of the scheme only.

    >>> str(MissingHierarchicalPart('http:'))
    'Missing hierarchical segment in uri "http:".'
    """
    msg_template = 'Missing hierarchical segment in uri "{value}".'


class MalformedUri(_OffendingValueErrorMixin, UriError):
    """
    Raised when the URI being parsed cannot be decomposed into its
    components.

    >>> str(MalformedUri('::http'))
    'Cannot parse malformed uri "::http".'
    """
    msg_template = 'Cannot parse malformed uri "{value}".'


#
# IP-related

class IpError(NetIdError):
    """
    The base class for :class:`~n6netid.ip_address.IpAddress`-related
    exceptions.
    """
    default_public_message = 'Invalid IP address.'


class InvalidIpFormat(_OffendingValueErrorMixin, IpError):
    """
    Raised when a text is neither a valid IPv4 nor IPv6 address.

    >>> str(InvalidIpFormat('1.2.3.355'))
    '"1.2.3.355" is not a valid IP address.'
    """
    msg_template = '"{value}" is not a valid IP address.'


class InvalidRangeFormat(_OffendingValueErrorMixin, IpError):
    """
    Raised when an IP range specification is malformed.

    >>> str(InvalidRangeFormat('1.2.3.4/24/8'))
    'Invalid range "1.2.3.4/24/8" given.'
    """
    msg_template = 'Invalid range "{value}" given.'


#
# Media-type-related

class InvalidMediaType(_OffendingValueErrorMixin, NetIdError):
    """
    Raised when a text is not a valid media type.

    >>> str(InvalidMediaType('image/vnd/adobe.photoshop'))
    '"image/vnd/adobe.photoshop" is not a valid media type.'
    """
    msg_template = '"{value}" is not a valid media type.'


#
# Configuration-related

class ConfigError(Exception):

    """
    Raised when the *n6netid* configuration cannot be loaded or
    contains an invalid value.

    >>> str(ConfigError('uri', 'extra_known_ports', 'bad pair'))
    '[uri] extra_known_ports: bad pair'
    >>> str(ConfigError('something went wrong'))
    'something went wrong'
    """

    def __init__(self, *args):
        super().__init__(*args)
        if len(args) == 3:
            self.sect_name, self.opt_name, self.reason = args
        else:
            self.sect_name = self.opt_name = self.reason = None

    def __str__(self):
        if self.sect_name is not None:
            return '[{}] {}: {}'.format(self.sect_name, self.opt_name, self.reason)
        return super().__str__()
