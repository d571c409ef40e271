# Copyright (c) 2026 NASK. All rights reserved.

"""
*n6netid* -- immutable value types for network identifiers: URIs
(:class:`UriValue`), IP addresses with range matching
(:class:`IpAddress`) and media types (:class:`MediaType`).
"""


from n6netid.exceptions import (
    NetIdError,
    UriError,
    InvalidUriScheme,
    InvalidUriPort,
    MissingScheme,
    MissingHierarchicalPart,
    MalformedUri,
    IpError,
    InvalidIpFormat,
    InvalidRangeFormat,
    InvalidMediaType,
    ConfigError,
)
from n6netid.ip_address import IpAddress
from n6netid.media_type import MediaType
from n6netid.outcome import (
    Outcome,
    outcome_of,
)
from n6netid.percent_codec import encode
from n6netid.uri import UriValue


__all__ = [
    'NetIdError',
    'UriError',
    'InvalidUriScheme',
    'InvalidUriPort',
    'MissingScheme',
    'MissingHierarchicalPart',
    'MalformedUri',
    'IpError',
    'InvalidIpFormat',
    'InvalidRangeFormat',
    'InvalidMediaType',
    'ConfigError',

    'IpAddress',
    'MediaType',
    'Outcome',
    'outcome_of',
    'encode',
    'UriValue',
]
