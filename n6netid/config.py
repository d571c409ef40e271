# Copyright (c) 2026 NASK. All rights reserved.

"""
Optional configuration of the *n6netid* library.

The configuration is read from ``*.conf`` files (in the standard
:mod:`configparser` format) placed in the :data:`n6netid.const.ETC_DIR`
and :data:`n6netid.const.USER_DIR` directories (or from explicitly
specified files).  Example::

    [uri]
    # scheme:port pairs, added to (or overriding) the built-in ones
    extra_known_ports = gopher:70, imap:143, https:8443

    [logging]
    # a file in the format accepted by `logging.config.fileConfig()`
    config_file = ~/.n6netid/logging.ini
"""

import configparser
import os
import os.path as osp
import re
from types import MappingProxyType

from n6netid.const import (
    ETC_DIR,
    URI_SCHEME_TO_DEFAULT_PORT,
    USER_DIR,
)
from n6netid.encoding_helpers import ascii_str
from n6netid.exceptions import ConfigError
from n6netid.log_helpers import (
    configure_logging,
    get_logger,
)
from n6netid.regexes import (
    URI_PORT_REGEX,
    URI_SCHEME_REGEX,
)
from n6netid.uri import UriValue


LOGGER = get_logger(__name__)


class NetIdConfig(object):

    r"""
    The *n6netid* configuration.

    Constructor args/kwargs:
        `config_file_paths` (iterable of str, or None; default: None):
            The configuration files to read.  If :obj:`None` -- all
            ``*.conf`` files from :data:`n6netid.const.ETC_DIR` and then
            from :data:`n6netid.const.USER_DIR` are read (each directory
            searched recursively; the paths sorted).

    Raises:
        :exc:`~n6netid.exceptions.ConfigError` if any configuration file
        is malformed or contains an invalid value.

    >>> import tempfile
    >>> with tempfile.NamedTemporaryFile('w', suffix='.conf') as f:
    ...     _ = f.write('[uri]\nextra_known_ports = gopher:70, HTTPS:8443\n')
    ...     f.flush()
    ...     config = NetIdConfig([f.name])
    >>> config.known_ports['gopher'], config.known_ports['https'], config.known_ports['ftp']
    (70, 8443, 21)
    >>> config.parse_uri('gopher://example.com:70/1')
    UriValue('gopher://example.com/1')
    >>> config.make_uri('https', 'example.com', port=443)
    UriValue('https://example.com:443')
    >>> config.logging_config_file is None
    True
    """

    CONFIG_FILENAME_REGEX = re.compile(r'\.conf\Z')

    def __init__(self, config_file_paths=None):
        if config_file_paths is None:
            config_file_paths = (self._get_config_file_paths(ETC_DIR) +
                                 self._get_config_file_paths(USER_DIR))
        config_parser = self._read_config_files(list(config_file_paths))
        self._known_ports = self._get_known_ports(config_parser)
        self._logging_config_file = self._get_logging_config_file(config_parser)

    @property
    def known_ports(self):
        """An immutable mapping: scheme name -> its default port."""
        return self._known_ports

    @property
    def logging_config_file(self):
        """The path of the logging configuration file (or :obj:`None`)."""
        return self._logging_config_file

    def configure_logging(self):
        """
        Configure logging using the configured logging configuration
        file (if any).

        Returns:
            :obj:`True` if the file has been loaded, :obj:`False` if no
            logging configuration file is specified.

        Raises:
            :exc:`RuntimeError` (see:
            :func:`n6netid.log_helpers.configure_logging`).
        """
        if self._logging_config_file is None:
            return False
        configure_logging(self._logging_config_file)
        return True

    def make_uri(self, *args, **kwargs):
        """Make a :class:`~n6netid.uri.UriValue` aware of the configured known ports."""
        return UriValue(*args, known_ports=self._known_ports, **kwargs)

    def parse_uri(self, uri_str):
        """Parse a URI string (see: :meth:`n6netid.uri.UriValue.parse`)."""
        return UriValue.parse(uri_str, known_ports=self._known_ports)

    #
    # Helpers

    @classmethod
    def _get_config_file_paths(cls, path):
        config_files = []
        for directory, _, fnames in os.walk(path):
            for fname in fnames:
                if cls.CONFIG_FILENAME_REGEX.search(fname):
                    config_files.append(osp.join(directory, fname))
        return sorted(config_files)

    @staticmethod
    def _read_config_files(config_files):
        config_parser = configparser.ConfigParser(interpolation=None)
        if not config_files:
            LOGGER.debug('No config files to read (using the defaults)')
            return config_parser
        try:
            ok_config_files = config_parser.read(config_files, encoding='utf-8')
        except configparser.Error as exc:
            raise ConfigError('malformed config file: {}'.format(ascii_str(exc))) from exc
        except UnicodeDecodeError as exc:
            raise ConfigError('config file not decodable as UTF-8: {}'
                              .format(ascii_str(exc))) from exc
        err_config_files = set(config_files).difference(ok_config_files)
        if err_config_files:
            LOGGER.warning(
                'Config files that could not be read '
                '(check their permission modes?): %s', ', '.join(
                    '"{0}"'.format(ascii_str(name))
                    for name in sorted(
                        err_config_files,
                        key=config_files.index)))
        if ok_config_files:
            LOGGER.info('Config files read properly: %s', ', '.join(
                '"{0}"'.format(ascii_str(name))
                for name in ok_config_files))
        return config_parser

    @staticmethod
    def _get_known_ports(config_parser):
        known_ports = dict(URI_SCHEME_TO_DEFAULT_PORT)
        opt_value = config_parser.get('uri', 'extra_known_ports', fallback='')
        for item in opt_value.split(','):
            item = item.strip()
            if not item:
                continue
            scheme, sep, port = (s.strip() for s in item.partition(':'))
            if not (sep and URI_SCHEME_REGEX.search(scheme) and URI_PORT_REGEX.search(port)):
                raise ConfigError('uri', 'extra_known_ports',
                                  '{!a} is not a valid "scheme:port" pair'.format(item))
            known_ports[scheme.lower()] = int(port)
        LOGGER.debug('Known URI scheme ports: %a', known_ports)
        return MappingProxyType(known_ports)

    @staticmethod
    def _get_logging_config_file(config_parser):
        opt_value = config_parser.get('logging', 'config_file', fallback='').strip()
        if not opt_value:
            return None
        return osp.expanduser(opt_value)
