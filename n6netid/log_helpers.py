# Copyright (c) 2026 NASK. All rights reserved.

import collections
import logging
import logging.config
import os.path
import sys
import traceback

from n6netid.const import TOPLEVEL_N6NETID_PACKAGES


def get_logger(name=None):
    """
    Like logging.getLogger(...) but replacing '__main__' with a sensible name.

    For example, if the script path is '/whatever/n6netid/tools/foo.py'
    get_logger('__main__') is equivalent to logging.getLogger('n6netid.tools.foo').

    >>> get_logger('n6netid.uri').name
    'n6netid.uri'
    """
    if name == '__main__':
        # try to get the script path from __main__.__file__
        script_path = getattr(sys.modules['__main__'], '__file__', None)
        if not script_path:
            # or, if __main__ does not have a non-blank __file__ attribute,
            # extract the script path from sys.argv...
            script_path = sys.argv[0]
        # strip off the filename extension...
        remaining = os.path.splitext(script_path)[0]
        # ..and pop path name segments up to
        # (and including) the toplevel package name
        aggregated_segments = collections.deque()
        while True:
            remaining, segment = os.path.split(remaining)
            segment = segment.replace('.', 'D')  # just in case of '.' or '..'
            aggregated_segments.appendleft(segment)
            if segment in TOPLEVEL_N6NETID_PACKAGES or remaining in ('', '/'):
                break
        name = '.'.join(aggregated_segments)
    return logging.getLogger(name)


LOGGER = get_logger(__name__)

# no output unless the application configures logging
logging.getLogger(TOPLEVEL_N6NETID_PACKAGES[0]).addHandler(logging.NullHandler())

_loaded_configuration_paths = set()


def configure_logging(path):
    """
    Load the logging configuration from the given file (which should be
    in the format accepted by :func:`logging.config.fileConfig`).

    Loading the same file again is ignored (a warning is logged).

    Raises:
        :exc:`RuntimeError` -- if the file cannot be read or its
        contents are not a valid logging configuration.
    """
    path = os.path.abspath(os.path.expanduser(path))
    if path in _loaded_configuration_paths:
        LOGGER.warning('ignored attempt to load logging configuration '
                       'file %a that has already been used', path)
        return
    try:
        _try_reading(path)
    except OSError as exc:
        raise RuntimeError('logging configuration not loaded: could not '
                           'open the file {!a} ({})'.format(path, exc)) from exc
    try:
        logging.config.fileConfig(path, disable_existing_loggers=False)
    except Exception as exc:
        raise RuntimeError('error while configuring logging, using settings '
                           'from configuration file {!a}:\n{}'
                           .format(path, traceback.format_exc())) from exc
    LOGGER.info('logging configuration loaded from %a', path)
    _loaded_configuration_paths.add(path)


def _try_reading(path):
    with open(path):
        pass
