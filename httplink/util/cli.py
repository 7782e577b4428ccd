# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Helpers for creating command line tools around httplink

Note that these are not particular to the Link header; they are shared here
to keep the tool itself short."""

import argparse
import logging

log = logging.getLogger("httplink.cli")

class ActionNoYes(argparse.Action):
    """Simple action that automatically manages --{,no-}something style options

    >>> p = argparse.ArgumentParser()
    >>> _ = p.add_argument('--color', action=ActionNoYes, default=None)
    >>> p.parse_args(['--no-color'])
    Namespace(color=False)
    >>> p.parse_args([])
    Namespace(color=None)
    """
    def __init__(self, option_strings, dest, default=True, required=False, help=None):
        assert len(option_strings) == 1, "ActionNoYes takes only one option name"
        assert option_strings[0].startswith('--'), "ActionNoYes options must start with --"
        super().__init__(['--' + option_strings[0][2:], '--no-' + option_strings[0][2:]], dest, nargs=0, const=None, default=default, required=required, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, not option_string.startswith('--no-'))

def add_verbosity_arguments(p):
    """Add the -v and -q options that feed :func:`configure_logging`"""
    p.add_argument(
        "-v",
        "--verbose",
        help="Increase the debug output",
        action="count",
        default=0,
    )
    p.add_argument(
        "-q",
        "--quiet",
        help="Decrease the debug output",
        action="count",
        default=0,
    )

def configure_logging(verbosity, color):
    """Set up the root handler and the level of the ``httplink`` loggers

    Colored log output is used if colorlog is available, unless color is
    explicitly False."""
    if color is not False:
        try:
            import colorlog
        except ImportError:
            color = False
        else:
            colorlog.basicConfig()
    if not color:
        logging.basicConfig()

    if verbosity <= -2:
        logging.getLogger("httplink").setLevel(logging.CRITICAL + 1)
    elif verbosity == -1:
        logging.getLogger("httplink").setLevel(logging.CRITICAL)
    elif verbosity == 0:
        logging.getLogger("httplink").setLevel(logging.WARNING)
    elif verbosity == 1:
        logging.getLogger("httplink").setLevel(logging.INFO)
    else:
        logging.getLogger("httplink").setLevel(logging.DEBUG)

    log.debug("Logging configured.")
