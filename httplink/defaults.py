# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""This module contains helpers that inspect available modules and the
environment to give sane values to httplink defaults.

These defaults only affect the command line tool; the codec itself has no
configurable behavior. Overrides happen where the values are accessed, so
this module is considered internal to httplink and not part of the API.

The ``_missing_modules`` functions are helpers for inspecting what is
reasonable to expect to work. They can influence default values, but should not
be used in the rest of the code for feature checking (just raise the
ImportErrors) unless it's directly user-visible, or in the test suite to decide
which tests to skip.
"""

import logging
import os

log = logging.getLogger("httplink.defaults")


def use_color(*, use_env=True):
    """Return whether output should be colored, or None if that is to be
    decided by the caller (typically by looking at whether the output is a
    TTY)

    ``HTTPLINK_COLOR=0`` or ``=1`` takes precedence (empty or other values are
    ignored); otherwise, a set
    ``NO_COLOR`` (see <https://no-color.org/>) disables colors.

    >>> use_color(use_env=False) is None
    True
    """
    if use_env and os.environ.get('HTTPLINK_COLOR'):
        try:
            return bool(int(os.environ['HTTPLINK_COLOR']))
        except ValueError:
            log.warning("Ignoring HTTPLINK_COLOR=%r, expected 0 or 1", os.environ['HTTPLINK_COLOR'])
    if use_env and os.environ.get('NO_COLOR'):
        return False
    return None


def prettyprint_missing_modules():
    """Return a list of modules that are missing in order to use pretty
    printing and highlighting (ie. the full httplink command line tool)"""
    missing = []
    try:
        import pygments # noqa: F401
    except ImportError:
        missing.append('pygments')
    return missing

