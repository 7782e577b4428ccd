# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""
Common errors for the httplink library
"""

from typing import Optional


class Error(Exception):
    """
    Base exception for all exceptions raised by httplink
    """


class HelpfulError(Error):
    def __str__(self):
        """Short user presentable message; the caller decides how to mark it
        as an error"""
        return type(self).__name__

    def extra_help(self, hints=None) -> Optional[str]:
        """Information printed by the httplink command line tool when the
        error message itself may be insufficient to point the user in the
        right direction

        The `hints` dictionary may be populated with context that the caller
        has; the implementation must tolerate their absence. Currently
        established keys:

        * original_text (str): Header value that was attempted to parse
        """
        return None


class InvalidLink(ValueError, HelpfulError):
    """A Link header value, or one of its items, could not be parsed.

    This deliberately carries no information about which stage of parsing
    failed; when raised from a lower-level error, that is available as
    ``__cause__`` for debugging only.

    >>> str(InvalidLink())
    'invalid link'
    """

    def __str__(self):
        return "invalid link"

    def extra_help(self, hints=None):
        original = (hints or {}).get("original_text")
        if original is None:
            return None
        segments = original.split(",")
        if any(s[:1].isspace() or s.split(";", 1)[0][-1:].isspace() for s in segments):
            return "Whitespace around the <...> of link items is not accepted, not even after a ','."
        if any(s.rstrip().endswith(";") for s in segments):
            return "A trailing ';' is read as an empty parameter, which is not accepted."
        return "Link items need to look like '<uri>; name=value', separated by ','."


class InvalidHeader(ValueError, HelpfulError):
    """Generic signal of the header abstraction that a header was absent or
    its value could not be decoded into the requested type"""

    def __str__(self):
        return "invalid header value"


class MalformedUriError(ValueError, HelpfulError):
    def __str__(self):
        if self.args:
            return f"Malformed URI reference: {self.args[0]!r}"
        else:
            return "Malformed URI reference"
