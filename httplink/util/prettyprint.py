# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""A pretty-printer for Link header values"""

import pygments
import pygments.lexers
import pygments.formatters

from httplink import Link, InvalidLink

from httplink.util.pygments_lexer import _register

_register()

#: Name of the lexer that highlights pretty-printed Link header values
LEXER_LINK_HEADER = 'link-header'

def pretty_print(text):
    """Given a Link header value, reshape it into something human-readable.
    The return value is a triple (infos, lexer, text) where text is the
    reshaped value, lexer is the name of a pygments lexer that can be used to
    highlight it, and infos are lines that give additional data (like whether
    the text could be parsed at all).

    The output puts every link on a line of its own; it is meant for reading,
    and not valid as a header value any more.

    >>> pretty_print('</a>; rel=up,</b>')
    (['Link header value was re-formatted'], 'link-header', '</a>; rel=up,\\n</b>')
    >>> pretty_print('</a>;')
    (['Invalid Link header value was not re-formatted'], 'link-header', '</a>;')
    """
    infos = []
    info = infos.append

    try:
        parsed = Link.parse(text)
    except InvalidLink:
        info("Invalid Link header value was not re-formatted")
        return (infos, LEXER_LINK_HEADER, text)

    info("Link header value was re-formatted")
    prettyprinted = ",\n".join(str(l) for l in parsed)
    return (infos, LEXER_LINK_HEADER, prettyprinted)

def highlight(text, lexer_name):
    """Color text for terminal output with the named pygments lexer, or
    return it unmodified if no such lexer is known"""
    try:
        lexer = pygments.lexers.get_lexer_by_name(lexer_name)
    except pygments.util.ClassNotFound:
        return text
    return pygments.highlight(text, lexer, pygments.formatters.TerminalFormatter())
