# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Pygments lexer for Link header values

>>> from pygments import lex
>>> [t for (t, v) in lex('</a>; rel=up', LinkHeaderLexer()) if v.strip()][:3]
[Token.Punctuation, Token.Name.Label, Token.Punctuation]
"""

from pygments import token, lexers
from pygments.lexer import RegexLexer, bygroups

__all__ = ['LinkHeaderLexer']

class LinkHeaderLexer(RegexLexer):
    name = "LinkHeaderLexer"
    aliases = ['link-header']
    mimetypes = []

    tokens = {
        'root': [
            ('(<)([^>]*)(>)', bygroups(token.Punctuation, token.Name.Label, token.Punctuation), 'maybe-end'),
            ],
        'maybe-end': [
            (';\\s*', token.Punctuation, 'attribute'),
            # Whitespace after the comma is not actually allowed, but produced
            # by the pretty printer
            (',\\s*', token.Punctuation, '#pop'),
            ],
        'attribute': [
            ('([^,;=]+)(=)([^,;]*)', bygroups(token.Name.Attribute, token.Operator, token.String.Symbol), '#pop'),
            ],
        }

def _register():
    if 'LinkHeaderLexer' not in lexers.LEXERS:
        lexers.LEXERS['LinkHeaderLexer'] = (
                'httplink.util.pygments_lexer',
                'LinkHeaderLexer',
                tuple(LinkHeaderLexer.aliases),
                (),
                tuple(LinkHeaderLexer.mimetypes),
                )
