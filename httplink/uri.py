# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""URI references as used inside the angle brackets of a Link header

The :class:`Uri` type only checks syntax against the ``URI-reference``
production of RFC3986 and keeps the text it was created from; it does not
normalize anything on its own.

>>> Uri.parse("http://example.com/foo?bar#baz").netloc
'example.com'
>>> str(Uri.parse("../up"))
'../up'
>>> Uri.parse("not a uri")
Traceback (most recent call last):
    ...
httplink.error.MalformedUriError: Malformed URI reference: 'not a uri'
"""

import ipaddress
import re
import string
import urllib.parse

from .error import MalformedUriError

#: "unreserved" characters from RFC3986
unreserved = string.ascii_letters + string.digits + '-._~'

#: "sub-delims" characters from RFC3986
sub_delims = "!$&'()*+,;="


def _charclass(characters):
    return "[" + "".join(re.escape(c) for c in characters) + "]"

# The expressions below are derived from the collected ABNF in RFC3986
# appendix A and are to be used with re.VERBOSE. IP literals are only checked
# for their character set here; their content is validated after matching.

pct_encoded = r"(?: % [0-9A-Fa-f]{2} )"

pchar = rf"(?: {_charclass(unreserved + sub_delims + ':@')} | {pct_encoded} )"

scheme = r"(?: [A-Za-z] [A-Za-z0-9+\-.]* )"

userinfo = rf"(?: (?: {_charclass(unreserved + sub_delims + ':')} | {pct_encoded} )* )"

ip_literal = r"(?: \[ [0-9A-Za-z:.\-_~!$&'()*+,;=]+ \] )"

reg_name = rf"(?: (?: {_charclass(unreserved + sub_delims)} | {pct_encoded} )* )"

authority = rf"(?: (?: {userinfo} @ )? (?: {ip_literal} | {reg_name} ) (?: : [0-9]* )? )"

segment = rf"(?: {pchar}* )"
segment_nz = rf"(?: {pchar}+ )"
segment_nz_nc = rf"(?: (?: {_charclass(unreserved + sub_delims + '@')} | {pct_encoded} )+ )"

path_abempty = rf"(?: (?: / {segment} )* )"
path_absolute = rf"(?: / (?: {segment_nz} (?: / {segment} )* )? )"
path_noscheme = rf"(?: {segment_nz_nc} (?: / {segment} )* )"
path_rootless = rf"(?: {segment_nz} (?: / {segment} )* )"

query = rf"(?: (?: {pchar} | [/?] )* )"
fragment = query

hier_part = rf"""(?: // {authority} {path_abempty}
                   | {path_absolute}
                   | {path_rootless}
                   | )"""

relative_part = rf"""(?: // {authority} {path_abempty}
                       | {path_absolute}
                       | {path_noscheme}
                       | )"""

URI = rf"(?: {scheme} : {hier_part} (?: \? {query} )? (?: \# {fragment} )? )"

relative_ref = rf"(?: {relative_part} (?: \? {query} )? (?: \# {fragment} )? )"

URI_reference = rf"(?: {URI} | {relative_ref} )"

_uri_reference = re.compile(URI_reference, re.VERBOSE)
_authority_ip_literal = re.compile(r"(?:[A-Za-z][A-Za-z0-9+\-.]*:)?//(?:[^/?#\[\]]*@)?(\[[^\]]*\])")


def _check_ip_literal(literal):
    inner = literal[1:-1]
    if inner[:1] in ('v', 'V'):
        if not re.fullmatch(r"[vV][0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+", inner):
            raise ValueError("Invalid IPvFuture literal")
    else:
        ipaddress.IPv6Address(inner)


class Uri:
    """A syntactically valid URI reference

    Construct these through :meth:`parse`; the string form of a Uri is
    always the exact text it was parsed from."""

    __slots__ = ('_text',)

    def __init__(self, text):
        self._text = text

    @classmethod
    def parse(cls, text):
        """Check that text is a URI reference and wrap it, or raise
        :class:`MalformedUriError`"""
        if not isinstance(text, str):
            raise MalformedUriError(text)
        if not text:
            # Empty references are grammatically fine, but useless as a link
            # target and rejected like most HTTP stacks do
            raise MalformedUriError(text)

        match = _uri_reference.fullmatch(text)
        if match is None:
            raise MalformedUriError(text)
        literal = _authority_ip_literal.match(text)
        if literal is not None:
            try:
                _check_ip_literal(literal.group(1))
            except ValueError as e:
                raise MalformedUriError(text) from e
        return cls(text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return "<%s %r>" % (type(self).__name__, self._text)

    def __eq__(self, other):
        if not isinstance(other, Uri):
            return NotImplemented
        return self._text == other._text

    def __hash__(self):
        return hash(self._text)

    def _split(self):
        return urllib.parse.urlsplit(self._text)

    @property
    def scheme(self):
        """The scheme in lower case, or the empty string for relative
        references"""
        return self._split().scheme

    @property
    def netloc(self):
        return self._split().netloc

    @property
    def path(self):
        return self._split().path

    @property
    def query(self):
        return self._split().query

    @property
    def fragment(self):
        return self._split().fragment

    @property
    def is_absolute(self):
        """True if the reference starts with a scheme"""
        return bool(self.scheme)

    def resolve(self, base):
        """Resolve this reference against a base URI (given as Uri or str)
        and return the result as a new Uri

        >>> str(Uri.parse("../other").resolve("http://example.com/a/b/c"))
        'http://example.com/a/other'
        """
        return type(self).parse(urllib.parse.urljoin(str(base), self._text))
