# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Parse and format Link header values

A Link header carries a comma-separated list of link items, each being a URI
reference in angle brackets followed by any number of ``name=value``
parameters:

>>> link = Link.parse('<http://example.com/a>; rel=next,</b>; rel=up; title=B')
>>> len(link)
2
>>> link[1].uri
<Uri '/b'>
>>> link[1].param('title')
'B'
>>> str(link)
'<http://example.com/a>; rel=next,</b>; rel=up; title=B'

The grammar accepted here is intentionally strict and simpler than RFC8288:
values are taken verbatim (no quoted strings, no percent decoding), and no
whitespace is allowed around the angle brackets:

>>> Link.parse('<http://example.com/a>, </b>')
Traceback (most recent call last):
    ...
httplink.error.InvalidLink: invalid link
"""

import logging
import types

from .error import InvalidLink, InvalidHeader, MalformedUriError
from .header import Header, LINK, first_value, value_to_str, value_from_str
from .uri import Uri

log = logging.getLogger("httplink.link")

__all__ = ['Link', 'LinkItem']


def _as_uri(uri):
    if isinstance(uri, Uri):
        return uri
    return Uri.parse(uri)


class LinkItem:
    """A single link: a target URI reference and its parameters

    Parameters are a mapping from name to value. Names are unique; when built
    from pairs or parsed from text, the last value given for a name wins:

    >>> item = LinkItem.parse('<http://x>; a=1; a=2')
    >>> item.param('a')
    '2'
    >>> item.param('b') is None
    True

    The uri can be given as :class:`.Uri` or as text, which is then checked
    and may raise :class:`.MalformedUriError`."""

    __slots__ = ('_uri', '_params')

    def __init__(self, uri):
        self._uri = _as_uri(uri)
        self._params = {}

    @classmethod
    def with_params(cls, uri, params):
        """Create a link item with parameters taken from an iterable of
        (name, value) pairs (or from a mapping)

        Names and values need to be str; anything else raises TypeError.

        >>> str(LinkItem.with_params("/sensors", [("rel", "item")]))
        '</sensors>; rel=item'
        """
        if hasattr(params, 'items'):
            params = params.items()
        collected = {}
        for pair in params:
            if isinstance(pair, (str, bytes)):
                raise TypeError("Link parameters need to be (name, value) pairs, not %r" % (pair,))
            (name, value) = pair
            if not isinstance(name, str) or not isinstance(value, str):
                raise TypeError("Link parameters need to be text, not %r=%r" % (name, value))
            collected[name] = value
        item = cls(uri)
        item._params = collected
        return item

    @property
    def uri(self):
        return self._uri

    @property
    def params(self):
        """Read-only view of all parameters"""
        return types.MappingProxyType(self._params)

    def param(self, name):
        """Value of the parameter called name, or None if it is absent"""
        return self._params.get(name)

    @classmethod
    def parse(cls, text):
        """Parse a single link item (without any surrounding commas), or raise
        :class:`.InvalidLink`"""
        link, semicolon, parameters = text.partition(';')

        if not (link.startswith('<') and link.endswith('>')):
            raise InvalidLink()
        try:
            uri = Uri.parse(link[1:-1])
        except MalformedUriError as e:
            raise InvalidLink() from e

        params = {}
        if semicolon:
            for param in parameters.split(';'):
                name, equals, value = param.strip().partition('=')
                if not equals:
                    raise InvalidLink()
                params[name] = value

        item = cls(uri)
        item._params = params
        return item

    from_str = parse

    def __str__(self):
        return "".join(
                ['<%s>' % self._uri] +
                ['; %s=%s' % (name, value) for (name, value) in self._params.items()]
                )

    def __repr__(self):
        return "<%s %r%s>" % (
                type(self).__name__,
                str(self._uri),
                "".join(" %s=%r" % p for p in self._params.items()),
                )

    def __eq__(self, other):
        if not isinstance(other, LinkItem):
            return NotImplemented
        return self._uri == other._uri and self._params == other._params

    __hash__ = None


class Link(Header):
    """A complete Link header value: an ordered, fixed sequence of
    :class:`LinkItem`

    It can be built from any iterable of link items:

    >>> str(Link([LinkItem("/a"), LinkItem("/b")]))
    '</a>,</b>'
    >>> str(Link(LinkItem(u) for u in ["/c"]))
    '</c>'
    >>> str(Link())
    ''
    """

    __slots__ = ('_items',)

    def __init__(self, items=()):
        items = tuple(items)
        for item in items:
            if not isinstance(item, LinkItem):
                raise TypeError("Link can only hold LinkItem objects, not %r" % (item,))
        self._items = items

    @property
    def items(self):
        """The link items as a tuple, in header order"""
        return self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other):
        if not isinstance(other, Link):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def __repr__(self):
        return "%s([%s])" % (type(self).__name__, ", ".join(repr(i) for i in self._items))

    @classmethod
    def parse(cls, text):
        """Parse a full header value, or raise :class:`.InvalidLink` if any
        of its items is malformed

        Splitting happens at every ',' without any trimming, so the empty
        string is read as a single empty item, and is therefore invalid:

        >>> Link.parse('')
        Traceback (most recent call last):
            ...
        httplink.error.InvalidLink: invalid link
        """
        items = []
        for (i, segment) in enumerate(text.split(',')):
            try:
                items.append(LinkItem.parse(segment))
            except InvalidLink:
                log.debug("Link item %d is malformed: %r", i, segment)
                raise
        return cls(items)

    from_str = parse

    def __str__(self):
        return ','.join(str(item) for item in self._items)

    def to_py(self):
        """Convert into a JSON-friendly list of [uri, {name: value}] pairs

        >>> Link.parse('</a>; rel=up').to_py()
        [['/a', {'rel': 'up'}]]
        """
        return [[str(item.uri), dict(item.params)] for item in self._items]

    @classmethod
    def from_py(cls, data):
        """Inverse of :meth:`to_py`; the parameters of each link can be given
        as mapping or as list of pairs"""
        return cls(LinkItem.with_params(uri, params) for (uri, params) in data)

    # Header interface

    @classmethod
    def name(cls):
        return LINK

    @classmethod
    def decode(cls, values):
        """Decode the first of the given raw values; any further values are
        not looked at

        >>> Link.decode([b'</a>,</b>']).to_py()
        [['/a', {}], ['/b', {}]]
        >>> Link.decode([])
        Traceback (most recent call last):
            ...
        httplink.error.InvalidHeader: invalid header value
        """
        text = value_to_str(first_value(values))
        try:
            return cls.parse(text)
        except InvalidLink as e:
            log.debug("Rejecting Link header value %r", text)
            raise InvalidHeader() from e

    def encode(self, values):
        """Add exactly one raw value to values

        >>> values = []
        >>> Link([LinkItem("/a")]).encode(values)
        >>> values
        [b'</a>']
        """
        text = str(self)
        try:
            value = value_from_str(text)
        except ValueError as e:
            # Parsed items can not produce this, and Uri objects can't either;
            # only parameters constructed with control or non-ASCII characters can.
            raise AssertionError("Link produced an unencodable header value") from e
        values.extend((value,))
