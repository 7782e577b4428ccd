# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Interface between typed header values and raw header field values

A typed header (like :class:`httplink.Link`) is associated with a fixed
field name and can be decoded from, and encoded into, the raw values a header
collection holds for that name. Raw values are represented as bytes (str is
accepted on input for convenience); this module does not know about any
particular HTTP framework's header collection, which only needs to provide
an iterator over its values for a name when decoding, and an ``extend``
method when encoding (a plain list does).
"""

import abc
import logging

from .error import InvalidHeader

log = logging.getLogger("httplink.header")

#: Canonical (lower-case) field name of the Link header, RFC8288 Section 3
LINK = "link"


def _is_visible(octet):
    return 32 <= octet < 127 or octet == 9


def value_to_str(value):
    """Return a raw header value as text if it only contains visible ASCII
    characters (including space and tab), or raise :class:`InvalidHeader`

    >>> value_to_str(b'</>; rel=index')
    '</>; rel=index'
    >>> value_to_str('blåbær')
    Traceback (most recent call last):
        ...
    httplink.error.InvalidHeader: invalid header value
    """
    if isinstance(value, str):
        try:
            value = value.encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidHeader() from e
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidHeader()
    value = bytes(value)
    if not all(_is_visible(o) for o in value):
        raise InvalidHeader()
    return value.decode('ascii')


def value_from_str(text):
    """Build a raw header value from text

    The same character set as in :func:`value_to_str` is accepted, so any
    value built here can be read back; control characters and anything
    beyond ASCII raise ValueError.

    >>> value_from_str("</a>; title=bl\u00e5")
    Traceback (most recent call last):
        ...
    ValueError: Only visible ASCII characters can be expressed in a header value: '</a>; title=bl\u00e5'
    """
    value = text.encode('utf-8')
    if not all(_is_visible(o) for o in value):
        raise ValueError("Only visible ASCII characters can be expressed in a header value: %r" % text)
    return value


class Header(metaclass=abc.ABCMeta):
    """Interface for typed header values

    Implementations provide their field name through :meth:`name`, construct
    themselves from raw values through :meth:`decode`, and emit raw values
    through :meth:`encode`."""

    @classmethod
    @abc.abstractmethod
    def name(cls):
        """Return the lower-case field name this type is used with"""

    @classmethod
    @abc.abstractmethod
    def decode(cls, values):
        """Build an instance from an iterator (or iterable) of raw values for
        this header's name, or raise :class:`InvalidHeader`"""

    @abc.abstractmethod
    def encode(self, values):
        """Add the raw values representing self to the values collection
        using its ``extend`` method"""

    @classmethod
    def decode_from(cls, headers):
        """Decode from a sequence of (name, value) pairs, as found in ASGI
        scopes or ``http.client`` responses, considering only fields whose
        name matches :meth:`name` case-insensitively"""
        own_name = cls.name()

        def matching():
            for field_name, value in headers:
                if isinstance(field_name, (bytes, bytearray)):
                    field_name = bytes(field_name).decode('latin-1')
                if field_name.lower() == own_name:
                    yield value

        return cls.decode(matching())

    def encode_into(self, headers):
        """Append (name, value) pairs for self to a list of header fields"""
        values = []
        self.encode(values)
        own_name = self.name().encode('ascii')
        headers.extend((own_name, v) for v in values)


def first_value(values):
    """Take the first value out of an iterator or iterable of raw values, or
    raise :class:`InvalidHeader` if there is none. Further values are left
    alone."""
    try:
        return next(iter(values))
    except StopIteration:
        log.debug("No header value present")
        raise InvalidHeader() from None
