# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""
The httplink package parses and formats values of the HTTP ``Link`` header
(`RFC8288`_) in a deliberately strict dialect: ``<uri>; name=value`` items,
separated by commas without surrounding whitespace.

.. _`RFC8288`: https://www.rfc-editor.org/rfc/rfc8288

Module contents
---------------

This root module re-exports the most commonly used classes in httplink:
:class:`.Link` and :class:`.LinkItem`, the :class:`.Uri` type they carry, the
errors raised while parsing, and the :class:`.Header` interface with the
:data:`.LINK` field name.
"""

from .error import Error, InvalidLink, InvalidHeader, MalformedUriError
from .header import Header, LINK
from .link import Link, LinkItem
from .uri import Uri

__all__ = ['Link', 'LinkItem', 'Uri', 'Header', 'LINK', 'Error', 'InvalidLink',
        'InvalidHeader', 'MalformedUriError']
