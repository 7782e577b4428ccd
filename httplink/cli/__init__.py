# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Container module for command line utilities bundled with httplink.

These modules are not considered to be a part of the httplink API, and are
thus subject to change even when the project reaches a stable version number.
"""
