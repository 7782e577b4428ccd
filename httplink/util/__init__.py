# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

"""Tools not directly related with the Link header that are needed by the
command line tool

None of this is part of the stable API.
"""
