# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

#: Make library version internally
#:
#: This is not supposed to be used in any decision-making process (use package
#: dependencies for that) or workarounds, but used by the command-line tool to
#: provide debugging information.
version = "0.1.0"
