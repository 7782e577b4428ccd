#!/usr/bin/env python3

# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

from setuptools import setup, find_packages

name = "httplink"
version = "0.1.0"
description = "Strict parser and formatter for the HTTP Link header"
long_description = """
httplink parses values of the HTTP Link header (RFC8288) into Link and
LinkItem objects and formats them back; see the package documentation for
the accepted dialect.
"""

extras_require = {
    "prettyprint": ["pygments"],
    "colorlog": ["colorlog"],
    "test": ["pytest"],
}

all_extra = set()
for k, v in extras_require.items():
    if k != "test":
        all_extra.update(v)
extras_require["all"] = sorted(all_extra)

setup(
    name=name,
    version=version,
    description=description,
    long_description=long_description,
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(include=["httplink", "httplink.*"]),
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "httplink = httplink.cli.linktool:sync_main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
