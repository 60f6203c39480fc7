# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

"""Version of the installed bigrational distribution."""

from importlib import metadata

try:
    __version__ = metadata.version("bigrational")
except metadata.PackageNotFoundError:
    # source tree that was never installed
    __version__ = 'unknown'
