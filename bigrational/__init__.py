# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

from .version import __version__
from .errors import *
from .rounding_mode import *
from .rational import *
from .rounding import *
from .floating import *
from .decimals import *
from . import series
