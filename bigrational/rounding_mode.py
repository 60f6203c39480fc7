# SPDX-FileCopyrightText: 2025 ORDeC contributors
# SPDX-License-Identifier: Apache-2.0

import numbers
import operator
from enum import Enum
from public import public
from .errors import RationalInvalidArgument

@public
class RationalRounding(Enum):
    """
    Tie-breaking policy used when a value is rounded to a multiple of a tick.

    All modes round to the nearest multiple of the tick. They differ only for
    values exactly half way between two multiples.
    """

    TO_EVEN = 0 #: tie goes to the even multiple of the tick
    UP = 1 #: tie goes towards positive infinity
    DOWN = 2 #: tie goes towards negative infinity
    AWAY_FROM_ZERO = 3 #: tie goes away from zero
    TOWARD_ZERO = 4 #: tie goes towards zero

    def __repr__(self):
        return f"RationalRounding.{self.name}"

_members_by_value = {member.value: member for member in RationalRounding}

@public
def coerce_rounding(mode) -> RationalRounding:
    """
    Returns the :class:`RationalRounding` member for mode, which can be a
    member, a member name (case insensitive) or a member value.
    """
    if isinstance(mode, RationalRounding):
        return mode
    if isinstance(mode, str):
        member = RationalRounding.__members__.get(mode.strip().upper())
    elif isinstance(mode, numbers.Integral) and not isinstance(mode, bool):
        member = _members_by_value.get(operator.index(mode))
    else:
        member = None
    if member is None:
        raise RationalInvalidArgument(f"Invalid RationalRounding: {mode!r}.")
    return member
