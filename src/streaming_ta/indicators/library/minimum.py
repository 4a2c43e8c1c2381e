from __future__ import annotations

import math
import operator

from streaming_ta.indicators.library.extremum import ExtremumIndicator


class Minimum(ExtremumIndicator):
    """Returns the lowest value over the last $period samples.

    When updated with a bar-like object, its `low` is used. Default period is 14.

    Example:
        >>> minimum = Minimum(3)
        >>> [minimum.update(v) for v in (10.0, 11.0, 12.0, 13.0)]
        [10.0, 10.0, 10.0, 11.0]
    """

    _is_more_extreme = staticmethod(operator.lt)
    _sentinel = math.inf
    _bar_field = "low"
    _label = "MIN"
