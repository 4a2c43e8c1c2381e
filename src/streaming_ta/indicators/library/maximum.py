from __future__ import annotations

import math
import operator

from streaming_ta.indicators.library.extremum import ExtremumIndicator


class Maximum(ExtremumIndicator):
    """Returns the highest value over the last $period samples.

    When updated with a bar-like object, its `high` is used. Default period is 14.

    Example:
        >>> maximum = Maximum(3)
        >>> [maximum.update(v) for v in (7.0, 5.0, 4.0, 4.0, 8.0)]
        [7.0, 7.0, 7.0, 5.0, 8.0]
    """

    _is_more_extreme = staticmethod(operator.gt)
    _sentinel = -math.inf
    _bar_field = "high"
    _label = "MAX"
