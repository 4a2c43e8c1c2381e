from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal


# Note: No 'as_float' function is provided.
# Use the Python builtin `float()` directly for efficient conversion
