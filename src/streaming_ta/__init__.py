__version__ = "0.1.0"

from streaming_ta.errors import DataItemIncompleteError, DataItemInvalidError, InvalidParameterError, TaError
from streaming_ta.indicators.library.maximum import Maximum
from streaming_ta.indicators.library.minimum import Minimum

__all__ = ["Maximum", "Minimum", "TaError", "InvalidParameterError", "DataItemIncompleteError", "DataItemInvalidError"]
