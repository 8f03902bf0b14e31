import logging
import math
from typing import Iterable

import numpy as np

logger = logging.getLogger(__name__)


class MathTools:
    """Provides essential numeric guards shared by the analytics components."""

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def finite_or_zero(value: float) -> float:
        """Return ``value`` unless it is NaN or infinite, in which case 0.0."""
        value = float(value)
        if math.isfinite(value):
            return value
        logger.debug("replacing non-finite value %r with 0.0", value)
        return 0.0

    @classmethod
    def unit_score(cls, value: float) -> float:
        """Return ``value`` clamped to [0, 1]; NaN maps to 0 and +inf to 1."""
        return cls.finite_or_zero(cls.clamp(value, 0.0, 1.0))

    @staticmethod
    def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
        """Divide, returning ``default`` for a zero or non-finite outcome."""
        if denominator == 0:
            return default
        result = numerator / denominator
        return result if math.isfinite(result) else default

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        """Return the arithmetic mean of ``values`` or 0.0 for no values."""
        data = list(values)
        if not data:
            return 0.0
        result = float(np.mean(np.array(data, dtype=float)))
        return result if math.isfinite(result) else 0.0

    @staticmethod
    def anchored_score(value: float, anchor: float, span: float) -> float:
        """Score closeness of ``value`` to ``anchor`` as ``1 - |value - anchor| / span``."""
        if span == 0:
            return 0.0
        return MathTools.unit_score(1.0 - abs(value - anchor) / span)
