"""Scalar math collaborators used by the vector types."""
from __future__ import annotations

import numpy as np


def sqrt(value):
    """Real square root returned in the same scalar kind as ``value``.

    Negative input follows numpy: NaN for floating kinds, with numpy's
    ``RuntimeWarning``.
    """
    kind = np.asarray(value).dtype.type
    return kind(np.sqrt(value))
