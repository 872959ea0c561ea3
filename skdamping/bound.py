from enum import Enum
from typing import NamedTuple

import numpy as np


class BoundKind(Enum):
    """Side of a one-sided inequality bound."""

    UPPER = 'upper'
    LOWER = 'lower'


class MultiBound(NamedTuple):
    """Inequality bound on one task row.

    An ``UPPER`` bound means the task value must not exceed `value` and
    is unconstrained below. A ``LOWER`` bound is the mirror image.
    """

    value: float
    kind: BoundKind = BoundKind.UPPER

    @property
    def lower(self):
        if self.kind is BoundKind.LOWER:
            return self.value
        return -np.inf

    @property
    def upper(self):
        if self.kind is BoundKind.UPPER:
            return self.value
        return np.inf


def bounds_to_arrays(bounds):
    """Convert bounds into lower and upper limit arrays.

    Parameters
    ----------
    bounds : list[MultiBound]
        task bounds.

    Returns
    -------
    lower : numpy.ndarray
        lower limits, -inf where unconstrained.
    upper : numpy.ndarray
        upper limits, inf where unconstrained.

    Examples
    --------
    >>> from skdamping.bound import MultiBound, bounds_to_arrays
    >>> bounds_to_arrays([MultiBound(-0.5)])
    (array([-inf]), array([-0.5]))
    """
    lower = np.array([b.lower for b in bounds], dtype=np.float64)
    upper = np.array([b.upper for b in bounds], dtype=np.float64)
    return lower, upper
