import numpy as np

from skdamping.errors import ArithmeticDegeneracy
from skdamping.errors import DimensionError


def position3p(vec, name='position'):
    """Checks that the position vector is valid and returns it.

    Parameters
    ----------
    vec : `np.ndarray` or `list`
        vector of 3, 3x1 or 1x3
    name : str
        name used in the error message

    Returns
    -------
    vec : numpy.ndarray
        flattened float 3-vector

    Raises
    ------
    DimensionError
        If the shape is wrong.
    ArithmeticDegeneracy
        If an element is nan or inf.
    """
    try:
        t = np.asarray(vec, dtype=np.float64)
    except (TypeError, ValueError):
        raise DimensionError(
            '{} must be specified as a numeric 3-vector'.format(name))
    t = t.squeeze()
    if t.ndim != 1 or t.shape[0] != 3:
        raise DimensionError(
            '{} must be specified as a 3-vector, 3x1 ndarray, '
            'or 1x3 ndarray, got shape {}'.format(name, np.shape(vec)))
    if not np.all(np.isfinite(t)):
        raise ArithmeticDegeneracy(
            '{} must be finite, got {}'.format(name, t))
    return t


def jacobianp(mat, name='jacobian'):
    """Checks that the relative velocity jacobian is valid and returns it.

    The first three rows are the positional part, so at least three
    rows are required.

    Parameters
    ----------
    mat : `np.ndarray` or `list`
        matrix of shape (m, n) with m >= 3
    name : str
        name used in the error message

    Returns
    -------
    mat : numpy.ndarray
        float matrix

    Raises
    ------
    DimensionError
        If the shape is wrong.
    ArithmeticDegeneracy
        If an element is nan or inf.
    """
    try:
        m = np.asarray(mat, dtype=np.float64)
    except (TypeError, ValueError):
        raise DimensionError(
            '{} must be specified as a numeric matrix'.format(name))
    if m.ndim != 2:
        raise DimensionError(
            '{} must be a 2 dimensional matrix, got shape {}'.format(
                name, m.shape))
    if m.shape[0] < 3:
        raise DimensionError(
            '{} must have at least 3 rows, got shape {}'.format(
                name, m.shape))
    if not np.all(np.isfinite(m)):
        raise ArithmeticDegeneracy(
            '{} must be finite'.format(name))
    return m
