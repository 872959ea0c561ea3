import numpy as np

from skdamping.errors import ArithmeticDegeneracy


# allowed deviation of the unit separating vector norm from 1.
UNIT_NORM_TOLERANCE = 0.01


def directional_vector(p1, p2):
    """Return vector pointing from p2 to p1.

    Parameters
    ----------
    p1 : list or numpy.ndarray
        moving point
    p2 : list or numpy.ndarray
        static point

    Returns
    -------
    diff : numpy.ndarray
        p1 - p2

    Examples
    --------
    >>> from skdamping.math import directional_vector
    >>> directional_vector([1, 2, 3], [1, 0, 0])
    array([0., 2., 3.])
    """
    return np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)


def distance(p1, p2):
    """Return euclidean distance between two points.

    Examples
    --------
    >>> from skdamping.math import distance
    >>> distance([0, 0, 0], [3, 4, 0])
    5.0
    """
    return float(np.linalg.norm(directional_vector(p1, p2)))


def unit_vector(p1, p2, tol=UNIT_NORM_TOLERANCE):
    """Return unit separating vector from p2 to p1.

    Parameters
    ----------
    p1 : list or numpy.ndarray
        moving point
    p2 : list or numpy.ndarray
        static point
    tol : float
        allowed deviation of the resulting norm from 1.

    Returns
    -------
    n : numpy.ndarray
        (p1 - p2) / ||p1 - p2||

    Raises
    ------
    ArithmeticDegeneracy
        If the points coincide or the normalization is corrupted.
    """
    diff = directional_vector(p1, p2)
    d = float(np.linalg.norm(diff))
    if not np.isfinite(d) or d == 0.0:
        raise ArithmeticDegeneracy(
            'cannot normalize separation of length {}'.format(d))
    n = diff / d
    norm = np.linalg.norm(n)
    if not abs(norm - 1.0) < tol:
        raise ArithmeticDegeneracy(
            'normalized separation has norm {} (distance {})'.format(
                norm, d))
    return n


def damping_fraction(d, influence_distance, safety_distance, gain=1.0):
    """Return velocity damping bound for a separation distance.

    The bound is linear in the distance,

    .. math::
        -\\epsilon \\frac{d - d_s}{d_i - d_s}

    and is 0 at the safety distance and -gain at the influence distance.

    Parameters
    ----------
    d : float
        current distance
    influence_distance : float
        distance where damping begins
    safety_distance : float
        hard safety distance
    gain : float
        scaling of the bound

    Returns
    -------
    fraction : float
        upper bound of the task
    """
    denominator = influence_distance - safety_distance
    if denominator == 0:
        raise ArithmeticDegeneracy(
            'influence distance and safety distance are both {}'.format(
                influence_distance))
    return - gain * ((d - safety_distance) / denominator)


def project_jacobian(n, jacobian):
    """Project positional part of jacobian onto a direction.

    Parameters
    ----------
    n : numpy.ndarray
        3-vector
    jacobian : numpy.ndarray
        matrix of shape (m, c) with m >= 3. Only the first 3 rows
        (linear velocity) are used.

    Returns
    -------
    row : numpy.ndarray
        n^T J[:3, :], shape (c,)
    """
    jacobian = np.asarray(jacobian, dtype=np.float64)
    return np.dot(np.asarray(n, dtype=np.float64), jacobian[:3, :])
