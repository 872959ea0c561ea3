"""Velocity damping task for collision avoidance.

For every registered collision pair the distance ``d`` between the moving
point p1 and the static point p2 is turned into an upper bound on the
approach velocity along the separating direction,

.. math::
    \\dot{d} \\leq -\\epsilon \\frac{d - d_s}{d_i - d_s}

where :math:`d_i` is the influence distance and :math:`d_s` the safety
distance. The corresponding task jacobian row is the positional part of the
relative velocity jacobian projected onto the unit separating vector.

The method follows "A Local Collision Avoidance Method for Non-strictly
Convex Polyhedra" (Kanehiro et al., RSS 2008).

Example
-------
>>> import numpy as np
>>> from skdamping.config import DampingConfig
>>> from skdamping.task import DampingTaskEngine
>>> engine = DampingTaskEngine('avoid')
>>> engine.set_avoiding_objects('hand_head')
>>> engine.registry.plug('p1_hand_head', np.zeros(3))
>>> engine.registry.plug('p2_hand_head', np.array([0.0, 0.0, 0.3]))
>>> config = DampingConfig(influence_distance=0.5, safety_distance=0.1)
>>> round(engine.compute_task(0, config)[0].value, 6)
-0.5
"""

from logging import getLogger

import numpy as np

from skdamping.bound import BoundKind
from skdamping.bound import MultiBound
from skdamping.config import DampingConfigSignals
from skdamping.errors import DimensionError
from skdamping.math import damping_fraction
from skdamping.math import distance
from skdamping.math import project_jacobian
from skdamping.math import unit_vector
from skdamping.registry import CollisionPairRegistry


logger = getLogger(__name__)


class DampingTaskEngine(object):
    """Compute velocity damping bounds and their jacobian.

    Both computations are pure functions of the cycle, the scalar
    configuration and the registered pairs. The engine keeps nothing
    between calls. Calls to :meth:`set_avoiding_objects` must not run
    concurrently with :meth:`compute_task` or :meth:`compute_jacobian`;
    serializing them is up to the caller.

    Parameters
    ----------
    name : str
        name of the task.
    registry : skdamping.registry.CollisionPairRegistry, optional
        registry of collision pairs. A new empty one is created if not
        given.
    gain : float
        value of ``controlGain`` while nothing is plugged into it.
    """

    def __init__(self, name='velocity_damping', registry=None, gain=1.0):
        self.name = name
        if registry is None:
            registry = CollisionPairRegistry()
        self.registry = registry
        self.config_signals = DampingConfigSignals(gain=gain)

    def set_avoiding_objects(self, avoiding_objects, separator=':'):
        """Register collision pairs from names separated by `separator`.

        Parameters
        ----------
        avoiding_objects : str
            e.g. ``'hand_head:hand_torso'``.
        separator : str
            single character.
        """
        self.registry.register_pairs(avoiding_objects, separator=separator)

    def signal(self, name):
        """Return scalar or per-pair input slot by name."""
        for signal in self.config_signals.signals:
            if signal.name == name:
                return signal
        return self.registry.signal(name)

    def plug(self, name, source):
        self.signal(name).plug(source)

    def _resolve_config(self, cycle, config):
        if config is None:
            config = self.config_signals.resolve(cycle)
        return config.validate()

    def compute_task(self, cycle, config=None):
        """Compute upper bounds of all collision pairs.

        Parameters
        ----------
        cycle : int
            control cycle index.
        config : skdamping.config.DampingConfig, optional
            scalar configuration. If not given it is read from the
            ``dt``, ``controlGain``, ``di`` and ``ds`` inputs at `cycle`.

        Returns
        -------
        bounds : list[skdamping.bound.MultiBound]
            one upper bound per pair in registration order.

        Notes
        -----
        Coincident points give the finite bound
        ``gain * ds / (di - ds)``, while :meth:`compute_jacobian` raises
        ArithmeticDegeneracy for the same cycle.
        """
        if len(self.registry) == 0:
            return []
        config = self._resolve_config(cycle, config)
        bounds = []
        for pair in self.registry:
            p1, p2 = pair.positions(cycle)
            d = distance(p1, p2)
            fraction = damping_fraction(
                d, config.influence_distance, config.safety_distance,
                gain=config.gain)
            logger.debug('%s cycle %s: pair %s distance %f bound %f',
                         self.name, cycle, pair.name, d, fraction)
            bounds.append(MultiBound(fraction, BoundKind.UPPER))
        return bounds

    def compute_jacobian(self, cycle):
        """Compute task jacobian of all collision pairs.

        Parameters
        ----------
        cycle : int
            control cycle index.

        Returns
        -------
        jacobian : numpy.ndarray
            matrix of shape (number of pairs, number of columns of the
            first pair's relative velocity jacobian).
        """
        if len(self.registry) == 0:
            raise DimensionError(
                'cannot determine jacobian size of task {}, no collision '
                'pairs are registered'.format(self.name))
        col_count = self.registry.pair_at(0).jacobian(cycle).shape[1]
        J = np.zeros((len(self.registry), col_count), dtype=np.float64)
        for i, pair in enumerate(self.registry):
            p1, p2 = pair.positions(cycle)
            jacobian = pair.jacobian(cycle)
            if jacobian.shape[1] != col_count:
                raise DimensionError(
                    'jacobian of pair {} has {} columns but {} are '
                    'expected'.format(pair.name, jacobian.shape[1],
                                      col_count))
            n = unit_vector(p1, p2)
            J[i] = project_jacobian(n, jacobian)
        return J

    def compute(self, cycle, config=None):
        """Return bounds and jacobian of cycle.

        Returns
        -------
        bounds : list[skdamping.bound.MultiBound]
        jacobian : numpy.ndarray
        """
        return (self.compute_task(cycle, config),
                self.compute_jacobian(cycle))

    def __repr__(self):
        return '<DampingTaskEngine {}: {}>'.format(
            self.name, self.registry.names())
