"""Scalar configuration of the velocity damping law."""

from dataclasses import dataclass

import numpy as np

from skdamping.errors import ArithmeticDegeneracy
from skdamping.errors import ConfigurationError
from skdamping.signal import InputSignal


@dataclass
class DampingConfig:
    """Configuration of one control cycle.

    Parameters
    ----------
    influence_distance : float
        distance at which damping begins (di).
    safety_distance : float
        distance considered unsafe (ds). Must be smaller than
        `influence_distance`.
    gain : float
        non-negative scaling of the bound (epsilon). 0 is accepted and
        makes every bound 0, which disables the damping.
    dt : float
        control period. It is carried along but not used by the bound.
    """
    influence_distance: float
    safety_distance: float
    gain: float = 1.0
    dt: float = 0.0

    def validate(self):
        values = {'influence_distance': self.influence_distance,
                  'safety_distance': self.safety_distance,
                  'gain': self.gain,
                  'dt': self.dt}
        for key, value in values.items():
            if not np.isfinite(value):
                raise ConfigurationError(
                    '{} must be finite, got {}'.format(key, value))
        if self.influence_distance == self.safety_distance:
            raise ArithmeticDegeneracy(
                'influence distance and safety distance must differ, '
                'both are {}'.format(self.influence_distance))
        if self.influence_distance < self.safety_distance:
            raise ConfigurationError(
                'influence distance {} must be larger than safety '
                'distance {}'.format(
                    self.influence_distance, self.safety_distance))
        if self.gain < 0:
            raise ConfigurationError(
                'gain must be non-negative, got {}'.format(self.gain))
        return self


class DampingConfigSignals(object):
    """Time varying scalar inputs ``dt``, ``controlGain``, ``di`` and ``ds``.

    ``controlGain`` reads 1.0 until something is plugged into it.
    """

    def __init__(self, gain=1.0):
        self.dt = InputSignal('dt', default=0.0)
        self.control_gain = InputSignal('controlGain', default=gain)
        self.di = InputSignal('di')
        self.ds = InputSignal('ds')

    @property
    def signals(self):
        return [self.dt, self.control_gain, self.di, self.ds]

    def resolve(self, cycle):
        """Return configuration valid at cycle.

        Returns
        -------
        config : DampingConfig
            not yet validated configuration.
        """
        return DampingConfig(
            influence_distance=float(self.di(cycle)),
            safety_distance=float(self.ds(cycle)),
            gain=float(self.control_gain(cycle)),
            dt=float(self.dt(cycle)))
