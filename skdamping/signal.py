"""Cycle indexed value providers.

A signal hands out a value valid for a given control cycle. The damping
task never decides when a cycle runs or where values come from; it only
calls ``fetch(cycle)`` on the handles it was given.

Example
-------
>>> from skdamping.signal import ConstantSignal, InputSignal
>>> ds = InputSignal('ds')
>>> ds.plug(0.1)
>>> ds(10)
0.1
"""

from skdamping.errors import SignalNotPluggedError


class Signal(object):
    """Base class of value providers.

    Parameters
    ----------
    name : str
        name of the signal.
    """

    def __init__(self, name):
        self.name = name

    def fetch(self, cycle):
        """Return value valid at cycle.

        Parameters
        ----------
        cycle : int
            control cycle index.
        """
        raise NotImplementedError

    def __call__(self, cycle):
        return self.fetch(cycle)

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, self.name)


class ConstantSignal(Signal):

    def __init__(self, name, value):
        super(ConstantSignal, self).__init__(name)
        self.value = value

    def fetch(self, cycle):
        return self.value


class FunctionSignal(Signal):
    """Signal computed by a function of the cycle.

    The value is recomputed only when a different cycle is requested,
    so repeated reads within one cycle return the same object.

    Parameters
    ----------
    name : str
        name of the signal.
    function : callable
        called as ``function(cycle)``.
    """

    def __init__(self, name, function):
        super(FunctionSignal, self).__init__(name)
        if not callable(function):
            raise TypeError(
                'function of signal {} must be callable, got {}'.format(
                    name, type(function)))
        self.function = function
        self._cycle = None
        self._value = None

    def fetch(self, cycle):
        if self._cycle is None or self._cycle != cycle:
            self._value = self.function(cycle)
            self._cycle = cycle
        return self._value

    def invalidate(self):
        self._cycle = None
        self._value = None


class InputSignal(Signal):
    """Named input slot that other signals are plugged into.

    Parameters
    ----------
    name : str
        name of the slot, e.g. ``p1_hand``.
    default : object, optional
        value returned while nothing is plugged.
    """

    def __init__(self, name, default=None):
        super(InputSignal, self).__init__(name)
        self.default = default
        self._source = None

    @property
    def is_plugged(self):
        return self._source is not None

    @property
    def source(self):
        return self._source

    def plug(self, source):
        """Plug a provider into this slot.

        Parameters
        ----------
        source : skdamping.signal.Signal or object
            signal to read from. Any other object is wrapped in a
            ConstantSignal.
        """
        if source is self:
            raise ValueError(
                'signal {} cannot be plugged into itself'.format(self.name))
        if not isinstance(source, Signal):
            source = ConstantSignal(self.name, source)
        self._source = source

    def unplug(self):
        self._source = None

    def fetch(self, cycle):
        if self._source is not None:
            return self._source.fetch(cycle)
        if self.default is not None:
            return self.default
        raise SignalNotPluggedError(
            'input signal {} is not plugged'.format(self.name))
