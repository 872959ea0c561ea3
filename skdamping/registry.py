"""Registry of collision pairs monitored by the velocity damping task.

Example
-------
>>> from skdamping.registry import CollisionPairRegistry
>>> registry = CollisionPairRegistry()
>>> pairs = registry.register_pairs('hand_head:hand_torso')
>>> registry.names()
['hand_head', 'hand_torso']
>>> registry.signal_names()[:3]
['p1_hand_head', 'p2_hand_head', 'jVel_hand_head']
"""

from logging import getLogger

from skdamping.errors import ConfigurationError
from skdamping.signal import InputSignal
from skdamping.utils.type_check import jacobianp
from skdamping.utils.type_check import position3p


logger = getLogger(__name__)


def split_names(text, separator=':'):
    """Split delimited names.

    Parameters
    ----------
    text : str
        names separated by `separator`.
    separator : str
        single character.

    Returns
    -------
    names : list[str]
        whitespace stripped non-empty names in order of appearance.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ConfigurationError(
            'separator must be a single character, got {!r}'.format(
                separator))
    return [token.strip() for token in text.split(separator)
            if token.strip()]


class CollisionPair(object):
    """One monitored pair of a moving point and a static point.

    Parameters
    ----------
    name : str
        name of the pair.

    Attributes
    ----------
    moving_position : skdamping.signal.InputSignal
        slot ``p1_<name>``, position of the moving point.
    static_position : skdamping.signal.InputSignal
        slot ``p2_<name>``, position of the static point.
    relative_velocity_jacobian : skdamping.signal.InputSignal
        slot ``jVel_<name>``, jacobian mapping joint velocities to the
        relative linear velocity of the two points.
    """

    def __init__(self, name):
        self.name = name
        self.moving_position = InputSignal('p1_' + name)
        self.static_position = InputSignal('p2_' + name)
        self.relative_velocity_jacobian = InputSignal('jVel_' + name)

    @property
    def signals(self):
        return [self.moving_position,
                self.static_position,
                self.relative_velocity_jacobian]

    def positions(self, cycle):
        """Return moving and static positions at cycle.

        Returns
        -------
        p1, p2 : numpy.ndarray
            3-vectors.
        """
        p1 = position3p(self.moving_position(cycle),
                        name=self.moving_position.name)
        p2 = position3p(self.static_position(cycle),
                        name=self.static_position.name)
        return p1, p2

    def jacobian(self, cycle):
        """Return relative velocity jacobian at cycle."""
        return jacobianp(self.relative_velocity_jacobian(cycle),
                         name=self.relative_velocity_jacobian.name)

    def __repr__(self):
        return '<CollisionPair {}>'.format(self.name)


class CollisionPairRegistry(object):
    """Ordered collection of collision pairs.

    The order in which pairs are registered is the order of the rows of
    the task and its jacobian.
    """

    def __init__(self):
        self._pairs = []
        self._signal_table = {}

    def register_pairs(self, names, separator=':'):
        """Register collision pairs, replacing the current ones.

        Three input slots are created for each pair, ``p1_<name>``,
        ``p2_<name>`` and ``jVel_<name>``.

        Parameters
        ----------
        names : str or list[str]
            names separated by `separator`, or a list of names.
        separator : str
            single character separating the names.

        Returns
        -------
        pairs : list[CollisionPair]
            registered pairs.
        """
        if isinstance(names, str):
            logger.info('received avoiding objects: %s', names)
            names = split_names(names, separator)
        else:
            if names is None:
                raise ConfigurationError(
                    'no collision pair names are given')
            try:
                names = list(names)
            except TypeError:
                raise ConfigurationError(
                    'collision pair names must be a str or a list of str, '
                    'got {!r}'.format(names))
            for name in names:
                if not isinstance(name, str):
                    raise ConfigurationError(
                        'collision pair names must be str, got {!r}'.format(
                            name))
            names = [name.strip() for name in names if name.strip()]
        if len(names) == 0:
            raise ConfigurationError(
                'no collision pair names are given')
        duplicated = sorted(set(
            name for name in names if names.count(name) > 1))
        if duplicated:
            raise ConfigurationError(
                'collision pair names must be distinct, {} are duplicated'
                .format(duplicated))

        pairs = [CollisionPair(name) for name in names]
        self._pairs = pairs
        self._signal_table = {}
        for pair in pairs:
            for signal in pair.signals:
                self._signal_table[signal.name] = signal
        logger.info('registered %d collision pairs: %s',
                    len(pairs), ', '.join(names))
        return list(pairs)

    def clear(self):
        self._pairs = []
        self._signal_table = {}

    def size(self):
        return len(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(list(self._pairs))

    def pair_at(self, index):
        """Return pair at index.

        Raises
        ------
        IndexError
            If index is negative or not smaller than the number of pairs.
        """
        if not 0 <= index < len(self._pairs):
            raise IndexError(
                'collision pair index {} is out of range, {} pairs are '
                'registered'.format(index, len(self._pairs)))
        return self._pairs[index]

    def names(self):
        return [pair.name for pair in self._pairs]

    def signal_names(self):
        return [signal.name
                for pair in self._pairs
                for signal in pair.signals]

    def signal(self, name):
        """Return input slot by name.

        Raises
        ------
        KeyError
            If there is no such slot.
        """
        if name not in self._signal_table:
            raise KeyError(
                'no input signal named {}. Available signals: {}'.format(
                    name, self.signal_names()))
        return self._signal_table[name]

    def plug(self, name, source):
        self.signal(name).plug(source)

    def __repr__(self):
        return '<CollisionPairRegistry {}>'.format(self.names())
