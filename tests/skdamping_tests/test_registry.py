import unittest

import numpy as np
from numpy import testing

from skdamping.errors import ArithmeticDegeneracy
from skdamping.errors import ConfigurationError
from skdamping.errors import DimensionError
from skdamping.registry import CollisionPairRegistry
from skdamping.registry import split_names
from skdamping.signal import InputSignal


class TestSplitNames(unittest.TestCase):

    def test_split_names(self):
        self.assertEqual(split_names('a:b:c'), ['a', 'b', 'c'])
        self.assertEqual(split_names('a,b,c', ','), ['a', 'b', 'c'])
        self.assertEqual(split_names(' a : b::c: '), ['a', 'b', 'c'])
        self.assertEqual(split_names(''), [])
        self.assertEqual(split_names('single'), ['single'])

    def test_invalid_separator(self):
        with self.assertRaises(ConfigurationError):
            split_names('a:b', '')
        with self.assertRaises(ConfigurationError):
            split_names('a::b', '::')


class TestCollisionPairRegistry(unittest.TestCase):

    def test_register_pairs(self):
        registry = CollisionPairRegistry()
        self.assertEqual(registry.size(), 0)
        self.assertEqual(len(registry), 0)

        pairs = registry.register_pairs('a:b:c')
        self.assertEqual(registry.size(), 3)
        self.assertEqual(registry.names(), ['a', 'b', 'c'])
        self.assertEqual([p.name for p in pairs], ['a', 'b', 'c'])
        self.assertEqual([p.name for p in registry], ['a', 'b', 'c'])
        for i, name in enumerate(['a', 'b', 'c']):
            self.assertEqual(registry.pair_at(i).name, name)

    def test_register_pairs_with_separator(self):
        registry_colon = CollisionPairRegistry()
        registry_colon.register_pairs('a:b:c')
        registry_semicolon = CollisionPairRegistry()
        registry_semicolon.register_pairs('a;b;c', separator=';')
        self.assertEqual(registry_colon.names(), registry_semicolon.names())
        self.assertEqual(registry_colon.signal_names(),
                         registry_semicolon.signal_names())

    def test_register_pairs_from_list(self):
        registry = CollisionPairRegistry()
        registry.register_pairs(['hand_head', 'hand_torso'])
        self.assertEqual(registry.names(), ['hand_head', 'hand_torso'])

    def test_register_pairs_replaces(self):
        registry = CollisionPairRegistry()
        registry.register_pairs('a:b:c')
        registry.register_pairs('d')
        self.assertEqual(registry.names(), ['d'])
        with self.assertRaises(KeyError):
            registry.signal('p1_a')

    def test_register_invalid_names(self):
        registry = CollisionPairRegistry()
        registry.register_pairs('a:b')
        for names in ['', ':', ' : : ', []]:
            with self.assertRaises(ConfigurationError):
                registry.register_pairs(names)
        with self.assertRaises(ConfigurationError):
            registry.register_pairs('a:b:a')
        with self.assertRaises(ConfigurationError):
            registry.register_pairs('a:b', separator='')
        for names in [None, 5, [1, 2], ['a', None]]:
            with self.assertRaises(ConfigurationError):
                registry.register_pairs(names)
        # failed registration keeps the previous pairs
        self.assertEqual(registry.names(), ['a', 'b'])

    def test_signal_names(self):
        registry = CollisionPairRegistry()
        registry.register_pairs('hand_head:hand_torso')
        self.assertEqual(
            registry.signal_names(),
            ['p1_hand_head', 'p2_hand_head', 'jVel_hand_head',
             'p1_hand_torso', 'p2_hand_torso', 'jVel_hand_torso'])
        for name in registry.signal_names():
            self.assertIsInstance(registry.signal(name), InputSignal)
            self.assertEqual(registry.signal(name).name, name)
        with self.assertRaises(KeyError):
            registry.signal('p3_hand_head')

        pair = registry.pair_at(1)
        self.assertIs(registry.signal('p1_hand_torso'),
                      pair.moving_position)
        self.assertIs(registry.signal('p2_hand_torso'),
                      pair.static_position)
        self.assertIs(registry.signal('jVel_hand_torso'),
                      pair.relative_velocity_jacobian)

    def test_pair_at_out_of_range(self):
        registry = CollisionPairRegistry()
        with self.assertRaises(IndexError):
            registry.pair_at(0)
        registry.register_pairs('a:b')
        with self.assertRaises(IndexError):
            registry.pair_at(2)
        with self.assertRaises(IndexError):
            registry.pair_at(-1)

    def test_clear(self):
        registry = CollisionPairRegistry()
        registry.register_pairs('a:b')
        registry.clear()
        self.assertEqual(registry.size(), 0)
        self.assertEqual(registry.signal_names(), [])


class TestCollisionPair(unittest.TestCase):

    def setUp(self):
        registry = CollisionPairRegistry()
        registry.register_pairs('pair')
        self.registry = registry
        self.pair = registry.pair_at(0)

    def test_positions(self):
        self.registry.plug('p1_pair', [0.0, 0.0, 0.0])
        self.registry.plug('p2_pair', np.array([[0.0], [0.0], [0.3]]))
        p1, p2 = self.pair.positions(0)
        testing.assert_equal(p1, np.zeros(3))
        testing.assert_equal(p2, [0.0, 0.0, 0.3])
        self.assertEqual(p2.shape, (3,))

    def test_invalid_positions(self):
        self.registry.plug('p1_pair', np.zeros(4))
        self.registry.plug('p2_pair', np.zeros(3))
        with self.assertRaises(DimensionError):
            self.pair.positions(0)
        self.registry.plug('p1_pair', np.zeros((3, 3)))
        with self.assertRaises(DimensionError):
            self.pair.positions(0)
        self.registry.plug('p1_pair', ['x', 'y', 'z'])
        with self.assertRaises(DimensionError):
            self.pair.positions(0)

    def test_jacobian(self):
        self.registry.plug('jVel_pair', np.ones((6, 7)))
        self.assertEqual(self.pair.jacobian(0).shape, (6, 7))
        self.registry.plug('jVel_pair', np.ones((3, 2)))
        self.assertEqual(self.pair.jacobian(0).shape, (3, 2))

    def test_invalid_jacobian(self):
        self.registry.plug('jVel_pair', np.ones((2, 7)))
        with self.assertRaises(DimensionError):
            self.pair.jacobian(0)
        self.registry.plug('jVel_pair', np.ones(7))
        with self.assertRaises(DimensionError):
            self.pair.jacobian(0)

    def test_non_finite_values(self):
        self.registry.plug('p1_pair', np.array([np.nan, 0.0, 0.0]))
        self.registry.plug('p2_pair', np.zeros(3))
        with self.assertRaises(ArithmeticDegeneracy):
            self.pair.positions(0)
        jacobian = np.ones((6, 7))
        jacobian[5, 0] = -np.inf
        self.registry.plug('jVel_pair', jacobian)
        with self.assertRaises(ArithmeticDegeneracy):
            self.pair.jacobian(0)
