#!/usr/bin/env python

import argparse

import numpy as np

from skdamping.bound import bounds_to_arrays
from skdamping.signal import FunctionSignal
from skdamping.task import DampingTaskEngine


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description='Velocity damping bounds of a hand approaching '
                    'the head'
    )
    parser.add_argument(
        '--no-interactive',
        action='store_true',
        help="Run in non-interactive mode (do not wait for user input)"
    )
    parser.add_argument(
        '--cycles',
        type=int,
        default=20,
        help='Number of control cycles'
    )
    parser.add_argument('--di', type=float, default=0.5,
                        help='influence distance')
    parser.add_argument('--ds', type=float, default=0.1,
                        help='safety distance')
    args = parser.parse_args()

    dt = 0.05
    engine = DampingTaskEngine('avoid')
    engine.set_avoiding_objects('hand_head:hand_torso')
    engine.plug('dt', dt)
    engine.plug('di', args.di)
    engine.plug('ds', args.ds)

    # the hand moves along x towards the head
    def hand_position(cycle):
        return np.array([0.8 - 0.6 * cycle / args.cycles, 0.0, 0.0])

    hand = FunctionSignal('hand', hand_position)
    jacobian = np.hstack([np.eye(3), np.zeros((3, 3))])
    engine.plug('p1_hand_head', hand)
    engine.plug('p2_hand_head', np.array([0.0, 0.0, 0.0]))
    engine.plug('jVel_hand_head', jacobian)
    engine.plug('p1_hand_torso', hand)
    engine.plug('p2_hand_torso', np.array([0.0, 0.0, -0.6]))
    engine.plug('jVel_hand_torso', jacobian)

    print(engine)
    for cycle in range(args.cycles):
        bounds, J = engine.compute(cycle)
        _, upper = bounds_to_arrays(bounds)
        print('cycle {:3d} time {:.2f} upper bounds {}'.format(
            cycle, cycle * dt, np.round(upper, 3)))
    print('task jacobian of last cycle:\n{}'.format(np.round(J, 3)))

    if not args.no_interactive:
        input('Press enter to exit')


if __name__ == '__main__':
    main()
