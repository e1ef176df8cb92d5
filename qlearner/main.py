"""
command line demo: train on a problem and print the policy
"""

# stdlib
import json
import logging
from argparse import ArgumentParser
from typing import List, Optional

# first party
from qlearner.algorithm import plot, q_learn
from qlearner.errors import InvalidParameterError, QLearningError
from qlearner.gridworld import Gridworld
from qlearner.policy import format_policy

_ = None
# state 4 has no legal action, so backups into it end at -inf
EXAMPLE_REWARDS = [
    [_, 0, 0, _, _],
    [0, _, _, 0, 100],
    [0, _, _, 0, _],
    [_, 10, 0, _, 100],
    [_, _, _, _, _],
]
EXAMPLE_PATHS = [[0, 1, 4], [2, 3, 4], [0, 2, 3, 1, 4]]

GRID = Gridworld(
    desc=[
        '___G',
        '_#_X',
        'S___',
    ],
    rewards=dict(G=10, X=-10),
    absorbing='GX',
)
GRID_PATHS = [
    GRID.path((2, 0), (1, 0), (0, 0), (0, 1), (0, 2), (0, 3)),
    GRID.path((2, 0), (2, 1), (2, 2), (2, 3), (1, 3)),
    GRID.path((2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 3)),
]

DEFAULT_GAMMA = .8
DEFAULT_ITERATIONS = 10


def load_problem(filename: str) -> dict:
    with open(filename) as f:
        problem = json.load(f)
    if not isinstance(problem, dict):
        raise InvalidParameterError(f'{filename}: expected a JSON object')
    missing = {'rewards', 'paths'} - set(problem)
    if missing:
        raise InvalidParameterError(
            f'{filename}: missing {", ".join(sorted(missing))}')
    return problem


def main(method: str,
         gamma: Optional[float] = None,
         iterations: Optional[int] = None,
         problem: Optional[str] = None,
         plot_values: bool = False,
         terminal: str = 'n'):
    if method == 'example':
        kwargs = dict(rewards=EXAMPLE_REWARDS, paths=EXAMPLE_PATHS)
    elif method == 'gridworld':
        kwargs = dict(rewards=GRID.R, paths=GRID_PATHS)
    elif method == 'file':
        if problem is None:
            raise InvalidParameterError('--problem is required for "file"')
        kwargs = load_problem(problem)
    else:
        raise InvalidParameterError(f'unknown method {method!r}')

    if gamma is None:
        gamma = kwargs.get('gamma', DEFAULT_GAMMA)
    if iterations is None:
        iterations = kwargs.get('iterations', DEFAULT_ITERATIONS)
    Q, policy = q_learn(
        kwargs['rewards'],
        kwargs['paths'],
        gamma=gamma,
        iterations=iterations)

    if method == 'gridworld':
        print(GRID.render_policy(policy))
    print(format_policy(policy, terminal=terminal))
    if plot_values:
        plot(Q, titles=['Q'], layout=dict(title=f'Q ({method})'))


def parse_args(argv: Optional[List[str]] = None):
    parser = ArgumentParser(description=__doc__)
    parser.add_argument(
        'method',
        choices=['example', 'gridworld', 'file'],
        help='"example" and "gridworld" run bundled problems, "file" reads '
        'a JSON object with "rewards" (null for illegal moves), "paths" and '
        'optionally "gamma" and "iterations".')
    parser.add_argument('--problem', help='JSON problem for "file"')
    parser.add_argument('--gamma', type=float)
    parser.add_argument('--iterations', type=int)
    parser.add_argument('--terminal', default='n',
                        help='symbol printed for final states')
    parser.add_argument('--plot-values', action='store_true')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    return parser, parser.parse_args(argv)


if __name__ == '__main__':
    PARSER, ARGS = parse_args()
    logging.basicConfig(
        level=ARGS.log_level,
        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    KWARGS = vars(ARGS)
    del KWARGS['log_level']
    try:
        main(**KWARGS)
    except QLearningError as e:
        PARSER.error(str(e))
