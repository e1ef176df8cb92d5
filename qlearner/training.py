import logging
from typing import Iterable, Sequence, Tuple

import numpy as np

from qlearner.errors import (IllegalTransitionError, InvalidParameterError,
                             ShapeError, StateIndexError)
from qlearner.table import Rewards, reward_matrix

logger = logging.getLogger(__name__)

Path = Sequence[int]


def _is_int(x) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def _is_real(x) -> bool:
    return (isinstance(x, (int, float, np.integer, np.floating))
            and not isinstance(x, bool) and bool(np.isfinite(x)))


def max_Q(Q: np.ndarray, state: int) -> float:
    """Largest defined value in row `state`, -inf if the row has none."""
    row = Q[state]
    return float(np.max(row[~np.isnan(row)], initial=-np.inf))


def update_Q(Q: np.ndarray, R: np.ndarray, state: int, action: int,
             gamma: float) -> float:
    assert not np.isnan(R[state, action])
    # a dead-end successor has max_Q == -inf and 0 * -inf would be NaN
    future = 0. if gamma == 0 else gamma * max_Q(Q, action)
    # Q(s, a) := r(s, a) + gamma * max_a' Q(a, a')
    Q[state, action] = R[state, action] + future
    return Q[state, action]


def replay_path(Q: np.ndarray, R: np.ndarray, path: Path, gamma: float):
    """
    Back up every transition of an already validated path, front to back.
    Each update sees the values written by the ones before it.
    """
    for state, action in zip(path[:-1], path[1:]):
        update_Q(Q, R, state, action, gamma)


def check_path(R: np.ndarray, path: Path) -> Tuple[int, ...]:
    n, _ = R.shape
    path = tuple(path)
    if not path:
        raise InvalidParameterError('paths must contain at least one state')
    for state in path:
        if not _is_int(state):
            raise InvalidParameterError(
                f'path entries must be integers, got {state!r}')
        if not 0 <= state < n:
            raise StateIndexError(state, n)
    for state, action in zip(path[:-1], path[1:]):
        if np.isnan(R[state, action]):
            raise IllegalTransitionError(state, action)
    return tuple(int(s) for s in path)


def train(Q: np.ndarray,
          R: Rewards,
          paths: Iterable[Path],
          gamma: float = .8,
          iterations: int = 10) -> None:
    """
    Q-learning against fixed paths. Each path, in the given order, is
    replayed `iterations` times before the next one starts. Q is updated
    in place.

    All inputs are checked before Q is touched, so a failure leaves Q as
    it was.
    """
    R = reward_matrix(R)
    n, m = R.shape
    if n != m:
        raise ShapeError(
            f'actions index states, so R must be square, got {R.shape}')
    if not isinstance(Q, np.ndarray):
        raise InvalidParameterError(
            'Q must be a numpy array, it is updated in place')
    if Q.shape != R.shape:
        raise ShapeError(f'Q has shape {Q.shape} but R has {R.shape}')
    if not _is_int(iterations) or iterations < 1:
        raise InvalidParameterError(
            f'iterations must be a positive integer, got {iterations!r}')
    if not _is_real(gamma):
        raise InvalidParameterError(
            f'gamma must be a finite real number, got {gamma!r}')
    paths = [check_path(R, path) for path in paths]

    for i, path in enumerate(paths):
        for _ in range(iterations):
            replay_path(Q, R, path, gamma)
        logger.debug('path %d (%d states) replayed %d times', i, len(path),
                     iterations)
    logger.info('trained on %d paths, %d backups', len(paths),
                sum(len(p) - 1 for p in paths) * iterations)
