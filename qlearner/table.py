from typing import Optional, Sequence, Union

import numpy as np

from qlearner.errors import InvalidParameterError, ShapeError

Rewards = Union[np.ndarray, Sequence[Sequence[Optional[float]]]]


def reward_matrix(rewards: Rewards) -> np.ndarray:
    """
    Normalize rewards into a float array where NaN marks an illegal
    transition. Rows may use None or NaN for illegal entries.
    """
    try:
        rows = [list(row) for row in rewards]
    except TypeError as err:
        raise ShapeError('reward matrix must be a sequence of rows') from err
    if not rows or not rows[0]:
        raise ShapeError('reward matrix is empty')
    if any(len(row) != len(rows[0]) for row in rows):
        raise ShapeError('reward matrix rows differ in length')
    try:
        R = np.array(
            [[np.nan if r is None else r for r in row] for row in rows],
            dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidParameterError(
            'rewards must be numbers or None') from err
    if R.ndim != 2:
        raise ShapeError(f'reward matrix must be 2-D, got shape {R.shape}')
    if np.any(np.isinf(R)):
        raise InvalidParameterError('rewards must be finite')
    return R


def init_Q(R: Rewards) -> np.ndarray:
    R = reward_matrix(R)
    # undefined exactly where R is undefined, 0 everywhere else
    return np.where(np.isnan(R), np.nan, 0.)
