"""
the algorithm: initialize Q, train it on the paths, read off the policy
"""

# stdlib
import logging
from typing import Iterable, NamedTuple, Optional, Sequence

# third party
import numpy as np
from plotly import offline
from plotly import graph_objs as go
from plotly.subplots import make_subplots

# first party
from qlearner.policy import Policy, extract_policy
from qlearner.table import Rewards, init_Q, reward_matrix
from qlearner.training import Path, train

logger = logging.getLogger(__name__)


class Result(NamedTuple):
    Q: np.ndarray
    policy: Policy


def q_learn(rewards: Rewards,
            paths: Iterable[Path],
            gamma: float = .8,
            iterations: int = 10) -> Result:
    """
    Q-learning over a reward matrix, driven by fixed paths.

    Parameters
    ----------
    rewards: n x n matrix, rewards[i][j] is the reward for moving from
        state i to state j, None (or NaN) if that move is not allowed.
    paths: sequences of states to visit, in order.
    gamma: discount applied to the value of the successor state.
    iterations: number of times each path is replayed.

    Returns the trained Q-table (NaN for disallowed moves) and the policy,
    which holds the preferred action per state or None for a final state.
    """
    R = reward_matrix(rewards)
    Q = init_Q(R)
    train(Q, R, paths, gamma=gamma, iterations=iterations)
    policy = extract_policy(Q)
    logger.debug('policy: %s', policy)
    return Result(Q=Q, policy=policy)


def _displayable(Q: np.ndarray) -> np.ndarray:
    # heatmaps cannot color infinities, pin them to the finite range
    finite = Q[np.isfinite(Q)]
    lo, hi = (finite.min(), finite.max()) if finite.size else (0., 0.)
    return np.nan_to_num(Q, nan=np.nan, posinf=hi, neginf=lo)


def plot(*tables: np.ndarray,
         titles: Optional[Sequence[str]] = None,
         layout=None,
         filename: Optional[str] = 'q_values.html',
         auto_open: bool = True) -> go.Figure:
    if layout is None:
        layout = dict()
    if titles is None:
        titles = [str(i) for i in range(len(tables))]
    assert len(titles) == len(tables)

    fig = make_subplots(1, len(tables), subplot_titles=list(titles))
    for j, Q in enumerate(tables, start=1):
        assert Q.ndim == 2
        trace = go.Heatmap(z=_displayable(Q), colorscale='Viridis')
        fig.add_trace(trace, row=1, col=j)
        fig['layout'][f'xaxis{j}'].update(title='action')
        fig['layout'][f'yaxis{j}'].update(title='state', autorange='reversed')

    fig['layout'].update(**layout)
    if filename is not None:
        offline.plot(fig, auto_open=auto_open, filename=filename)
    return fig
