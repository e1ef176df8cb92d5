from typing import Optional, Sequence, Tuple

import numpy as np

# an entry is the preferred action, or None for a terminal state
Policy = Tuple[Optional[int], ...]


def best_action(row: np.ndarray) -> Optional[int]:
    best, best_q = None, -np.inf
    for action, q in enumerate(row):
        if np.isnan(q):
            continue
        # >= so that the last of several equal maxima wins
        if q >= best_q:
            best, best_q = action, q
    return best


def extract_policy(Q: np.ndarray) -> Policy:
    assert Q.ndim == 2
    return tuple(best_action(row) for row in Q)


def format_policy(policy: Sequence[Optional[int]], terminal: str = 'n') -> str:
    """e.g. '3 2 1 n': state 0 prefers 3, ..., state 3 is terminal"""
    return ' '.join(terminal if a is None else str(a) for a in policy)
