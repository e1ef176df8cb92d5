from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from qlearner.errors import InvalidParameterError, ShapeError


class Gridworld:
    """
    Reward matrix for a grid of cells. Every cell is a state; moving to a
    neighbouring cell that is not a wall is a legal action and earns the
    reward of the destination letter. Absorbing cells can only loop onto
    themselves, for free. Walls have no actions at all.
    """

    def __init__(self,
                 desc: Iterable[Iterable[str]],
                 rewards: Optional[Dict[str, float]] = None,
                 absorbing: str = '',
                 walls: str = '#',
                 actions=np.array([
                     [0, 1],
                     [1, 0],
                     [0, -1],
                     [-1, 0],
                 ]),
                 action_strings: str = "➡⬇⬅⬆"):
        if rewards is None:
            rewards = dict()
        self.actions = actions
        self.action_strings = action_strings
        self.walls = walls
        rows = [list(r) for r in desc]
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ShapeError('grid rows must be non-empty and equally long')
        self.desc = _desc = np.array(rows)  # type: np.ndarray
        nrows, ncols = _desc.shape

        R = np.full((_desc.size, _desc.size), np.nan)
        for i in range(nrows):
            for j in range(ncols):
                letter = str(_desc[i, j])
                s = self.encode(i, j)
                if letter in walls:
                    continue
                if letter in absorbing:
                    R[s, s] = 0.
                    continue
                for di, dj in actions:
                    ni, nj = i + di, j + dj
                    if not (0 <= ni < nrows and 0 <= nj < ncols):
                        continue
                    target = str(_desc[ni, nj])
                    if target not in walls:
                        R[s, self.encode(ni, nj)] = rewards.get(target, 0)
        self.R = R

    @property
    def nS(self) -> int:
        return self.desc.size

    def encode(self, i: int, j: int) -> int:
        nrow, ncol = self.desc.shape
        assert 0 <= i < nrow
        assert 0 <= j < ncol
        return i * ncol + j

    def decode(self, s: int) -> Tuple[int, int]:
        nrow, ncol = self.desc.shape
        assert 0 <= s < nrow * ncol
        return divmod(s, ncol)

    def path(self, *coords: Tuple[int, int]) -> List[int]:
        return [self.encode(i, j) for i, j in coords]

    def find(self, letter: str) -> List[int]:
        return [
            self.encode(int(i), int(j))
            for i, j in np.argwhere(self.desc == letter)
        ]

    def render_policy(self,
                      policy: Sequence[Optional[int]],
                      terminal: str = '●',
                      stay: str = '○') -> str:
        assert len(policy) == self.nS
        out = self.desc.copy().astype(object)
        for s, a in enumerate(policy):
            i, j = self.decode(s)
            if out[i, j] in self.walls:
                continue
            if a is None:
                out[i, j] = terminal
            elif a == s:
                out[i, j] = stay
            else:
                k = []
                if 0 <= a < self.nS:
                    step = np.subtract(self.decode(a), (i, j))
                    k, = np.nonzero(np.all(self.actions == step, axis=1))
                if len(k) == 0:
                    raise InvalidParameterError(
                        f'action {a} of state {s} is not a move on the grid')
                out[i, j] = self.action_strings[k[0]]
        return '\n'.join(''.join(r) for r in out)
