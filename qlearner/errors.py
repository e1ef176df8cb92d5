class QLearningError(Exception):
    pass


class ShapeError(QLearningError, ValueError):
    """reward matrix (or Q) is empty, jagged, or not square"""


class InvalidParameterError(QLearningError, ValueError):
    """bad iteration count, empty path, or non-finite reward"""


class IllegalTransitionError(QLearningError, ValueError):
    def __init__(self, state: int, action: int):
        super().__init__(
            f'no reward defined for transition {state} -> {action}')
        self.state = state
        self.action = action


class StateIndexError(QLearningError, IndexError):
    def __init__(self, state, n: int):
        super().__init__(f'state {state} is outside [0, {n})')
        self.state = state
        self.n = n
