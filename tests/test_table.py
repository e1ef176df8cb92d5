import numpy as np
import pytest

from qlearner.errors import InvalidParameterError, ShapeError
from qlearner.table import init_Q, reward_matrix

_ = None


def test_reward_matrix_marks_illegal_moves_with_nan():
    R = reward_matrix([[_, 1], [0, -2.5]])
    assert R.dtype == np.float64
    assert np.isnan(R[0, 0])
    assert R[0, 1] == 1
    assert R[1, 0] == 0
    assert R[1, 1] == -2.5


def test_reward_matrix_accepts_arrays():
    R = reward_matrix(np.array([[np.nan, 1.], [0., np.nan]]))
    np.testing.assert_array_equal(np.isnan(R), [[True, False], [False, True]])


@pytest.mark.parametrize('rewards', [[], [[]], [[1, 2], [3]], [1, 2]])
def test_reward_matrix_rejects_bad_shapes(rewards):
    with pytest.raises(ShapeError):
        reward_matrix(rewards)


@pytest.mark.parametrize('rewards', [[[np.inf]], [['a']]])
def test_reward_matrix_rejects_bad_rewards(rewards):
    with pytest.raises(InvalidParameterError):
        reward_matrix(rewards)


def test_init_Q_copies_the_defined_partition():
    R = reward_matrix([[_, 5, -1], [_, _, _], [3, _, 0]])
    Q = init_Q(R)
    assert Q.shape == R.shape
    np.testing.assert_array_equal(np.isnan(Q), np.isnan(R))
    assert np.all(Q[~np.isnan(Q)] == 0)


def test_init_Q_allows_rectangular_tables():
    Q = init_Q(reward_matrix([[1, _, 2]]))
    assert Q.shape == (1, 3)



@pytest.mark.parametrize('rewards', [
    np.empty((0, 0)),
    np.zeros(3),
    [[0, _], [0]],
])
def test_init_Q_rejects_bad_shapes(rewards):
    with pytest.raises(ShapeError):
        init_Q(rewards)


def test_init_Q_accepts_nested_lists():
    Q = init_Q([[_, 0], [0, _]])
    np.testing.assert_array_equal(np.isnan(Q), [[True, False], [False, True]])
