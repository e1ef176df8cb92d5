import numpy as np
import pytest

from qlearner.policy import best_action, extract_policy, format_policy

nan = np.nan


def test_picks_highest_value():
    assert best_action(np.array([nan, 1., 3., 2.])) == 2


def test_ties_go_to_the_higher_action():
    assert best_action(np.array([2., nan, 2., 1.])) == 2
    assert best_action(np.array([0., 0., 0.])) == 2


def test_undefined_row_is_terminal():
    assert best_action(np.array([nan, nan])) is None


def test_negative_infinity_is_still_an_action():
    assert best_action(np.array([-np.inf, nan, -np.inf, nan])) == 2
    assert best_action(np.array([-np.inf, -5.])) == 1


def test_extract_policy():
    Q = np.array([
        [nan, 1., 1.],
        [nan, nan, nan],
        [-1., 0., nan],
    ])
    assert extract_policy(Q) == (2, None, 1)


@pytest.mark.parametrize('policy,terminal,expected', [
    ((3, 2, 1, None), 'n', '3 2 1 n'),
    ((None, 0), 'T', 'T 0'),
    ((), 'n', ''),
])
def test_format_policy(policy, terminal, expected):
    assert format_policy(policy, terminal=terminal) == expected
