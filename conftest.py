import pytest

from decision_flow.core.models import Decision


@pytest.fixture
def robot_decisions():
    """Decision A risks 1000 under H2, decision B costs 50 under H1"""
    return [[0.0, 1000.0], [50.0, 0.0]]


@pytest.fixture
def robot_probabilities():
    return [0.35, 0.65]


@pytest.fixture
def named_robot_decisions():
    return [
        Decision(name="A", losses=[0.0, 1000.0]),
        Decision(name="B", losses=[50.0, 0.0]),
    ]
