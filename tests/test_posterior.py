import pytest

from decision_flow.beliefs.posterior import posterior, sequential_posterior
from decision_flow.core.errors import InvalidDistribution, InvalidLikelihood
from decision_flow.decisions.expected_loss import select_minimum_expected_loss


def test_uniform_prior_returns_normalized_likelihood():
    assert posterior([0.5, 0.5], [0.8, 0.2]) == pytest.approx([0.8, 0.2])


def test_posterior_sums_to_one():
    result = posterior([0.2, 0.3, 0.5], [0.9, 0.1, 0.4])
    assert sum(result) == pytest.approx(1.0)
    assert result[0] == pytest.approx(0.18 / (0.18 + 0.03 + 0.2))


def test_diagnostic_test_example():
    # 1% prevalence, 99% sensitivity, 5% false positive rate
    sick, healthy = posterior([0.01, 0.99], [0.99, 0.05])
    assert sick == pytest.approx(0.0099 / (0.0099 + 0.0495))
    assert healthy == pytest.approx(1.0 - sick)


def test_sequential_matches_single_combined_update():
    history = sequential_posterior([0.5, 0.5], [[0.8, 0.2], [0.6, 0.4]])

    assert len(history) == 3
    assert history[0] == [0.5, 0.5]
    assert history[-1] == pytest.approx(posterior([0.5, 0.5], [0.48, 0.08]))


def test_sequential_without_observations_returns_prior():
    assert sequential_posterior([0.25, 0.75], []) == [[0.25, 0.75]]


def test_invalid_prior():
    with pytest.raises(InvalidDistribution):
        posterior([0.5, 0.4], [1.0, 1.0])


def test_length_mismatch():
    with pytest.raises(InvalidLikelihood):
        posterior([0.5, 0.5], [1.0, 1.0, 1.0])


def test_negative_likelihood():
    with pytest.raises(InvalidLikelihood):
        posterior([0.5, 0.5], [-0.1, 1.0])


def test_zero_evidence():
    with pytest.raises(InvalidLikelihood):
        posterior([1.0, 0.0], [0.0, 1.0])


def test_posterior_feeds_selector(robot_decisions):
    # Evidence pointing at H1 makes the risky decision A cheaper
    beliefs = posterior([0.35, 0.65], [0.99, 0.001])
    result = select_minimum_expected_loss(robot_decisions, beliefs)
    assert result.chosen_index == 0
