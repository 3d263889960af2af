"""
Discrete Bayes updates over a finite hypothesis set.

    P(h_i | data) = P(data | h_i) * P(h_i) / sum_j P(data | h_j) * P(h_j)

The result feeds straight into the expected loss selector as its
probability vector.
"""

import logging
from typing import List, Sequence

import numpy as np

from ..core.errors import InvalidLikelihood
from ..core.models import DEFAULT_TOLERANCE
from ..decisions.expected_loss import validate_distribution

logger = logging.getLogger(__name__)


def posterior(
    prior: Sequence[float],
    likelihoods: Sequence[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[float]:
    """
    Combine a prior with the likelihood of one observation under each hypothesis.

    Args:
        prior: Valid probability vector over the hypotheses.
        likelihoods: P(observation | h_i), non-negative and finite.
        tolerance: Sum tolerance used to validate the prior.

    Returns:
        Normalized posterior probabilities.
    """
    prior_arr = np.asarray(validate_distribution(prior, tolerance), dtype=float)
    like_arr = np.asarray(likelihoods, dtype=float)

    if like_arr.ndim != 1 or like_arr.shape != prior_arr.shape:
        raise InvalidLikelihood(
            f"Expected {prior_arr.size} likelihoods, got shape {like_arr.shape}"
        )
    if not np.all(np.isfinite(like_arr)) or np.any(like_arr < 0):
        raise InvalidLikelihood("Likelihoods must be finite and non-negative")

    joint = prior_arr * like_arr
    evidence = joint.sum()
    if evidence <= 0:
        raise InvalidLikelihood("Observation has zero probability under the prior")

    result = joint / evidence
    logger.debug("Posterior %s (evidence %.6g)", np.round(result, 6).tolist(), evidence)
    return result.tolist()


def sequential_posterior(
    prior: Sequence[float],
    observations: Sequence[Sequence[float]],
    tolerance: float = DEFAULT_TOLERANCE,
) -> List[List[float]]:
    """Apply one update per observation; the first element is the prior itself."""
    history = [validate_distribution(prior, tolerance)]
    for step, likelihoods in enumerate(observations, 1):
        history.append(posterior(history[-1], likelihoods, tolerance))
        logger.debug("Belief after observation %d: %s", step, history[-1])
    return history
