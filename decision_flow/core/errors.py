from typing import List


class DecisionError(Exception):
    """Base exception for decision-problem validation failures."""

    pass


class InvalidDistribution(DecisionError, ValueError):
    """Probabilities out of [0, 1], non-finite, or not summing to 1."""

    pass


class DimensionMismatch(DecisionError, ValueError):
    """A loss vector's length differs from the number of hypotheses."""

    pass


class EmptyDecisionSet(DecisionError, ValueError):
    """No decisions were supplied."""

    pass


class InvalidLossValue(DecisionError, ValueError):
    """A loss value is NaN or infinite."""

    pass


class InvalidLikelihood(DecisionError, ValueError):
    """Likelihoods cannot be combined with the prior."""

    pass


class AmbiguousSelection(DecisionError):
    """Several decisions tie for the minimum expected loss."""

    def __init__(self, indices: List[int], expected_loss: float):
        self.indices = list(indices)
        self.expected_loss = expected_loss
        super().__init__(
            f"Decisions {self.indices} tie for minimum expected loss "
            f"{expected_loss:g}"
        )
